from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class ScanAccessor(Generic[T]):
    """membership and search over a sequence by equality or by predicate."""

    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def contains(self, target: T) -> bool:
        """true if some item equals target"""
        data = self._enumerable._get_data()
        optimized = self._enumerable._try_numpy_optimization(data, 'contains', target)
        if optimized is not None: return optimized
        return any(item == target for item in data)

    def contains_by(self, predicate: ItemPredicate[T]) -> bool:
        """true if the predicate holds for some item"""
        return any(predicate(item) for item in self._enumerable._get_data())

    def contains_subsequence(self, sub: Iterable[T]) -> bool:
        """
        true if every item of sub occurs somewhere in the sequence.
        this is a membership test, not a contiguous match, and counts are ignored.
        """
        return all(self.contains(item) for item in sub)

    def find(self, predicate: Predicate[T]) -> Found[T]:
        """first item matching the predicate as (item, True), or (None, False)"""
        for index, item in enumerate(self._enumerable._get_data()):
            if predicate(index, item):
                return item, True
        return None, False

    def find_last(self, predicate: Predicate[T]) -> Found[T]:
        """last item matching the predicate, scanning from the end"""
        data = self._enumerable._get_data()
        for index in range(len(data) - 1, -1, -1):
            if predicate(index, data[index]):
                return data[index], True
        return None, False
