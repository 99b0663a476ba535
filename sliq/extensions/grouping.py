from __future__ import annotations
import typing
from collections import defaultdict
from itertools import batched
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class GroupingAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def chunk(self, size: int) -> 'Enumerable[List[T]]':
        """
        split into consecutive chunks of the given size. the last chunk may be
        shorter. a non-positive size yields no chunks at all.
        """
        from ..enumerable import Enumerable
        def chunk_data():
            if size <= 0: return []
            # batched yields tuples, chunks are lists
            return [list(batch) for batch in batched(self._enumerable._get_data(), size)]
        return Enumerable(chunk_data)

    def partition_by(self, predicate: Predicate[T]) -> Tuple[List[T], List[T]]:
        """split into (matching, non-matching) items, each in input order"""
        true_items, false_items = [], []
        for index, item in enumerate(self._enumerable._get_data()):
            (true_items if predicate(index, item) else false_items).append(item)
        return true_items, false_items

    def group_with(self, key_selector: KeySelector[T, K]) -> Dict[K, List[T]]:
        """group items by key. items keep their input order within a group"""
        groups = defaultdict(list)
        for item in self._enumerable._get_data():
            groups[key_selector(item)].append(item)
        return dict(groups)
