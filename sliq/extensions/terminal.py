from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable
    from ..dynamic import DynamicSequence

_MISSING = object()


class TerminalAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    # --- conversions ---

    def list(self) -> List[T]:
        """convert to list"""
        return self._enumerable._get_data()

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._enumerable._get_data())

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._enumerable._get_data())

    def dynamic(self, annotation: Any = None) -> 'DynamicSequence':
        """convert to a type-erased DynamicSequence, optionally with a declared type"""
        from ..dynamic import DynamicSequence
        return DynamicSequence.of(self._enumerable._get_data(), annotation)

    # --- counting and quantifiers ---

    def count(self, item: Any = _MISSING) -> int:
        """number of items, or number of items equal to item when given"""
        data = self._enumerable._get_data()
        if item is _MISSING: return len(data)
        optimized = self._enumerable._try_numpy_optimization(data, 'count', item)
        if optimized is not None: return optimized
        return sum(1 for x in data if x == item)

    def count_by(self, predicate: Predicate[T]) -> int:
        """number of (index, item) pairs satisfying the predicate"""
        return sum(1 for index, x in enumerate(self._enumerable._get_data()) if predicate(index, x))

    def every(self, predicate: Predicate[T]) -> bool:
        """true if every item satisfies the predicate (vacuously true when empty)"""
        return all(predicate(index, x) for index, x in enumerate(self._enumerable._get_data()))

    def some(self, predicate: Predicate[T]) -> bool:
        """true if at least one item satisfies the predicate"""
        return any(predicate(index, x) for index, x in enumerate(self._enumerable._get_data()))

    def none(self, predicate: Predicate[T]) -> bool:
        """true if no item satisfies the predicate"""
        return not self.some(predicate)

    # --- reductions ---

    def reduce(self, combiner: Combiner[T], initial: T) -> T:
        """
        fold left to right, pairing initial with the first item:
        combiner(0, initial, data[0]), then combiner(i, result, data[i]).
        an empty sequence returns initial without calling combiner.
        """
        data = self._enumerable._get_data()
        if not data: return initial
        result = combiner(0, initial, data[0])
        for index in range(1, len(data)):
            result = combiner(index, result, data[index])
        return result

    def reduce_by(self, initial: U, reducer: Reducer[T, U]) -> U:
        """left fold of accumulator = reducer(index, item, accumulator), starting at initial"""
        accumulator = initial
        for index, item in enumerate(self._enumerable._get_data()):
            accumulator = reducer(index, item, accumulator)
        return accumulator

    def reduce_right(self, initial: U, reducer: Reducer[T, U]) -> U:
        """like reduce_by, walking from the last item to the first"""
        data = self._enumerable._get_data()
        accumulator = initial
        for index in range(len(data) - 1, -1, -1):
            accumulator = reducer(index, data[index], accumulator)
        return accumulator

    # --- equality ---

    def equal(self, other: Iterable[T]) -> bool:
        """same length and pairwise equal, in order"""
        data, other_data = self._enumerable._get_data(), list(other)
        if len(data) != len(other_data): return False
        return all(a == b for a, b in zip(data, other_data))

    def equal_with(self, other: Iterable[U], comparator: Comparator[T, U]) -> bool:
        """same length and comparator(mine, theirs) holds pairwise; the types may differ"""
        data, other_data = self._enumerable._get_data(), list(other)
        if len(data) != len(other_data): return False
        return all(comparator(a, b) for a, b in zip(data, other_data))
