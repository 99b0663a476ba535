from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class _CoreOperations(Generic[T]):
    def map(self: 'Enumerable[T]', iteratee: Iteratee[T, U]) -> 'Enumerable[U]':
        """project each (index, item) pair to a new form. length is preserved"""
        from ..enumerable import Enumerable
        def map_data():
            return [iteratee(index, item) for index, item in enumerate(self._get_data())]
        return Enumerable(map_data)

    def filter(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """keep the items whose (index, item) pair satisfies the predicate"""
        from ..enumerable import Enumerable
        def filter_data():
            return [item for index, item in enumerate(self._get_data()) if predicate(index, item)]
        return Enumerable(filter_data)

    def filter_map(self: 'Enumerable[T]', iteratee: FilterIteratee[T, U]) -> 'Enumerable[U]':
        """
        filter and map in a single pass. the iteratee returns a (value, keep) pair
        and only values with a truthy keep flag are collected.
        """
        from ..enumerable import Enumerable
        def filter_map_data():
            result = []
            for index, item in enumerate(self._get_data()):
                value, keep = iteratee(index, item)
                if keep:
                    result.append(value)
            return result
        return Enumerable(filter_map_data)

    def flat_map(self: 'Enumerable[T]', iteratee: Iteratee[T, Iterable[U]]) -> 'Enumerable[U]':
        """map each item to a sequence and concatenate the results in order"""
        from ..enumerable import Enumerable
        def flat_map_data():
            return [value for sublist in self.map(iteratee) for value in sublist]
        return Enumerable(flat_map_data)
