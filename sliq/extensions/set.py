from __future__ import annotations
import math
import typing
from itertools import chain
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


def _membership(values: List[Any]) -> Callable[[Any], bool]:
    """
    build a membership test over values. hashable values get a set lookup,
    anything else falls back to a linear equality scan. a float nan is never
    a member, matching ==, even when the very same object was excluded.
    """
    try:
        value_set = set(values)
    except TypeError:
        return lambda item: any(item == value for value in values)

    def contains(item: Any) -> bool:
        if isinstance(item, float) and math.isnan(item):
            return False
        try:
            return item in value_set
        except TypeError:
            # unhashable item against hashable values
            return any(item == value for value in values)
    return contains


class SetAccessor(Generic[T]):
    """
    set-like operations that keep the order and duplicates of the source:
    difference, projected difference and concatenation.
    """
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def difference(self, excluded: Iterable[T]) -> 'Enumerable[T]':
        """items of this sequence that are not present in excluded."""
        from ..enumerable import Enumerable
        def difference_data():
            is_excluded = _membership(list(excluded))
            return [item for item in self._enumerable._get_data() if not is_excluded(item)]
        return Enumerable(difference_data)

    def difference_by(self, excluded: Iterable[T], iteratee: Iteratee[T, K]) -> 'Enumerable[T]':
        """
        like difference, but compares iteratee(index, item) projections.
        the returned items are the original, unprojected ones.
        """
        from ..factories import from_iterable
        from ..enumerable import Enumerable
        def difference_by_data():
            data = self._enumerable._get_data()
            projected = self._enumerable.map(iteratee).to.list()
            is_excluded = _membership(from_iterable(excluded).map(iteratee).to.list())
            return [data[index] for index, key in enumerate(projected) if not is_excluded(key)]
        return Enumerable(difference_by_data)

    def concat(self, *others: Iterable[T]) -> 'Enumerable[T]':
        """concatenate with other sequences, preserving all elements and order."""
        from ..enumerable import Enumerable
        # chain avoids building intermediate lists; none of the inputs are touched
        return Enumerable(lambda: list(chain(self._enumerable._get_data(), *others)))
