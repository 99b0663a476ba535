from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class UtilityAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def for_each(self, iteratee: Callable[[int, T], Any]) -> 'Enumerable[T]':
        """
        calls iteratee(index, item) for every item, for side-effects.
        this is an EAGER operation that executes immediately.
        returns the original enumerable to allow chaining.
        """
        for index, item in enumerate(self._enumerable._get_data()):
            iteratee(index, item)
        return self._enumerable

    def for_each_with_break(self, iteratee: Callable[[int, T], bool]) -> 'Enumerable[T]':
        """
        like for_each, but stops right after the first call that returns a falsy value.
        eager, returns the original enumerable.
        """
        for index, item in enumerate(self._enumerable._get_data()):
            if not iteratee(index, item):
                break
        return self._enumerable
