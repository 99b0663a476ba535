from __future__ import annotations
import typing
from itertools import dropwhile
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

_MISSING = object()


def _zero_value(item: Any, cache: Dict[type, Any]) -> Any:
    """the default value of the item's type, or _MISSING when the type has none"""
    item_type = type(item)
    if item_type not in cache:
        try:
            cache[item_type] = item_type()
        except Exception:
            # types that cannot be built without arguments have no zero value
            cache[item_type] = _MISSING
    return cache[item_type]


def _is_zero(item: Any, zero: Any, cache: Dict[type, Any]) -> bool:
    if zero is _MISSING:
        if item is None:
            return True
        zero = _zero_value(item, cache)
        if zero is _MISSING:
            return False
    try:
        return bool(item == zero)
    except (TypeError, ValueError):
        return False


def delete_bounds(size: int, start: int, end: Optional[int] = None) -> Optional[Tuple[int, int]]:
    """
    resolve the half-open range removed by delete_at, or None when the call is a no-op.
    start must lie inside the sequence, end defaults to start + 1 and is clamped to size.
    """
    if start < 0 or start >= size:
        return None
    stop = start + 1 if end is None else end
    if stop <= start:
        return None
    return start, min(stop, size)


class EditAccessor(Generic[T]):
    """structural rewrites: compaction, replacement, deletion and dropping."""

    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def compact(self, zero: Any = _MISSING) -> 'Enumerable[T]':
        """
        remove items equal to the zero value of their type (None, 0, '', False,
        empty containers, default-constructed objects). pass zero to compare
        every item against one explicit value instead.
        """
        from ..enumerable import Enumerable
        def compact_data():
            data = self._enumerable._get_data()
            if zero is _MISSING:
                optimized = self._enumerable._try_numpy_optimization(data, 'compact')
                if optimized is not None: return optimized
            cache: Dict[type, Any] = {}
            return [item for item in data if not _is_zero(item, zero, cache)]
        return Enumerable(compact_data)

    def replace(self, old: T, new: T, n: int) -> 'Enumerable[T]':
        """
        replace the first n occurrences of old with new, left to right.
        a negative n replaces every occurrence, zero replaces nothing.
        """
        from ..enumerable import Enumerable
        def replace_data():
            result = list(self._enumerable._get_data())
            remaining = n
            for index, item in enumerate(result):
                if remaining == 0:
                    break
                if item == old:
                    result[index] = new
                    remaining -= 1
            return result
        return Enumerable(replace_data)

    def replace_all(self, old: T, new: T) -> 'Enumerable[T]':
        """replace every occurrence of old with new"""
        return self.replace(old, new, -1)

    def delete_at(self, start: int, end: Optional[int] = None) -> 'Enumerable[T]':
        """
        remove the half-open index range [start, end), end defaulting to start + 1.
        an out-of-range start, or an end not after start, leaves the sequence as is.
        """
        from ..enumerable import Enumerable
        def delete_data():
            data = self._enumerable._get_data()
            bounds = delete_bounds(len(data), start, end)
            if bounds is None: return list(data)
            lo, hi = bounds
            return data[:lo] + data[hi:]
        return Enumerable(delete_data)

    def drop(self, n: int) -> 'Enumerable[T]':
        """drop the first n items. non-positive n returns this enumerable unchanged"""
        from ..enumerable import Enumerable
        if n <= 0: return self._enumerable
        return Enumerable(lambda: self._enumerable._get_data()[n:])

    def drop_right(self, n: int) -> 'Enumerable[T]':
        """drop the last n items. non-positive n returns this enumerable unchanged"""
        from ..enumerable import Enumerable
        if n <= 0: return self._enumerable
        def drop_right_data():
            data = self._enumerable._get_data()
            return data[:max(len(data) - n, 0)]
        return Enumerable(drop_right_data)

    def drop_while(self, predicate: ItemPredicate[T]) -> 'Enumerable[T]':
        """drop the longest prefix whose items satisfy the predicate"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: list(dropwhile(predicate, self._enumerable._get_data())))

    def drop_right_while(self, predicate: ItemPredicate[T]) -> 'Enumerable[T]':
        """drop the longest suffix whose items satisfy the predicate"""
        from ..enumerable import Enumerable
        def drop_right_while_data():
            data = self._enumerable._get_data()
            end = len(data)
            while end > 0 and predicate(data[end - 1]):
                end -= 1
            return data[:end]
        return Enumerable(drop_right_while_data)
