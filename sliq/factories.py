import typing
from .types import *

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable
    from .dynamic import DynamicSequence

def from_iterable(data: Iterable[T]) -> 'Enumerable[T]':
    """create enumerable from iterable"""
    from .enumerable import Enumerable
    return Enumerable(lambda: list(data))

def repeat(item: T, count: int) -> 'Enumerable[T]':
    """create enumerable with count copies of item (empty for count <= 0)"""
    from .enumerable import Enumerable
    return Enumerable(lambda: [item] * max(count, 0))

def empty() -> 'Enumerable[Any]':
    """create empty enumerable"""
    from .enumerable import Enumerable
    return Enumerable(lambda: [])

def from_dynamic(sequence: 'DynamicSequence') -> 'Enumerable[Any]':
    """create enumerable from the unwrapped items of a dynamic sequence (nil becomes empty)"""
    from .enumerable import Enumerable
    return Enumerable(lambda: sequence.to_python() or [])

# --- aliases ---
P = from_iterable
p = from_iterable
