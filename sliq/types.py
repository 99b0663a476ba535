from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Type, Sequence
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

# (index, item) callables, unless noted otherwise
Predicate = Callable[[int, T], bool]
Iteratee = Callable[[int, T], U]
ItemPredicate = Callable[[T], bool]
KeySelector = Callable[[T], K]
FilterIteratee = Callable[[int, T], Tuple[U, bool]]
Combiner = Callable[[int, T, T], T]
Reducer = Callable[[int, T, U], U]
Comparator = Callable[[T, U], bool]

# returned by find/find_last: (item, found)
Found = Tuple[Optional[T], bool]


class InvalidElementTypeError(TypeError):
    """raised when a dynamic sequence element does not have the asserted type"""

    def __init__(self, index: int, expected: type, actual: Any):
        self.index = index
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"invalid element type at index {index}: expected {expected.__name__}, "
            f"got {type(actual).__name__}"
        )
