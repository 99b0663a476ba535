from __future__ import annotations

import numpy as np
from abc import ABC, abstractmethod
from .types import *

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.scan import ScanAccessor
from .extensions.set import SetAccessor
from .extensions.grouping import GroupingAccessor
from .extensions.edit import EditAccessor
from .extensions.flatten import FlattenAccessor
from .extensions.utility import UtilityAccessor
from .extensions.terminal import TerminalAccessor

# --- abstract base class ---

class IEnumerable(ABC, Generic[T]):
    @abstractmethod
    def _get_data(self) -> List[T]:
        """get the underlying data as a list"""
        pass

# --- base enumerable implementation ---

class _BaseEnumerable(IEnumerable[T]):
    def __init__(self, data_func: Callable[[], List[T]]):
        """init with a function that returns data when called"""
        self._data_func = data_func
        self._cached_result: Optional[List[T]] = None
        self._is_cached = False

    def _get_data(self) -> List[T]:
        """get the current data, caching the result"""
        if not self._is_cached:
            self._cached_result = self._data_func()
            self._is_cached = True
        return self._cached_result

    def _try_numpy_optimization(self, data: List[T], operation: str, value: Any = None) -> Optional[Any]:
        """
        try to run an operation through numpy. only homogeneous int or float data
        qualifies (bools and mixed types would change under array conversion),
        and a compared value must have the same type as the data, since numpy
        compares ints and floats after casting both to float64.
        returns None when the fast path does not apply.
        """
        try:
            if not data or len({type(x) for x in data}) != 1 or type(data[0]) not in (int, float):
                return None
            arr = np.array(data)
            if arr.dtype == object:
                return None
            if operation == 'compact':
                return arr[arr != 0].tolist()
            if type(value) is not type(data[0]):
                return None
            if operation == 'count':
                return int(np.count_nonzero(arr == value))
            elif operation == 'contains':
                return bool(np.any(arr == value))
            return None
        except (TypeError, ValueError, OverflowError):
            return None

    def __iter__(self) -> Iterator[T]:
        return iter(self._get_data())

    def __len__(self) -> int:
        return len(self._get_data())

# --- main enumerable class ---

class Enumerable(
    _BaseEnumerable[T],
    _CoreOperations[T]
):
    """a lazy sequence wrapper exposing scanning, reduction, structural and grouping operations."""
    def __init__(self, data_func: Callable[[], List[T]]):
        super().__init__(data_func)
        # --- initialize accessors ---
        self.scan = ScanAccessor(self)
        self.set = SetAccessor(self)
        self.group = GroupingAccessor(self)
        self.edit = EditAccessor(self)
        self.flat = FlattenAccessor(self)
        self.util = UtilityAccessor(self)
        self.to = TerminalAccessor(self)

    def __repr__(self) -> str:
        return f"Enumerable({self._get_data()!r})"
