from __future__ import annotations
import typing
from ..types import *
from ..dynamic import DynamicSequence

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class FlattenAccessor(Generic[T]):
    """
    flattening over nested data. the sequence is converted to a DynamicSequence
    first, so nesting depth and leaf types are resolved at runtime.
    """

    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def _dynamic(self, annotation: Any) -> DynamicSequence:
        return DynamicSequence.of(self._enumerable._get_data(), annotation)

    def flatten(self, annotation: Any = None) -> 'Enumerable[Any]':
        """
        unwrap one level of nesting. items that are not sequences pass through.
        a flat sequence of one concrete type cannot nest and flattens to nothing.
        """
        from ..enumerable import Enumerable
        return Enumerable(lambda: self._dynamic(annotation).flatten().to_python())

    def flatten_deep(self, annotation: Any = None) -> 'Enumerable[Any]':
        """unwrap every level of nesting, leaves in depth-first order"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: self._dynamic(annotation).flatten_deep().to_python())
