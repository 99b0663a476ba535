"""
type-erased sequences for operations whose element type and nesting depth are
only known at runtime.

untyped input is converted once, at the boundary, into a tree of tagged values
(``Leaf`` / ``Nested``) paired with a ``TypeDescriptor`` for its elements.
flattening and coercion then work on that tree without inspecting python
container types again.
"""
from __future__ import annotations

import typing
from collections.abc import Sequence as _AbcSequence
from dataclasses import dataclass
from enum import Enum

import numpy as np
import pandas as pd

from .logger import logger
from .types import *

_log = logger.getChild("dynamic")


class Kind(Enum):
    ANY = "any"
    SEQUENCE = "sequence"
    SCALAR = "scalar"


@dataclass(frozen=True)
class TypeDescriptor:
    """runtime description of an element type"""
    kind: Kind
    scalar: Optional[type] = None
    elem: Optional['TypeDescriptor'] = None

    @classmethod
    def any(cls) -> 'TypeDescriptor':
        return cls(Kind.ANY)

    @classmethod
    def of_scalar(cls, scalar: type) -> 'TypeDescriptor':
        return cls(Kind.SCALAR, scalar=scalar)

    @classmethod
    def sequence_of(cls, elem: 'TypeDescriptor') -> 'TypeDescriptor':
        return cls(Kind.SEQUENCE, elem=elem)

    @classmethod
    def from_annotation(cls, annotation: Any) -> 'TypeDescriptor':
        """
        build a descriptor from a type annotation such as ``int``, ``Any``,
        ``list[str]`` or ``list[list[int]]``. bare ``list``/``tuple`` mean a
        sequence of anything.
        """
        if annotation is Any or annotation is object:
            return cls.any()
        if annotation in (list, tuple):
            return cls.sequence_of(cls.any())

        origin = typing.get_origin(annotation)
        if origin in (list, tuple, _AbcSequence):
            args = typing.get_args(annotation)
            return cls.sequence_of(cls.from_annotation(args[0]) if args else cls.any())

        if isinstance(annotation, type):
            return cls.of_scalar(annotation)
        raise TypeError(f"unsupported element annotation: {annotation!r}")

    @property
    def admits_nesting(self) -> bool:
        return self.kind in (Kind.SEQUENCE, Kind.ANY)

    def innermost(self) -> 'TypeDescriptor':
        """walk through sequence kinds until a non-sequence kind is reached"""
        descriptor = self
        while descriptor.kind is Kind.SEQUENCE:
            descriptor = descriptor.elem
        return descriptor

    def accepts(self, value: 'DynamicValue') -> bool:
        """check that a dynamic value conforms to this descriptor, recursively"""
        if self.kind is Kind.ANY:
            return True
        if self.kind is Kind.SEQUENCE:
            return isinstance(value, Nested) and all(self.elem.accepts(child) for child in value.items)
        return isinstance(value, Leaf) and isinstance(value.value, self.scalar)

    def __str__(self) -> str:
        depth, descriptor = 0, self
        while descriptor.kind is Kind.SEQUENCE:
            depth += 1
            descriptor = descriptor.elem
        inner = "Any" if descriptor.kind is Kind.ANY else descriptor.scalar.__name__
        return "list[" * depth + inner + "]" * depth


class DynamicValue:
    """a value whose shape is only known at runtime: a Leaf or a Nested sequence"""

    def unwrap(self) -> Any:
        raise NotImplementedError


@dataclass(frozen=True)
class Leaf(DynamicValue):
    value: Any

    def unwrap(self) -> Any:
        return self.value


@dataclass(frozen=True)
class Nested(DynamicValue):
    items: Tuple[DynamicValue, ...]

    def unwrap(self) -> List[Any]:
        root: List[Any] = []
        stack = [(iter(self.items), root)]
        while stack:
            items, out = stack[-1]
            item = next(items, None)
            if item is None:
                stack.pop()
            elif isinstance(item, Nested):
                inner: List[Any] = []
                out.append(inner)
                stack.append((iter(item.items), inner))
            else:
                out.append(item.unwrap())
        return root


# --- boundary helpers ---

def _is_sequence(value: Any) -> bool:
    from .enumerable import IEnumerable
    if isinstance(value, np.ndarray):
        return value.ndim > 0
    return isinstance(value, (list, tuple, pd.Series, IEnumerable))


def _as_list(value: Any) -> List[Any]:
    from .enumerable import IEnumerable
    if isinstance(value, (np.ndarray, pd.Series)):
        # tolist converts numpy scalars into native python values
        return value.tolist()
    if isinstance(value, IEnumerable):
        return list(value._get_data())
    return list(value)


def _leaf(value: Any) -> Leaf:
    if isinstance(value, np.generic):
        value = value.item()
    return Leaf(value)


def wrap(value: Any) -> DynamicValue:
    """convert an untyped python value into a dynamic value tree"""
    if isinstance(value, DynamicValue):
        return value
    if not _is_sequence(value):
        return _leaf(value)

    # each frame holds a container's children and the values built so far
    stack: List[Tuple[List[Any], List[DynamicValue]]] = [(_as_list(value), [])]
    while True:
        children, built = stack[-1]
        if len(built) == len(children):
            stack.pop()
            node = Nested(tuple(built))
            if not stack:
                return node
            stack[-1][1].append(node)
            continue
        child = children[len(built)]
        if isinstance(child, DynamicValue):
            built.append(child)
        elif _is_sequence(child):
            stack.append((_as_list(child), []))
        else:
            built.append(_leaf(child))


def infer_descriptor(values: List[DynamicValue]) -> TypeDescriptor:
    """
    infer the element descriptor shared by a list of dynamic values.
    all nested -> sequence of the descriptor inferred over their children,
    all leaves of one exact type -> that scalar, anything else (including an
    empty list) -> any.
    """
    depth = 0
    while values and all(isinstance(v, Nested) for v in values):
        values = [child for v in values for child in v.items]
        depth += 1

    descriptor = TypeDescriptor.any()
    if values and all(isinstance(v, Leaf) for v in values):
        leaf_types = {type(v.value) for v in values}
        if len(leaf_types) == 1:
            descriptor = TypeDescriptor.of_scalar(leaf_types.pop())

    for _ in range(depth):
        descriptor = TypeDescriptor.sequence_of(descriptor)
    return descriptor


def _is_exact_instance(value: Any, target: type) -> bool:
    # bool is an int subclass but never counts as one here
    if target is int and isinstance(value, bool):
        return False
    return isinstance(value, target)


class DynamicSequence:
    """
    a type-erased sequence: an element descriptor plus a list of dynamic values.
    the nil sequence carries a descriptor but no items at all.
    """

    def __init__(self, elem_type: TypeDescriptor, items: Optional[Iterable[DynamicValue]]):
        self.elem_type = elem_type
        self._items: Optional[List[DynamicValue]] = None if items is None else list(items)

    @classmethod
    def of(cls, value: Any, annotation: Any = None) -> 'DynamicSequence':
        """
        build a dynamic sequence from untyped input.

        ``annotation`` describes the whole sequence (``list[list[int]]``);
        when omitted the element descriptor is inferred from the values.
        ``None`` becomes the nil sequence.
        """
        if isinstance(value, DynamicSequence):
            return value

        declared = TypeDescriptor.from_annotation(annotation) if annotation is not None else None
        if declared is not None and declared.kind is not Kind.SEQUENCE:
            raise TypeError(f"annotation must describe a sequence, got {declared}")

        if value is None:
            return cls.nil(declared.elem if declared else None)
        if not _is_sequence(value):
            raise TypeError(f"expected a sequence, got {type(value).__name__}")

        items = [wrap(child) for child in _as_list(value)]
        if declared is None:
            return cls(infer_descriptor(items), items)

        for index, item in enumerate(items):
            if not declared.elem.accepts(item):
                raise TypeError(f"element at index {index} does not match {declared.elem}: {item.unwrap()!r}")
        return cls(declared.elem, items)

    @classmethod
    def nil(cls, elem_type: Optional[TypeDescriptor] = None) -> 'DynamicSequence':
        return cls(elem_type or TypeDescriptor.any(), None)

    @property
    def is_nil(self) -> bool:
        return self._items is None

    @property
    def items(self) -> Tuple[DynamicValue, ...]:
        return tuple(self._items or ())

    def __len__(self) -> int:
        return len(self._items) if self._items is not None else 0

    def __iter__(self) -> Iterator[DynamicValue]:
        return iter(self._items or ())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DynamicSequence):
            return NotImplemented
        return self.elem_type == other.elem_type and self._items == other._items

    def __repr__(self) -> str:
        if self.is_nil:
            return f"DynamicSequence(list[{self.elem_type}], nil)"
        return f"DynamicSequence(list[{self.elem_type}], {self.to_python()!r})"

    def to_python(self) -> Optional[List[Any]]:
        """unwrap back into (nested) python lists; None for the nil sequence"""
        if self.is_nil:
            return None
        return [item.unwrap() for item in self._items]

    # --- flattening ---

    def flatten(self) -> 'DynamicSequence':
        """
        unwrap exactly one level of nesting.

        only defined when the element type admits nesting (a sequence or any).
        for a flat sequence of a concrete type the result is an empty sequence
        and a warning is logged; the input data is not carried over.
        """
        if self.elem_type.kind is Kind.SEQUENCE:
            result_type = self.elem_type.elem
        elif self.elem_type.kind is Kind.ANY:
            result_type = TypeDescriptor.any()
        else:
            _log.warning("flatten called on a sequence of %s, which cannot nest; returning an empty sequence",
                         self.elem_type)
            return DynamicSequence(self.elem_type, [])

        result: List[DynamicValue] = []
        for item in self:
            if isinstance(item, Nested):
                result.extend(item.items)
            else:
                result.append(item)
        return DynamicSequence(result_type, result)

    def flatten_deep(self) -> 'DynamicSequence':
        """flatten every level of nesting, keeping leaves in depth-first encounter order"""
        leaf_type = self.elem_type.innermost()
        _log.debug("flatten_deep: %d top-level items, leaf type %s", len(self), leaf_type)

        result: List[DynamicValue] = []
        stack = list(reversed(self.items))
        while stack:
            item = stack.pop()
            if isinstance(item, Nested):
                stack.extend(reversed(item.items))
            else:
                result.append(item)
        return DynamicSequence(leaf_type, result)

    # --- coercion ---

    def to_opaque_slice(self) -> Optional[List[Any]]:
        """plain list of unwrapped elements, None for the nil sequence"""
        return self.to_python()

    def to_string_slice(self) -> List[str]:
        return self._coerce(str)

    def to_int_slice(self) -> List[int]:
        return self._coerce(int)

    def _coerce(self, target: type) -> List[Any]:
        result = []
        for index, item in enumerate(self):
            value = item.unwrap()
            if isinstance(item, Nested) or not _is_exact_instance(value, target):
                _log.error("cannot coerce element %d (%r) to %s", index, value, target.__name__)
                raise InvalidElementTypeError(index, target, value)
            result.append(value)
        return result
