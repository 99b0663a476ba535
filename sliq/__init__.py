r"""
       .__  .__
  _____|  | |__| ______
 /  ___/  | |  |/ ____/
 \___ \|  |_|  < <_|  |
/____  >____/__|\__   |
     \/            |__|
"""

# expose the main class
from .enumerable import Enumerable

# expose the factory functions
from .factories import (
    from_iterable,
    repeat,
    empty,
    from_dynamic,
    P,
    p
)

# expose the dynamic flattening types
from .dynamic import (
    DynamicSequence,
    DynamicValue,
    Leaf,
    Nested,
    TypeDescriptor,
    Kind
)

# expose errors
from .types import InvalidElementTypeError

# functional interface, used as `from sliq import ops`
from . import ops

# define what `import *` does
__all__ = [
    "Enumerable",
    "from_iterable",
    "repeat",
    "empty",
    "from_dynamic",
    "P",
    "p",
    "DynamicSequence",
    "DynamicValue",
    "Leaf",
    "Nested",
    "TypeDescriptor",
    "Kind",
    "InvalidElementTypeError",
    "ops"
]
