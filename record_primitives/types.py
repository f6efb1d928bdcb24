# =============================================================================
# record_primitives/types.py - Core Types
# =============================================================================
# Kind tags, the UNDEFINED sentinel and the type aliases shared by every
# primitive module.
# =============================================================================

from __future__ import annotations

from collections.abc import Callable, Hashable, Mapping, Sequence
from enum import Enum
from numbers import Number
from typing import Any


# =============================================================================
# Undefined sentinel
# =============================================================================

class _Undefined:
    """
    Marker for "no value here", distinct from an explicit None.

    Property lookups use it so that a missing key never compares equal
    to a key that is present and set to None.
    """

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "undefined"

    def __reduce__(self):
        return (_Undefined, ())


UNDEFINED = _Undefined()


# =============================================================================
# Kind tags
# =============================================================================

class TypeTag(str, Enum):
    """The closed set of kind tags reported by type_tag()."""
    NULL = "Null"
    UNDEFINED = "Undefined"
    BOOLEAN = "Boolean"
    NUMBER = "Number"
    STRING = "String"
    ARRAY = "Array"
    OBJECT = "Object"
    FUNCTION = "Function"


def type_tag(value: Any) -> TypeTag:
    """
    Return the kind tag for a value.

    bool is checked before Number since bool subclasses int. Values that
    fit none of the tags (sets, bytes, class instances) are Objects.
    """
    if value is None:
        return TypeTag.NULL
    if value is UNDEFINED:
        return TypeTag.UNDEFINED
    if isinstance(value, bool):
        return TypeTag.BOOLEAN
    if isinstance(value, Number):
        return TypeTag.NUMBER
    if isinstance(value, str):
        return TypeTag.STRING
    if isinstance(value, (list, tuple)):
        return TypeTag.ARRAY
    if isinstance(value, Mapping):
        return TypeTag.OBJECT
    if callable(value):
        return TypeTag.FUNCTION
    return TypeTag.OBJECT


# =============================================================================
# Aliases
# =============================================================================

Record = Mapping[str, Any]
Path = Sequence[Hashable]
KeyMap = Mapping[str, str]
Predicate = Callable[[Any], bool]
Operator = Callable[[Predicate, Sequence[Any]], Any]
