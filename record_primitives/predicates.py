# =============================================================================
# record_primitives/predicates.py - Type & Emptiness Predicates
# =============================================================================
# Leaf primitives: kind checks, constant empty values, nil defaulting and
# emptiness tests. Everything else in the library is built on these.
# =============================================================================

from __future__ import annotations

from collections.abc import Mapping, Sequence, Set
from typing import Any, Callable

from record_primitives.combinators import curry
from record_primitives.types import UNDEFINED, TypeTag, type_tag


def type_is(type_name: str | TypeTag) -> Callable[[Any], bool]:
    """
    Return a predicate that checks a value's kind tag.

    The comparison is exact and case-sensitive against the tags in TypeTag
    ("Null", "Undefined", "Boolean", "Number", "String", "Array", "Object",
    "Function"). An unknown name gives a predicate that is always False.

    Example:
        is_string = type_is("String")
        is_string("abc")  # True
        is_string(1)      # False
    """
    expected = type_name.value if isinstance(type_name, TypeTag) else type_name

    def predicate(value: Any) -> bool:
        return type_tag(value).value == expected

    return predicate


# =============================================================================
# Constant functions
# =============================================================================

def empty_string(*args, **kwargs) -> str:
    return ""


def empty_object(*args, **kwargs) -> dict:
    """Return a new empty dict on every call."""
    return {}


def empty_array(*args, **kwargs) -> list:
    """Return a new empty list on every call."""
    return []


# =============================================================================
# Nil defaulting
# =============================================================================

def is_nil(value: Any) -> bool:
    """True for None and UNDEFINED only."""
    return value is None or value is UNDEFINED


@curry
def default_to(default: Any, value: Any) -> Any:
    """Return default when value is nil, otherwise value."""
    return default if is_nil(value) else value


def default_to_empty_array(value: Any) -> Any:
    return [] if is_nil(value) else value


def default_to_empty_object(value: Any) -> Any:
    return {} if is_nil(value) else value


def default_to_empty_string(value: Any) -> Any:
    return "" if is_nil(value) else value


# =============================================================================
# Emptiness
# =============================================================================

def is_empty(value: Any) -> bool:
    """
    True for containers of length zero.

    Strings, bytes, sequences, mappings and sets count; numbers, booleans
    and None are never empty.
    """
    if isinstance(value, (str, bytes, Sequence, Mapping, Set)):
        return len(value) == 0
    return False


def is_nil_or_empty(value: Any) -> bool:
    """
    Check whether a value is None, UNDEFINED or an empty container.

    Examples:
        is_nil_or_empty(None)  # True
        is_nil_or_empty({})    # True
        is_nil_or_empty(0)     # False
    """
    return is_nil(value) or is_empty(value)
