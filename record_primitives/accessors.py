# =============================================================================
# record_primitives/accessors.py - Accessors
# =============================================================================
# Positional argument selectors for pipelines, safe deep-path lookup and
# deep picking.
#
# Path traversal rules:
#   - Mappings are indexed by key
#   - lists/tuples are indexed by int (negative counts from the end) or by a
#     non-negative digit string such as "0"
#   - anything else, or a missing key, ends the walk as "not found"
# Traversal never raises.
# =============================================================================

from __future__ import annotations

from collections.abc import Hashable, Mapping
from typing import Any, Iterable

from record_primitives.combinators import MemoCache, curry, memoize
from record_primitives.exceptions import InvalidPathError
from record_primitives.predicates import default_to, empty_object, is_nil_or_empty
from record_primitives.types import UNDEFINED, Path, Record


# =============================================================================
# Positional selectors
# =============================================================================

def first_argument(*args, **kwargs) -> Any:
    """
    Return the first positional argument, or None when there is none.

    Useful at the head of a pipe to keep one argument and drop the rest.
    """
    return args[0] if len(args) > 0 else None


def second_argument(*args, **kwargs) -> Any:
    """Return the second positional argument, or None when there is none."""
    return args[1] if len(args) > 1 else None


# =============================================================================
# Safe traversal
# =============================================================================

def _as_index(key: Any) -> int | None:
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return key
    if isinstance(key, str) and key.isdecimal():
        return int(key)
    return None


def _lookup(data: Any, key: Any) -> Any:
    """One traversal step. Returns UNDEFINED instead of raising."""
    if isinstance(data, Mapping):
        if not isinstance(key, Hashable):
            return UNDEFINED
        return data.get(key, UNDEFINED)

    if isinstance(data, (list, tuple)):
        index = _as_index(key)
        if index is None or not -len(data) <= index < len(data):
            return UNDEFINED
        return data[index]

    return UNDEFINED


@curry
def path_or(default: Any, path: Path, data: Any) -> Any:
    """
    Walk data along path, returning default if the walk fails or ends on nil.

    Examples:
        path_or("n/a", ["a", "b"], {"a": {"b": 1}})    # 1
        path_or("n/a", ["a", "c"], {"a": {"b": 1}})    # "n/a"
        path_or("n/a", ["a", "0"], {"a": ["x", "y"]})  # "x"
    """
    value = data
    for key in path or ():
        value = _lookup(value, key)
        if value is UNDEFINED:
            return default
    return default_to(default, value)


@curry
def has_deep(path: Path, data: Any) -> bool:
    """True iff the value at path exists and is not nil."""
    return path_or(None, path, data) is not None


@curry
def prop_or(default: Any, name: Hashable, record: Any) -> Any:
    """Return record[name], or default when it is missing or nil."""
    return path_or(default, [name], record)


get_prop_or_empty_string = prop_or("")

# The default is the empty_object function itself, not a dict.
get_prop_or_empty_object_function = prop_or(empty_object)


# =============================================================================
# Picking
# =============================================================================

@curry
def pick(keys: Iterable[Hashable], record: Any) -> dict:
    """
    Return a new dict holding only the listed keys that record has.

    Keys come out in the order they are listed. A non-mapping record
    yields an empty dict.
    """
    if not isinstance(record, Mapping):
        return {}
    return {key: record[key] for key in keys if key in record}


def _pick_deep(path: Path, pick_keys: Iterable[Hashable], data: Any) -> Record:
    """
    Pick keys from the value at a nested path, keyed by the path's last segment.

        pick_deep(["a", "b"], [], {"a": {"b": {"x": 1, "y": 2}}})
        # {"b": {"x": 1, "y": 2}}

        pick_deep(["a", "b"], ["x"], {"a": {"b": {"x": 1, "y": 2}}})
        # {"b": {"x": 1}}

    An empty pick list keeps the value as is. A missing value is None, or {}
    when keys are being picked.
    """
    if is_nil_or_empty(path):
        raise InvalidPathError(path)

    value = path_or(None, path, data)
    if not is_nil_or_empty(pick_keys):
        value = pick(pick_keys, value)

    return {path[-1]: value}


def make_pick_deep(cache: MemoCache | None = None):
    """
    Build a memoized, curried pick_deep backed by its own cache.

    The module-level pick_deep is one such instance; build another when
    an isolated cache is needed. Repeat calls return the cached dict itself,
    so callers must not mutate results.

    Like make_prop_lookup, only the call that receives the arguments is
    cached: pick_deep(path)(keys, data) caches the partial, not the result.
    """
    return memoize(curry(_pick_deep), cache)


pick_deep = make_pick_deep()
