# =============================================================================
# record_primitives/combinators.py - Currying, Memoization and Composition
# =============================================================================
# The higher-order building blocks every other module is written with:
#
#   curry(fn)          partial application by positional arguments
#   memoize(fn)        result caching keyed on serialized arguments
#   compose / pipe     right-to-left / left-to-right function composition
#   to_string(value)   deterministic structural serialization
#
# Memoization caches are explicit MemoCache objects. They are unbounded,
# never evicted and live as long as the function holding them. They are not
# thread-safe; callers sharing a memoized primitive across threads must lock.
# =============================================================================

from __future__ import annotations

import functools
import inspect
import json
import logging
from collections.abc import Mapping, Set
from numbers import Number
from typing import Any, Callable

from record_primitives.types import UNDEFINED

logger = logging.getLogger(__name__)

_MISSING = object()


# =============================================================================
# Serialization
# =============================================================================

def to_string(value: Any, _stack: frozenset[int] = frozenset()) -> str:
    """
    Serialize a value into a stable string.

    Two values that are structurally equal serialize identically: mapping
    keys are sorted by their serialized form, so insertion order does not
    matter. Strings are quoted, so "1" and 1 differ. A container that
    contains itself is rendered as <Circular> at the point of recursion.

    Examples:
        to_string({"b": 1, "a": [True, None]})  # '{"a": [true, null], "b": 1}'
        to_string(("x", 2))                     # '("x", 2)'
    """
    if value is None:
        return "null"
    if value is UNDEFINED:
        return "undefined"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, Number):
        return str(value)

    if not isinstance(value, (Mapping, list, tuple, Set)):
        return repr(value)

    if id(value) in _stack:
        return "<Circular>"
    stack = _stack | {id(value)}

    if isinstance(value, Mapping):
        pairs = sorted(
            (to_string(k, stack), to_string(v, stack)) for k, v in value.items()
        )
        return "{" + ", ".join(f"{k}: {v}" for k, v in pairs) + "}"

    if isinstance(value, Set):
        return "set(" + ", ".join(sorted(to_string(v, stack) for v in value)) + ")"

    items = ", ".join(to_string(v, stack) for v in value)
    if isinstance(value, tuple):
        return f"({items})"
    return f"[{items}]"


# =============================================================================
# Currying
# =============================================================================

def _required_positional_count(fn: Callable) -> int:
    """Count the positional parameters of fn that have no default."""
    params = inspect.signature(fn).parameters.values()
    return sum(
        1 for p in params
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)
        and p.default is p.empty
    )


def curry(fn: Callable, arity: int | None = None) -> Callable:
    """
    Return a curried version of fn.

    Calling the result with fewer than `arity` positional arguments returns
    a new function waiting for the rest; once enough arguments have been
    collected fn is called with all of them. Calling with no arguments
    returns the same function.

    Each partial application captures its own tuple of bound arguments, so
    a partial can be reused any number of times:

        add3 = curry(lambda a, b, c: a + b + c)
        add_1 = add3(1)
        add_1(2, 3)   # 6
        add_1(2)(10)  # 13
    """
    if arity is None:
        arity = _required_positional_count(fn)

    def bind(bound: tuple) -> Callable:
        @functools.wraps(fn)
        def curried(*args):
            combined = bound + args
            if len(combined) >= arity:
                return fn(*combined)
            if not args:
                return curried
            return bind(combined)

        curried.arity = arity - len(bound)
        return curried

    return bind(())


# =============================================================================
# Memoization
# =============================================================================

class MemoCache:
    """
    Result cache owned by a single memoized function.

    Keys are serialized argument tuples (see to_string). Entries are never
    evicted; clear() empties the cache and resets the counters.
    """

    def __init__(self) -> None:
        self._entries: dict[str, Any] = {}
        self.hits = 0
        self.misses = 0

    def lookup(self, key: str) -> Any:
        """Return the cached value for key, or _MISSING. Updates hit counters."""
        value = self._entries.get(key, _MISSING)
        if value is _MISSING:
            self.misses += 1
        else:
            self.hits += 1
        return value

    def get(self, key: str, default: Any = None) -> Any:
        return self._entries.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._entries[key] = value

    def clear(self) -> None:
        self._entries.clear()
        self.hits = 0
        self.misses = 0

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"MemoCache(size={len(self)}, hits={self.hits}, misses={self.misses})"


def memoize(fn: Callable, cache: MemoCache | None = None) -> Callable:
    """
    Cache fn's results keyed on to_string() of its positional arguments.

    The cache is exposed as `.cache` on the returned function. Pass a fresh
    MemoCache to get an instance independent of any other.

    Arguments that serialize identically share a cache entry. Objects
    without a structural form serialize through repr(), so two such objects
    whose reprs match are treated as the same argument.
    """
    cache = MemoCache() if cache is None else cache
    name = getattr(fn, "__name__", repr(fn))

    @functools.wraps(fn)
    def memoized(*args):
        key = to_string(args)
        cached = cache.lookup(key)
        if cached is not _MISSING:
            logger.debug(f"Cache hit for {name}{key}")
            return cached

        logger.debug(f"Cache miss for {name}{key}")
        result = fn(*args)
        cache.set(key, result)
        return result

    memoized.cache = cache
    return memoized


# =============================================================================
# Composition
# =============================================================================

def pipe(*fns: Callable) -> Callable:
    """
    Left-to-right composition.

    The first function receives every argument of the call; each later
    function receives the previous result.

        pipe(first_argument, insert_commas_in_number)(1234, "ignored")  # "1,234"
    """
    if not fns:
        raise ValueError("pipe requires at least one function")

    head, rest = fns[0], fns[1:]

    def piped(*args, **kwargs):
        result = head(*args, **kwargs)
        for fn in rest:
            result = fn(result)
        return result

    return piped


def compose(*fns: Callable) -> Callable:
    """Right-to-left composition: compose(f, g)(x) == f(g(x))."""
    if not fns:
        raise ValueError("compose requires at least one function")
    return pipe(*reversed(fns))
