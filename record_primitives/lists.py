# =============================================================================
# record_primitives/lists.py - Collection Operators
# =============================================================================
# Property-matching operations over sequences of records.
#
# apply_by_prop(operator, key, val, collection) is the single building block:
# it defaults a nil collection to [], builds a prop_eq(key, val) predicate and
# hands both to the operator. The three operator families are:
#
#   filter_by_prop   every record whose key equals val (order preserved)
#   find_by_prop     the first such record, or None
#   drop_by_prop     every record whose key does NOT equal val
#
# The *_by_id / *_by_name specializations are memoized on (val, collection).
# Their caches compare serialized arguments, and a hit returns the very list
# (or record) computed the first time. Results must not be mutated.
# =============================================================================

from __future__ import annotations

from collections.abc import Hashable, Mapping
from typing import Any, Iterable

from record_primitives.combinators import MemoCache, curry, memoize
from record_primitives.predicates import default_to_empty_array
from record_primitives.types import UNDEFINED, Operator, Predicate


# =============================================================================
# Matching
# =============================================================================

def _strict_equals(a: Any, b: Any) -> bool:
    # True == 1 in Python; keep booleans and numbers apart
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    return a == b


@curry
def prop_eq(key: Hashable, val: Any, record: Any) -> bool:
    """
    True iff record has key and record[key] strictly equals val.

    Non-mapping records have no properties, so they only match UNDEFINED.
    """
    if isinstance(record, Mapping) and isinstance(key, Hashable):
        actual = record.get(key, UNDEFINED)
    else:
        actual = UNDEFINED
    return _strict_equals(actual, val)


# =============================================================================
# Operators
# =============================================================================

def filter_list(predicate: Predicate, items: Iterable[Any]) -> list:
    return [item for item in items if predicate(item)]


def find_first(predicate: Predicate, items: Iterable[Any]) -> Any:
    return next((item for item in items if predicate(item)), None)


def reject_list(predicate: Predicate, items: Iterable[Any]) -> list:
    return [item for item in items if not predicate(item)]


@curry
def apply_by_prop(operator: Operator, key: Hashable, val: Any, collection: Any) -> Any:
    """
    Apply a property-matching predicate through a list operator.

    Args:
        operator: Called as operator(predicate, items), e.g. filter_list
        key: Property name to match
        val: Value the property must equal
        collection: Sequence of records; None is treated as []

    Returns:
        Whatever the operator returns
    """
    return operator(prop_eq(key, val), default_to_empty_array(collection))


filter_by_prop = apply_by_prop(filter_list)
filter_by_prop.__doc__ = "filter_by_prop(key, val, collection) -> records where key == val"

find_by_prop = apply_by_prop(find_first)
find_by_prop.__doc__ = "find_by_prop(key, val, collection) -> first record where key == val, or None"

drop_by_prop = apply_by_prop(reject_list)
drop_by_prop.__doc__ = "drop_by_prop(key, val, collection) -> records where key != val"


# =============================================================================
# Memoized specializations
# =============================================================================

def make_prop_lookup(operator: Operator, key: Hashable, cache: MemoCache | None = None):
    """
    Fix the operator and key of apply_by_prop and memoize the rest.

    The returned function takes (val, collection), curried, and keeps its
    results in `cache` (a fresh MemoCache when not given).

    Only the call that receives the arguments is cached. find_by_id(3, rows)
    caches the found record, but find_by_id(3) caches the partial function,
    and each later find_by_id(3)(rows) recomputes. Pass both arguments in
    one call where caching matters.
    """
    return memoize(apply_by_prop(operator, key), cache)


filter_by_id = make_prop_lookup(filter_list, "id")
filter_by_name = make_prop_lookup(filter_list, "name")

find_by_id = make_prop_lookup(find_first, "id")
find_by_name = make_prop_lookup(find_first, "name")

drop_by_id = make_prop_lookup(reject_list, "id")
drop_by_name = make_prop_lookup(reject_list, "name")
