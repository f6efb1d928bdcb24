# =============================================================================
# record_primitives - Composable Data-Transformation Primitives
# =============================================================================
# Small pure functions for working with plain records (dicts) and sequences
# of records, meant to be composed into longer pipelines.
#
# Key principles:
# - Every primitive is pure (same input = same output)
# - Multi-argument primitives are curried
# - Nil input is defaulted, never raised on
#
# Usage:
#   from record_primitives import pipe, filter_by_prop, rename_keys
#
#   active_names = pipe(
#       filter_by_prop("status", "active"),
#       lambda rows: [rename_keys({"full_name": "name"}, r) for r in rows],
#   )
#   active_names(rows)
#
# PRIMITIVES maps each primitive's pipeline name to the same function:
#   PRIMITIVES["filterByProp"] is filter_by_prop
# =============================================================================

from record_primitives.accessors import (
    first_argument,
    second_argument,
    path_or,
    has_deep,
    prop_or,
    get_prop_or_empty_string,
    get_prop_or_empty_object_function,
    pick,
    pick_deep,
    make_pick_deep,
)
from record_primitives.combinators import MemoCache, compose, curry, memoize, pipe, to_string
from record_primitives.debug import check
from record_primitives.logging_config import setup_logging
from record_primitives.exceptions import (
    PrimitiveError,
    InvalidPathError,
    DuplicatePrimitiveError,
    PrimitiveNotFoundError,
)
from record_primitives.lists import (
    prop_eq,
    filter_list,
    find_first,
    reject_list,
    apply_by_prop,
    filter_by_prop,
    find_by_prop,
    drop_by_prop,
    filter_by_id,
    filter_by_name,
    find_by_id,
    find_by_name,
    drop_by_id,
    drop_by_name,
    make_prop_lookup,
)
from record_primitives.objects import rename_keys
from record_primitives.predicates import (
    type_is,
    empty_string,
    empty_object,
    empty_array,
    is_nil,
    default_to,
    default_to_empty_array,
    default_to_empty_object,
    default_to_empty_string,
    is_empty,
    is_nil_or_empty,
)
from record_primitives.registry import (
    PRIMITIVES,
    register_primitive,
    get_primitive,
    require_primitive,
    list_primitives,
    export_primitives_documentation,
)
from record_primitives.strings import insert_commas_in_number
from record_primitives.types import UNDEFINED, TypeTag, type_tag

__version__ = "1.0.0"


# =============================================================================
# Registration
# =============================================================================

_EXPORTS = {
    "predicates": {
        "typeIs": type_is,
        "emptyString": empty_string,
        "emptyObject": empty_object,
        "emptyArray": empty_array,
        "defaultToEmptyArray": default_to_empty_array,
        "defaultToEmptyObject": default_to_empty_object,
        "defaultToEmptyString": default_to_empty_string,
        "isNilOrEmpty": is_nil_or_empty,
    },
    "accessors": {
        "firstArgument": first_argument,
        "secondArgument": second_argument,
        "hasDeep": has_deep,
        "pickDeep": pick_deep,
        "getPropOrEmptyString": get_prop_or_empty_string,
        "getPropOrEmptyObjectFunction": get_prop_or_empty_object_function,
    },
    "collections": {
        "applyByProp": apply_by_prop,
        "filterByProp": filter_by_prop,
        "findByProp": find_by_prop,
        "dropByProp": drop_by_prop,
        "filterById": filter_by_id,
        "filterByName": filter_by_name,
        "findById": find_by_id,
        "findByName": find_by_name,
        "dropById": drop_by_id,
        "dropByName": drop_by_name,
    },
    "objects": {
        "renameKeys": rename_keys,
    },
    "strings": {
        "insertCommasInNumber": insert_commas_in_number,
    },
    "debug": {
        "check": check,
    },
}

for _category, _primitives in _EXPORTS.items():
    for _name, _fn in _primitives.items():
        register_primitive(_name, _fn, category=_category)

del _category, _primitives, _name, _fn


__all__ = [
    # Predicates
    "type_is",
    "empty_string",
    "empty_object",
    "empty_array",
    "is_nil",
    "default_to",
    "default_to_empty_array",
    "default_to_empty_object",
    "default_to_empty_string",
    "is_empty",
    "is_nil_or_empty",
    # Accessors
    "first_argument",
    "second_argument",
    "path_or",
    "has_deep",
    "prop_or",
    "get_prop_or_empty_string",
    "get_prop_or_empty_object_function",
    "pick",
    "pick_deep",
    "make_pick_deep",
    # Collections
    "prop_eq",
    "filter_list",
    "find_first",
    "reject_list",
    "apply_by_prop",
    "filter_by_prop",
    "find_by_prop",
    "drop_by_prop",
    "filter_by_id",
    "filter_by_name",
    "find_by_id",
    "find_by_name",
    "drop_by_id",
    "drop_by_name",
    "make_prop_lookup",
    # Objects / strings / debug
    "rename_keys",
    "insert_commas_in_number",
    "check",
    "setup_logging",
    # Composition
    "curry",
    "memoize",
    "MemoCache",
    "compose",
    "pipe",
    "to_string",
    # Types
    "UNDEFINED",
    "TypeTag",
    "type_tag",
    # Registry
    "PRIMITIVES",
    "register_primitive",
    "get_primitive",
    "require_primitive",
    "list_primitives",
    "export_primitives_documentation",
    # Errors
    "PrimitiveError",
    "InvalidPathError",
    "DuplicatePrimitiveError",
    "PrimitiveNotFoundError",
]
