# =============================================================================
# tests/test_registry.py - Registry and Export Surface Tests
# =============================================================================

import pytest

import record_primitives
from record_primitives import (
    PRIMITIVES,
    DuplicatePrimitiveError,
    PrimitiveNotFoundError,
    export_primitives_documentation,
    filter_by_prop,
    get_primitive,
    list_primitives,
    register_primitive,
    require_primitive,
)


EXPECTED_NAMES = [
    "typeIs", "emptyString", "emptyObject", "emptyArray",
    "defaultToEmptyArray", "defaultToEmptyObject", "defaultToEmptyString",
    "isNilOrEmpty", "firstArgument", "secondArgument", "hasDeep", "pickDeep",
    "getPropOrEmptyString", "getPropOrEmptyObjectFunction",
    "applyByProp", "filterByProp", "findByProp", "dropByProp",
    "filterById", "filterByName", "findById", "findByName", "dropById", "dropByName",
    "renameKeys", "insertCommasInNumber", "check",
]


class TestAggregate:
    """The aggregate object mirrors the module-level exports."""

    def test_all_names_registered(self):
        assert sorted(PRIMITIVES) == sorted(EXPECTED_NAMES)

    def test_same_function_objects(self):
        assert PRIMITIVES["filterByProp"] is filter_by_prop
        assert PRIMITIVES["renameKeys"] is record_primitives.rename_keys
        assert PRIMITIVES["pickDeep"] is record_primitives.pick_deep

    def test_all_exports_importable(self):
        for name in record_primitives.__all__:
            assert hasattr(record_primitives, name), name


class TestLookup:
    """Tests for get_primitive / require_primitive / list_primitives."""

    def test_get(self):
        assert get_primitive("findById") is record_primitives.find_by_id
        assert get_primitive("nope") is None

    def test_require_unknown(self):
        with pytest.raises(PrimitiveNotFoundError) as exc_info:
            require_primitive("nope")
        assert exc_info.value.code == "PRIMITIVE_NOT_FOUND"
        assert "filterByProp" in exc_info.value.details["available"]
        assert "Unknown primitive: nope" in str(exc_info.value)

    def test_require_known_used_in_pipeline(self, users):
        names = ["filterByProp"]
        fn = require_primitive(names[0])
        assert len(fn("role", "dev", users)) == 2

    def test_list_by_category(self):
        assert list_primitives("objects") == ["renameKeys"]
        assert "hasDeep" in list_primitives("accessors")
        assert list_primitives() == list(PRIMITIVES)

    def test_duplicate_registration(self):
        with pytest.raises(DuplicatePrimitiveError):
            register_primitive("renameKeys", lambda: None)
        assert PRIMITIVES["renameKeys"] is record_primitives.rename_keys


class TestDocumentation:
    """Tests for export_primitives_documentation."""

    def test_markdown(self):
        doc = export_primitives_documentation()
        assert doc.startswith("# record_primitives")
        assert "## COLLECTIONS" in doc
        assert "- `renameKeys`: Return a new dict with obj's keys renamed through key_map." in doc

    def test_error_to_dict(self):
        error = DuplicatePrimitiveError("x")
        assert error.to_dict() == {
            "error_code": "DUPLICATE_PRIMITIVE",
            "error_details": {"name": "x"},
        }
        assert str(error) == "[DUPLICATE_PRIMITIVE] Primitive 'x' is already registered"
        assert isinstance(error, ValueError)
