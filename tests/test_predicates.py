# =============================================================================
# tests/test_predicates.py - Type & Emptiness Predicate Tests
# =============================================================================

import pytest

from record_primitives import (
    UNDEFINED,
    TypeTag,
    default_to,
    default_to_empty_array,
    default_to_empty_object,
    default_to_empty_string,
    empty_array,
    empty_object,
    empty_string,
    is_empty,
    is_nil,
    is_nil_or_empty,
    type_is,
    type_tag,
)


# =============================================================================
# Kind Tags
# =============================================================================

class TestTypeIs:
    """Tests for type_is and type_tag."""

    @pytest.mark.parametrize("value,tag", [
        (None, "Null"),
        (UNDEFINED, "Undefined"),
        (True, "Boolean"),
        (0, "Number"),
        (1.5, "Number"),
        ("", "String"),
        ([], "Array"),
        ((1, 2), "Array"),
        ({}, "Object"),
        (len, "Function"),
        (lambda: None, "Function"),
        ({1, 2}, "Object"),
    ])
    def test_type_tag(self, value, tag):
        """Each value maps to exactly one tag."""
        assert type_tag(value) == tag
        assert type_is(tag)(value) is True

    def test_bool_is_not_number(self):
        """bool subclasses int but is tagged Boolean."""
        assert type_is("Number")(True) is False
        assert type_is("Boolean")(False) is True

    def test_case_sensitive(self):
        """Tag names must match exactly."""
        assert type_is("string")("abc") is False
        assert type_is("String")("abc") is True

    def test_accepts_enum(self):
        """TypeTag members work as names."""
        assert type_is(TypeTag.ARRAY)([1]) is True

    def test_unknown_name_never_matches(self):
        """An unknown tag name gives an always-False predicate."""
        is_date = type_is("Date")
        assert not any(is_date(v) for v in [None, 1, "x", [], {}])


# =============================================================================
# Constant Functions
# =============================================================================

class TestEmptyConstants:
    """Tests for empty_string / empty_object / empty_array."""

    def test_ignore_arguments(self):
        """Arguments are ignored."""
        assert empty_string(1, 2, key="x") == ""
        assert empty_object("a") == {}
        assert empty_array(None) == []

    def test_fresh_containers(self):
        """Each call returns a new container."""
        first = empty_array()
        first.append(1)
        assert empty_array() == []
        assert empty_array() is not empty_array()

        obj = empty_object()
        obj["leak"] = True
        assert empty_object() == {}


# =============================================================================
# Nil Defaulting
# =============================================================================

class TestDefaultTo:
    """Tests for nil defaulting."""

    def test_nil_values(self):
        """None and UNDEFINED are nil."""
        assert is_nil(None)
        assert is_nil(UNDEFINED)
        assert not is_nil(0)
        assert not is_nil("")

    def test_defaults_substitute_nil(self):
        """Nil is replaced by the empty default."""
        assert default_to_empty_array(None) == []
        assert default_to_empty_object(None) == {}
        assert default_to_empty_string(None) == ""
        assert default_to_empty_array(UNDEFINED) == []

    @pytest.mark.parametrize("value", [0, False, "", [], {}, 0.0])
    def test_falsy_values_pass_through(self, value):
        """Falsy but non-nil values are kept."""
        assert default_to_empty_array(value) is value
        assert default_to_empty_string(value) is value
        assert default_to_empty_object(value) is value

    def test_default_is_fresh(self):
        """Substituted containers are not shared."""
        first = default_to_empty_array(None)
        first.append("x")
        assert default_to_empty_array(None) == []

    def test_default_to_is_curried(self):
        """default_to can be partially applied."""
        or_zero = default_to(0)
        assert or_zero(None) == 0
        assert or_zero(5) == 5
        assert default_to("x", None) == "x"


# =============================================================================
# Emptiness
# =============================================================================

class TestIsNilOrEmpty:
    """Tests for is_empty and is_nil_or_empty."""

    @pytest.mark.parametrize("value", [None, UNDEFINED, "", [], {}, (), set(), b""])
    def test_true(self, value):
        assert is_nil_or_empty(value) is True

    @pytest.mark.parametrize("value", [0, 1, False, True, "a", [None], {"a": None}, 0.0])
    def test_false(self, value):
        assert is_nil_or_empty(value) is False

    def test_is_empty_ignores_nil(self):
        """None is nil but not empty."""
        assert is_empty(None) is False
        assert is_empty([]) is True
