"""Tests for requirement rules and shorthand normalization."""

import pytest
from param_validator import Custom, Required, RequiredOneOf, requirement_from_entry


class TestRequirementObjects:
    """Tests for rule dataclasses."""

    def test_required_needs_name(self):
        """Test that Required rejects an empty name."""
        with pytest.raises(ValueError, match="name is required"):
            Required("")

    def test_one_of_needs_names(self):
        """Test that RequiredOneOf rejects an empty list."""
        with pytest.raises(ValueError, match="at least one"):
            RequiredOneOf([])

    def test_one_of_copies_names(self):
        """Test that RequiredOneOf stores its own list."""
        names = ("a", "b")
        rule = RequiredOneOf(names)  # type: ignore
        assert rule.names == ["a", "b"]

    def test_custom_needs_callable(self):
        """Test that Custom rejects a non-callable predicate."""
        with pytest.raises(TypeError, match="parameter x is not a function"):
            Custom("x", "not callable")  # type: ignore


class TestRequirementFromEntry:
    """Tests for requirement_from_entry."""

    def test_string(self):
        """Test that a string becomes Required."""
        assert requirement_from_entry("a") == Required("a")

    def test_list(self):
        """Test that a list becomes RequiredOneOf."""
        assert requirement_from_entry(["a", "b"]) == RequiredOneOf(["a", "b"])

    def test_mapping(self):
        """Test that a one-key mapping becomes Custom."""
        predicate = bool
        assert requirement_from_entry({"x": predicate}) == Custom("x", predicate)

    def test_rule_object_passthrough(self):
        """Test that rule objects are returned unchanged."""
        rule = Required("a")
        assert requirement_from_entry(rule) is rule

    @pytest.mark.parametrize("entry", ["", [], {}, 0, None, object()])
    def test_unrecognized(self, entry):
        """Test that unrecognized shapes normalize to None."""
        assert requirement_from_entry(entry) is None
