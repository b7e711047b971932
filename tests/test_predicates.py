"""Tests for validity predicates."""

import copy
import pickle

import pytest
from param_validator import PREDICATES, UNDEFINED, get_predicate, is_defined
from param_validator.predicates import is_int, is_number, non_empty, not_none


class TestUndefined:
    """Tests for the UNDEFINED sentinel."""

    def test_str(self):
        """Test that the sentinel renders as 'undefined'."""
        assert str(UNDEFINED) == "undefined"
        assert f"{UNDEFINED}" == "undefined"

    def test_falsy(self):
        """Test that the sentinel is falsy."""
        assert not UNDEFINED

    def test_singleton(self):
        """Test that copies and pickles keep identity."""
        assert copy.deepcopy(UNDEFINED) is UNDEFINED
        assert pickle.loads(pickle.dumps(UNDEFINED)) is UNDEFINED


class TestIsDefined:
    """Tests for is_defined."""

    @pytest.mark.parametrize("value", [None, 0, "", False, [], {}])
    def test_falsy_values_defined(self, value):
        """Test that falsy values are still defined."""
        assert is_defined(value) is True

    def test_undefined(self):
        """Test that only the sentinel is undefined."""
        assert is_defined(UNDEFINED) is False


class TestNamedPredicates:
    """Tests for the named predicate registry."""

    def test_registry_contains_defined(self):
        """Test that 'defined' maps to is_defined."""
        assert PREDICATES["defined"] is is_defined

    def test_get_predicate(self):
        """Test looking up a predicate by name."""
        assert get_predicate("non_empty") is non_empty

    def test_unknown_predicate(self):
        """Test error on unknown predicate name."""
        with pytest.raises(ValueError, match="Unknown predicate: nope"):
            get_predicate("nope")

    @pytest.mark.parametrize("name", [["x"], {"a": 1}, 3, None])
    def test_non_string_name(self, name):
        """Test that non-string names raise ValueError."""
        with pytest.raises(ValueError, match="Predicate name must be a string"):
            get_predicate(name)

    def test_not_none(self):
        """Test not_none rejects None and UNDEFINED."""
        assert not_none(0) is True
        assert not_none(None) is False
        assert not_none(UNDEFINED) is False

    def test_non_empty(self):
        """Test non_empty on sized and unsized values."""
        assert non_empty("a") is True
        assert non_empty(0) is True
        assert non_empty("") is False
        assert non_empty([]) is False
        assert non_empty(None) is False

    def test_numbers_exclude_bool(self):
        """Test that booleans are not numbers."""
        assert is_int(3) is True
        assert is_int(True) is False
        assert is_number(1.5) is True
        assert is_number(False) is False

    def test_all_registered_predicates_return_bool(self):
        """Test that every predicate returns exactly a bool."""
        for name, predicate in PREDICATES.items():
            for value in (UNDEFINED, None, 0, "x", [1], {"a": 1}, True, 2.5):
                assert isinstance(predicate(value), bool), name
