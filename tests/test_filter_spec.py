"""Tests for FilterSpec, SanitizedFilter and the filter collection."""

from __future__ import annotations

import logging

import pytest

from crnk_filtering import (
    ArrayOf,
    FilterCollection,
    FilterOperator,
    FilterSpec,
    Null,
    Scalar,
    filter_array,
)
from crnk_filtering.exceptions import OperatorNotFoundError, ValidationError
from crnk_filtering.filter_spec import split_path

# -- Construction -------------------------------------------------------------


def test_defaults():
    spec = FilterSpec("user.name", "Emil")
    assert spec.operator is FilterOperator.EQ
    assert spec.nullable is False


def test_operator_names_are_parsed():
    assert FilterSpec("a", 1, "like").operator is FilterOperator.LIKE
    assert FilterSpec("a", 1, None).operator is FilterOperator.EQ


def test_unknown_operator_raises():
    with pytest.raises(OperatorNotFoundError) as exc_info:
        FilterSpec("a", 1, "LKE")
    assert "LIKE" in exc_info.value.suggestions


def test_path_must_be_a_string():
    with pytest.raises(ValidationError):
        FilterSpec(None, 1)


@pytest.mark.parametrize("value", [object(), {"a": 1}, [[1, 2]], [1, {"b": 2}]])
def test_unsupported_value_types_raise(value):
    with pytest.raises(ValidationError):
        FilterSpec("user.id", value)


def test_list_values_are_frozen():
    spec = FilterSpec("user.id", [1, 2])
    assert spec.value == (1, 2)
    assert hash(spec) == hash(FilterSpec("user.id", (1, 2)))


# -- Paths --------------------------------------------------------------------


def test_split_path():
    assert split_path("user.address.city") == (("address", "user"), "city")
    assert split_path("auto") == ((), "auto")


def test_relation_segments_and_leaf():
    spec = FilterSpec(" user.contact.email ", "x")
    assert spec.relation_segments == ("contact", "user")
    assert spec.leaf_attribute == "email"


# -- Sanitizing ---------------------------------------------------------------


def test_sanitize_trims_path_and_value():
    sanitized = FilterSpec("  user.name ", "  Emil ", "LIKE").sanitize()
    assert sanitized is not None
    assert sanitized.path == "user.name"
    assert sanitized.value == Scalar("Emil")
    assert sanitized.is_like


@pytest.mark.parametrize(
    "spec",
    [
        FilterSpec("   ", "value"),
        FilterSpec("user", "   "),
        FilterSpec("user", None),
        FilterSpec("user", float("nan"), nullable=True),
        FilterSpec("user", ["", None]),
    ],
)
def test_invalid_specs(spec):
    assert spec.sanitize() is None
    assert spec.is_valid() is False


def test_nullable_none_is_valid():
    sanitized = FilterSpec("user.email", None, nullable=True).sanitize()
    assert sanitized is not None
    assert sanitized.value == Null()


def test_sanitizing_twice_gives_equal_results():
    spec = FilterSpec("user.name", ["Toy ", "Maz"], "LIKE")
    assert spec.sanitize() == spec.sanitize()
    assert spec.sanitize().value == ArrayOf(("Toy", "Maz"))


def test_sanitized_filter_keeps_parsed_operator():
    spec = FilterSpec("user.name", "Emil", " like ")
    assert spec.operator is FilterOperator.LIKE
    assert spec.sanitize().operator is FilterOperator.LIKE


# -- Rendering ----------------------------------------------------------------


def test_flat_value():
    assert FilterSpec("a", [1, 2, 3]).sanitize().flat_value() == "1,2,3"
    assert FilterSpec("a", ["x", "y"], "LIKE").sanitize().flat_value() == "x%,y%"
    assert FilterSpec("a", None, nullable=True).sanitize().flat_value() == "null"


def test_nested_value():
    assert FilterSpec("a", 12).sanitize().nested_value() == '"12"'
    assert FilterSpec("a", [1, 2]).sanitize().nested_value() == '["1", "2"]'
    assert FilterSpec("a", ["Emil"], "LIKE").sanitize().nested_value() == '"Emil%"'
    assert FilterSpec("a", None, "LIKE", True).sanitize().nested_value() == "null"


# -- Collection ---------------------------------------------------------------


def test_filter_array_keeps_valid_specs_in_order(caplog):
    specs = [
        FilterSpec("a", 1),
        FilterSpec("b", ""),
        FilterSpec("c", False),
    ]
    with caplog.at_level(logging.DEBUG, logger="crnk_filtering"):
        valid = filter_array(specs)
    assert [f.path for f in valid] == ["a", "c"]
    assert "Dropping filter" in caplog.text


def test_filter_array_accepts_single_spec_and_none():
    assert len(filter_array(FilterSpec("a", 1))) == 1
    assert filter_array(None) == []


def test_filter_collection_is_a_sequence():
    collection = FilterCollection([FilterSpec("a", 1), FilterSpec("b", 2)])
    assert len(collection) == 2
    assert collection[1].path == "b"
    assert [f.path for f in collection[:1]] == ["a"]
    assert not FilterCollection()
