"""Shared fixtures for crnk-filtering tests."""

from __future__ import annotations

import pytest

from crnk_filtering import FilterOperator, FilterSpec


@pytest.fixture
def filter_array_user() -> list[FilterSpec]:
    return [
        FilterSpec("user.number", "30000", FilterOperator.GE),
        FilterSpec("user.name", "Emil", FilterOperator.LIKE),
        FilterSpec("user.contact.email", "Emil@", FilterOperator.LIKE),
    ]


@pytest.fixture
def filter_array_client() -> list[FilterSpec]:
    return [
        FilterSpec("client.id", "16512"),
        FilterSpec("client.name", "Jag", FilterOperator.LIKE),
    ]


@pytest.fixture
def user_filter_string() -> str:
    return (
        '{"AND": [{"user": {"GE": {"number": "30000"}}}, '
        '{"user": {"LIKE": {"name": "Emil%"}}}, '
        '{"user": {"contact": {"LIKE": {"email": "Emil@%"}}}}]}'
    )


@pytest.fixture
def client_or_filter_string() -> str:
    return (
        '{"OR": [{"client": {"EQ": {"id": "16512"}}}, '
        '{"client": {"LIKE": {"name": "Jag%"}}}]}'
    )
