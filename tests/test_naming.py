"""Tests para la normalización de nombres de campo."""

import pytest

from graphql_matchers.naming import camelize


@pytest.mark.parametrize("name, expected", [
    ("first_name", "firstName"),
    ("firstName", "firstName"),
    ("name", "name"),
    ("_", "_"),
    ("_private_field", "_privateField"),
    ("__double__under", "__doubleUnder"),
    ("user_ID", "userId"),
    ("trailing_", "trailing"),
    ("Already_Upper", "alreadyUpper"),
])
def test_camelize(name, expected):
    assert camelize(name) == expected


def test_camelize_accepts_non_strings():
    assert camelize(123) == "123"
