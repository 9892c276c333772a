"""Tests for the schema name registry."""

import pytest

from viu_shared.schemas import SCHEMAS, get_schema, schema_names
from viu_shared.schemas.auth import LOGIN_REQUEST
from viu_shared.validation import ObjectSchema


class TestRegistry:
    def test_lookup(self) -> None:
        assert get_schema("login") is LOGIN_REQUEST

    def test_unknown(self) -> None:
        with pytest.raises(KeyError, match="Unknown schema 'nope'"):
            get_schema("nope")

    def test_names_sorted(self) -> None:
        names = schema_names()
        assert names == sorted(names)
        assert "create-project" in names

    def test_names_are_kebab_case(self) -> None:
        for name in SCHEMAS:
            assert name == name.lower()
            assert "_" not in name

    def test_every_entry_is_an_object_schema(self) -> None:
        assert all(isinstance(schema, ObjectSchema) for schema in SCHEMAS.values())
