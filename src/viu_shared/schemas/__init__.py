"""Request payload schemas for the public API."""

from viu_shared.schemas.registry import SCHEMAS, get_schema, schema_names

__all__ = ["SCHEMAS", "get_schema", "schema_names"]
