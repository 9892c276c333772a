"""ValidationService: run registered request schemas against JSON payloads."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import TypeAdapter

from viu_shared.schemas.registry import SCHEMAS, schema_names
from viu_shared.services.base import BaseService
from viu_shared.services.result import ServiceError, ServiceResult
from viu_shared.validation import extract_errors, format_errors_for_display, safe_validate
from viu_shared.validation.schema import ObjectSchema

logger = logging.getLogger(__name__)

_JSONABLE = TypeAdapter(Any)


class ValidationService(BaseService):
    """Validates API payloads by registered schema name."""

    def validate_payload(self, name: str, payload: Any) -> ServiceResult:
        """Validate *payload* against the schema registered as *name*.

        On success ``data["value"]`` holds the normalized payload (defaults
        applied, strings trimmed, dates as ISO strings).
        """
        schema = SCHEMAS.get(name)
        if schema is None:
            return ServiceResult(
                ok=False,
                op="validate",
                error=ServiceError(
                    code="UNKNOWN_SCHEMA",
                    message=f"Unknown schema: {name}",
                    detail={"available": schema_names()},
                ),
            )

        extra = self._settings.validation.extra_keys
        if isinstance(schema, ObjectSchema):
            if extra == "forbid":
                schema = schema.strict()
            elif extra == "allow":
                schema = schema.passthrough()

        result = safe_validate(schema, payload)
        if not result.ok:
            logger.debug("Payload rejected by %s", name)
            return ServiceResult(
                ok=False,
                op="validate",
                data={"schema": name},
                error=ServiceError(
                    code="VALIDATION_FAILED",
                    message=f"{len(result.errors)} validation error(s)",
                    detail={
                        "errors": extract_errors(result),
                        "messages": format_errors_for_display(result),
                    },
                ),
            )
        return ServiceResult(
            ok=True,
            op="validate",
            data={"schema": name, "value": _JSONABLE.dump_python(result.value, mode="json")},
        )

    def list_schemas(self) -> ServiceResult:
        """Registered schema names with their top-level fields."""
        items: list[dict[str, Any]] = []
        for name in schema_names():
            schema = SCHEMAS[name]
            fields = list(schema.fields) if isinstance(schema, ObjectSchema) else []
            items.append({"name": name, "fields": fields})
        return ServiceResult(ok=True, op="list_schemas", data={"items": items, "count": len(items)})
