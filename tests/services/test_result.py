"""Tests for ServiceResult and ServiceError."""

import pydantic
import pytest

from viu_shared.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_defaults(self) -> None:
        result = ServiceResult(ok=True, op="check_cpf")
        assert result.data == {}
        assert result.warnings == []
        assert result.error is None

    def test_error_payload(self) -> None:
        result = ServiceResult(ok=False, op="validate", error=ServiceError(code="X", message="m"))
        assert result.error is not None
        assert result.error.detail == {}

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="x")
        with pytest.raises(pydantic.ValidationError):
            result.ok = False  # type: ignore[misc]

    def test_json_round_trip_shape(self) -> None:
        result = ServiceResult(ok=True, op="format_slug", data={"formatted": "a-b"})
        assert result.model_dump() == {
            "ok": True,
            "op": "format_slug",
            "data": {"formatted": "a-b"},
            "warnings": [],
            "error": None,
        }
