"""Tests for the op-dispatched Rich renderers and format_result."""

import json

from viu_shared.output.renderers import (
    OutputSettings,
    format_result,
    render_result,
    render_validation_result,
)
from viu_shared.services.result import ServiceError, ServiceResult
from viu_shared.validation import ValidationIssue, ValidationResult

# ── Helpers ───────────────────────────────────────────────────────────


def _ok(op: str, **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str, code: str, message: str, **detail: object) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=dict(detail)),
    )


# ── format_result ─────────────────────────────────────────────────────


class TestFormatResult:
    def test_defaults(self) -> None:
        settings = OutputSettings()
        assert settings.json_output is False
        assert settings.verbose is False

    def test_json_mode(self) -> None:
        output = format_result(_ok("check_cpf", formatted="123.456.789-09"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "check_cpf"
        assert data["data"]["formatted"] == "123.456.789-09"

    def test_json_error(self) -> None:
        output = format_result(_err("check_cpf", "INVALID_DOCUMENT", "CPF inválido"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"]["code"] == "INVALID_DOCUMENT"

    def test_human_mode(self) -> None:
        assert "OK" in format_result(_ok("anything", a=1))


# ── Error rendering ───────────────────────────────────────────────────


class TestErrorRenderer:
    def test_basic_error(self) -> None:
        output = render_result(_err("check_cnpj", "INVALID_DOCUMENT", "CNPJ inválido"))
        assert "ERROR" in output
        assert "check_cnpj" in output
        assert "CNPJ inválido" in output

    def test_no_error_object(self) -> None:
        output = render_result(ServiceResult(ok=False, op="validate"))
        assert "Unknown error" in output

    def test_issue_table(self) -> None:
        result = _err(
            "validate",
            "VALIDATION_FAILED",
            "2 validation error(s)",
            errors={"email": ["Email inválido"], "": ["Esperado um objeto"]},
        )
        output = render_result(result)
        assert "Field" in output
        assert "email" in output
        assert "Email inválido" in output
        assert "(root)" in output

    def test_feedback_hints(self) -> None:
        result = _err("check_password", "WEAK_PASSWORD", "Senha fraca", feedback=["Adicione pelo menos um número"])
        assert "Adicione pelo menos um número" in render_result(result)

    def test_available_names(self) -> None:
        result = _err("validate", "UNKNOWN_SCHEMA", "Unknown schema: x", available=["login", "register"])
        assert "login, register" in render_result(result)

    def test_verbose_shows_data(self) -> None:
        result = ServiceResult(
            ok=False,
            op="check_cpf",
            data={"value": "111.111.111-11"},
            error=ServiceError(code="INVALID_DOCUMENT", message="CPF inválido"),
        )
        assert "111.111.111-11" not in render_result(result)
        assert "111.111.111-11" in render_result(result, verbose=True)


# ── Op renderers ──────────────────────────────────────────────────────


class TestDocumentRenderer:
    def test_shows_formatted(self) -> None:
        output = render_result(_ok("check_cnpj", value="11222333000181", formatted="11.222.333/0001-81"))
        assert "OK" in output
        assert "11.222.333/0001-81" in output
        assert "11222333000181" not in output

    def test_verbose_shows_raw(self) -> None:
        output = render_result(
            _ok("check_cnpj", value="11222333000181", formatted="11.222.333/0001-81"), verbose=True
        )
        assert "11222333000181" in output


class TestPasswordRenderer:
    def test_score(self) -> None:
        output = render_result(_ok("check_password", score=4, feedback=["Adicione um caractere especial"]))
        assert "4/5" in output
        assert "Adicione um caractere especial" in output


class TestValidationRenderer:
    def test_fields(self) -> None:
        output = render_result(_ok("validate", schema="login", value={"email": "ana@viu.com", "lembrarMe": False}))
        assert "login" in output
        assert "ana@viu.com" in output
        assert "lembrarMe" in output

    def test_warnings(self) -> None:
        result = ServiceResult(ok=True, op="validate", data={"schema": "x", "value": {}}, warnings=["extra ignorado"])
        assert "extra ignorado" in render_result(result)


class TestSchemaListRenderer:
    def test_table(self) -> None:
        output = render_result(
            _ok("list_schemas", items=[{"name": "login", "fields": ["email", "senha"]}], count=1)
        )
        assert "Schema" in output
        assert "login" in output
        assert "email, senha" in output


class TestFormattedRenderer:
    def test_plain_value(self) -> None:
        output = render_result(_ok("format_currency", value="123456", formatted="R$ 1.234,56"))
        assert output == "R$ 1.234,56"

    def test_verbose(self) -> None:
        output = render_result(_ok("format_slug", value="Meu Projeto", formatted="meu-projeto"), verbose=True)
        assert "format_slug" in output
        assert "Meu Projeto" in output


class TestGenericRenderer:
    def test_unknown_op(self) -> None:
        output = render_result(_ok("something_new", answer=42, items=["a"]))
        assert "something_new" in output
        assert "answer" in output
        assert "42" in output
        assert '["a"]' in output


class TestRenderValidationResult:
    def test_valid(self) -> None:
        output = render_validation_result(ValidationResult.success({"a": 1}))
        assert "OK" in output

    def test_invalid(self) -> None:
        result = ValidationResult.failure(
            [ValidationIssue(path="nome", message="curto"), ValidationIssue(path="email", message="inválido")]
        )
        output = render_validation_result(result)
        assert "INVALID" in output
        assert "2 error(s)" in output
        assert "nome" in output

    def test_json(self) -> None:
        result = ValidationResult.failure([ValidationIssue(path="nome", message="curto")])
        data = json.loads(render_validation_result(result, json_output=True))
        assert data["ok"] is False
        assert data["errors"][0]["path"] == "nome"
