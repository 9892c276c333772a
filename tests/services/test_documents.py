"""Tests for DocumentService."""

import pytest

from viu_shared.config.settings import ViuSettings
from viu_shared.services.documents import DOCUMENT_KINDS, DocumentService


@pytest.fixture
def service(settings: ViuSettings) -> DocumentService:
    return DocumentService(settings)


class TestCheckDocument:
    @pytest.mark.parametrize(
        ("kind", "value", "formatted"),
        [
            ("cpf", "52998224725", "529.982.247-25"),
            ("cpf", "529.982.247-25", "529.982.247-25"),
            ("cnpj", "11222333000181", "11.222.333/0001-81"),
            ("cep", "01310100", "01310-100"),
        ],
    )
    def test_valid(self, service: DocumentService, kind: str, value: str, formatted: str) -> None:
        result = service.check_document(kind, value)
        assert result.ok is True
        assert result.op == f"check_{kind}"
        assert result.data["valid"] is True
        assert result.data["formatted"] == formatted

    @pytest.mark.parametrize(
        ("kind", "value", "message"),
        [
            ("cpf", "111.111.111-11", "CPF inválido"),
            ("cpf", "529.982.247-24", "CPF inválido"),
            ("cnpj", "11.222.333/0001-82", "CNPJ inválido"),
            ("cep", "1234", "CEP inválido"),
        ],
    )
    def test_invalid(self, service: DocumentService, kind: str, value: str, message: str) -> None:
        result = service.check_document(kind, value)
        assert result.ok is False
        assert result.data["valid"] is False
        assert "formatted" not in result.data
        assert result.error is not None
        assert result.error.code == "INVALID_DOCUMENT"
        assert result.error.message == message

    def test_unknown_kind(self, service: DocumentService) -> None:
        result = service.check_document("rg", "123")
        assert result.ok is False
        assert result.op == "check_rg"
        assert result.error is not None
        assert result.error.code == "UNKNOWN_DOCUMENT"
        assert result.error.detail["available"] == list(DOCUMENT_KINDS)


class TestCheckPassword:
    def test_strong(self, service: DocumentService) -> None:
        result = service.check_password("Viu@Design9")
        assert result.ok is True
        assert result.data["score"] == 5
        assert result.data["min_score"] == 4

    def test_weak(self, service: DocumentService) -> None:
        result = service.check_password("abcdefgh")
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "WEAK_PASSWORD"
        assert result.error.detail["feedback"] == result.data["feedback"]

    def test_threshold_from_settings(self) -> None:
        settings = ViuSettings(security={"password_min_score": 2})
        result = DocumentService(settings).check_password("abcdefgh")
        assert result.ok is True
        assert result.data["min_score"] == 2
