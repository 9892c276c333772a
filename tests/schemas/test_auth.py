"""Tests for the authentication request payloads."""

import pytest

from viu_shared.domain.types import UserType
from viu_shared.schemas import auth
from viu_shared.validation import extract_errors, safe_validate, validate

STRONG = "Viu@2024x"
ID = "550e8400-e29b-41d4-a716-446655440000"


def _register(**overrides: object) -> dict[str, object]:
    payload: dict[str, object] = {
        "nome": "Ana Souza",
        "email": "ana@viu.com",
        "senha": STRONG,
        "tipo": "DESIGNER",
        "termos": True,
        "politicaPrivacidade": True,
    }
    payload.update(overrides)
    return payload


class TestLogin:
    def test_valid_with_default(self) -> None:
        value = validate(auth.LOGIN_REQUEST, {"email": "ANA@viu.com", "senha": "x"})
        assert value == {"email": "ana@viu.com", "senha": "x", "lembrarMe": False}

    def test_missing_password_message(self) -> None:
        result = safe_validate(auth.LOGIN_REQUEST, {"email": "ana@viu.com"})
        assert extract_errors(result) == {"senha": ["Senha é obrigatória"]}

    def test_empty_password_message(self) -> None:
        result = safe_validate(auth.LOGIN_REQUEST, {"email": "ana@viu.com", "senha": ""})
        assert extract_errors(result) == {"senha": ["Senha é obrigatória"]}


class TestRegister:
    def test_valid(self) -> None:
        value = validate(auth.REGISTER_REQUEST, _register())
        assert value["tipo"] is UserType.DESIGNER
        assert value["marketing"] is False
        assert "telefone" not in value

    @pytest.mark.parametrize(
        ("field", "message"),
        [
            ("termos", "Você deve aceitar os termos de uso"),
            ("politicaPrivacidade", "Você deve aceitar a política de privacidade"),
        ],
    )
    def test_must_accept(self, field: str, message: str) -> None:
        result = safe_validate(auth.REGISTER_REQUEST, _register(**{field: False}))
        assert extract_errors(result) == {field: [message]}

    def test_collects_every_field(self) -> None:
        result = safe_validate(auth.REGISTER_REQUEST, _register(nome="A", email="x", tipo="ROOT"))
        assert set(extract_errors(result)) == {"nome", "email", "tipo"}


class TestPasswordChange:
    def test_reset_mismatch(self) -> None:
        result = safe_validate(
            auth.RESET_PASSWORD_REQUEST,
            {"token": "t", "novaSenha": STRONG, "confirmacaoSenha": "Outra@2024"},
        )
        assert extract_errors(result) == {"confirmacaoSenha": ["Senhas não coincidem"]}

    def test_reset_weak_password_skips_match(self) -> None:
        result = safe_validate(
            auth.RESET_PASSWORD_REQUEST,
            {"token": "t", "novaSenha": "fraca", "confirmacaoSenha": "outra"},
        )
        assert "confirmacaoSenha" not in extract_errors(result)

    def test_change_same_password(self) -> None:
        result = safe_validate(
            auth.CHANGE_PASSWORD_REQUEST,
            {"senhaAtual": STRONG, "novaSenha": STRONG, "confirmacaoSenha": STRONG},
        )
        assert extract_errors(result) == {"novaSenha": ["Nova senha deve ser diferente da atual"]}

    def test_change_valid(self) -> None:
        payload = {"senhaAtual": "Antiga@1", "novaSenha": STRONG, "confirmacaoSenha": STRONG}
        assert safe_validate(auth.CHANGE_PASSWORD_REQUEST, payload).ok is True


class TestVerification:
    def test_code_valid(self) -> None:
        assert safe_validate(auth.VERIFY_2FA_REQUEST, {"codigo": "123456"}).ok is True

    def test_code_letters(self) -> None:
        result = safe_validate(auth.VERIFY_2FA_REQUEST, {"codigo": "12a456"})
        assert extract_errors(result) == {"codigo": ["Código deve conter apenas números"]}

    def test_code_short(self) -> None:
        result = safe_validate(auth.VERIFY_2FA_REQUEST, {"codigo": "123"})
        assert extract_errors(result)["codigo"] == [
            "Código deve ter 6 dígitos",
            "Código deve conter apenas números",
        ]

    def test_phone_required(self) -> None:
        result = safe_validate(auth.SEND_PHONE_VERIFICATION_REQUEST, {})
        assert extract_errors(result) == {"telefone": ["Telefone é obrigatório"]}

    def test_verify_phone(self) -> None:
        payload = {"telefone": "(11) 98765-4321", "codigo": "654321"}
        assert validate(auth.VERIFY_PHONE_REQUEST, payload) == payload


class TestTokensAndSessions:
    def test_token_payload(self) -> None:
        payload = {
            "sub": ID,
            "email": "ana@viu.com",
            "tipo": "CLIENTE",
            "plano": "GRATUITO",
            "iat": 1700000000,
            "exp": 1700003600,
            "jti": ID,
        }
        assert safe_validate(auth.TOKEN_PAYLOAD, payload).ok is True

    def test_refresh_required(self) -> None:
        result = safe_validate(auth.REFRESH_TOKEN_REQUEST, {"refreshToken": ""})
        assert extract_errors(result) == {"refreshToken": ["Refresh token é obrigatório"]}

    def test_logout_defaults(self) -> None:
        assert validate(auth.LOGOUT_REQUEST, {}) == {"logoutTodosSessoes": False}

    def test_google_auth_tipo_optional(self) -> None:
        assert validate(auth.GOOGLE_AUTH_REQUEST, {"idToken": "abc"}) == {"idToken": "abc"}


class TestPermissions:
    def test_action_enum(self) -> None:
        assert safe_validate(auth.PERMISSION, {"recurso": "projeto", "acao": "manage"}).ok is True
        assert safe_validate(auth.PERMISSION, {"recurso": "projeto", "acao": "destroy"}).ok is False

    def test_context_record(self) -> None:
        payload = {"recurso": "arte", "acao": "read", "contexto": {"projetoId": ID}}
        assert validate(auth.VALIDATE_PERMISSION_REQUEST, payload) == payload
