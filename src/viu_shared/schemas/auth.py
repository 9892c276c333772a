"""Authentication and authorization request payloads."""

from __future__ import annotations

from typing import Any

from viu_shared.schemas.base import EMAIL, NAME, PASSWORD, PHONE, USER_TYPE, UUID
from viu_shared.validation.schema import (
    AnySchema,
    BooleanSchema,
    EnumSchema,
    NumberSchema,
    ObjectSchema,
    RecordSchema,
    StringSchema,
)


def _must_accept(message: str) -> BooleanSchema:
    return BooleanSchema().refine(lambda v: v is True, message)


def _required_string(message: str) -> StringSchema:
    return StringSchema(required_message=message).min_length(1, message)


def _passwords_match(data: dict[str, Any]) -> bool:
    return data["novaSenha"] == data["confirmacaoSenha"]


VERIFICATION_CODE = (
    StringSchema()
    .length(6, "Código deve ter 6 dígitos")
    .regex(r"^\d{6}$", "Código deve conter apenas números")
)

REQUIRED_PHONE = PHONE.required("Telefone é obrigatório")

# --- Login / registration ---

LOGIN_REQUEST = ObjectSchema(
    {
        "email": EMAIL,
        "senha": _required_string("Senha é obrigatória"),
        "lembrarMe": BooleanSchema().default(False),
    }
)

REGISTER_REQUEST = ObjectSchema(
    {
        "nome": NAME,
        "email": EMAIL,
        "senha": PASSWORD,
        "tipo": USER_TYPE,
        "telefone": PHONE,
        "termos": _must_accept("Você deve aceitar os termos de uso"),
        "politicaPrivacidade": _must_accept("Você deve aceitar a política de privacidade"),
        "marketing": BooleanSchema().default(False),
    }
)

# --- Tokens ---

REFRESH_TOKEN_REQUEST = ObjectSchema({"refreshToken": _required_string("Refresh token é obrigatório")})

TOKEN_PAYLOAD = ObjectSchema(
    {
        "sub": UUID,
        "email": EMAIL,
        "tipo": USER_TYPE,
        "plano": StringSchema(),
        "iat": NumberSchema().int_(),
        "exp": NumberSchema().int_(),
        "jti": UUID,
    }
)

# --- Password recovery and change ---

FORGOT_PASSWORD_REQUEST = ObjectSchema({"email": EMAIL})

RESET_PASSWORD_REQUEST = ObjectSchema(
    {
        "token": _required_string("Token é obrigatório").max_length(500, "Token inválido"),
        "novaSenha": PASSWORD,
        "confirmacaoSenha": StringSchema(),
    }
).refine(_passwords_match, "Senhas não coincidem", path="confirmacaoSenha")

CHANGE_PASSWORD_REQUEST = (
    ObjectSchema(
        {
            "senhaAtual": _required_string("Senha atual é obrigatória"),
            "novaSenha": PASSWORD,
            "confirmacaoSenha": StringSchema(),
        }
    )
    .refine(_passwords_match, "Senhas não coincidem", path="confirmacaoSenha")
    .refine(
        lambda data: data["senhaAtual"] != data["novaSenha"],
        "Nova senha deve ser diferente da atual",
        path="novaSenha",
    )
)

# --- Email / phone verification ---

VERIFY_EMAIL_REQUEST = ObjectSchema({"token": _required_string("Token é obrigatório")})

RESEND_VERIFICATION_REQUEST = ObjectSchema({"email": EMAIL})

SEND_PHONE_VERIFICATION_REQUEST = ObjectSchema({"telefone": REQUIRED_PHONE})

VERIFY_PHONE_REQUEST = ObjectSchema({"telefone": REQUIRED_PHONE, "codigo": VERIFICATION_CODE})

# --- Sessions ---

LOGOUT_REQUEST = ObjectSchema(
    {
        "refreshToken": StringSchema().optional(),
        "logoutTodosSessoes": BooleanSchema().default(False),
    }
)

REVOKE_SESSION_REQUEST = ObjectSchema({"sessaoId": UUID})

# --- Social login and 2FA ---

GOOGLE_AUTH_REQUEST = ObjectSchema(
    {
        "idToken": _required_string("ID Token do Google é obrigatório"),
        "tipo": USER_TYPE.optional(),
    }
)

SETUP_2FA_REQUEST = ObjectSchema({"senha": _required_string("Senha é obrigatória")})

VERIFY_2FA_REQUEST = ObjectSchema({"codigo": VERIFICATION_CODE})

DISABLE_2FA_REQUEST = ObjectSchema(
    {
        "senha": _required_string("Senha é obrigatória"),
        "codigo": VERIFICATION_CODE,
    }
)

# --- Permissions ---

PERMISSION = ObjectSchema(
    {
        "recurso": StringSchema(),
        "acao": EnumSchema(("create", "read", "update", "delete", "manage")),
        "condicoes": RecordSchema(AnySchema()).optional(),
    }
)

VALIDATE_PERMISSION_REQUEST = ObjectSchema(
    {
        "recurso": StringSchema(),
        "acao": StringSchema(),
        "contexto": RecordSchema(AnySchema()).optional(),
    }
)
