"""Reusable field schemas and small composite payloads.

Keys are the API's wire names (camelCase Portuguese), so payloads
validated here can be forwarded untouched. Messages are the pt-BR strings
the web client shows next to each field.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

from viu_shared.domain import limits
from viu_shared.domain.types import (
    ApprovalStatus,
    ApprovalType,
    CommunicationPreference,
    FeedbackType,
    FileType,
    NotificationChannel,
    NotificationType,
    Priority,
    ProjectStatus,
    ReportType,
    SubscriptionPlan,
    TaskStatus,
    UserType,
)
from viu_shared.validation.predicates import PASSWORD_SPECIALS
from viu_shared.validation.schema import (
    AnySchema,
    ArraySchema,
    BooleanSchema,
    DateSchema,
    EnumSchema,
    NumberSchema,
    ObjectSchema,
    RecordSchema,
    Schema,
    StringSchema,
)

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

USER_TYPE = EnumSchema(tuple(UserType))
SUBSCRIPTION_PLAN = EnumSchema(tuple(SubscriptionPlan))
COMMUNICATION_PREFERENCE = EnumSchema(tuple(CommunicationPreference))
PROJECT_STATUS = EnumSchema(tuple(ProjectStatus))
PRIORITY = EnumSchema(tuple(Priority))
FILE_TYPE = EnumSchema(tuple(FileType))
APPROVAL_STATUS = EnumSchema(tuple(ApprovalStatus))
FEEDBACK_TYPE = EnumSchema(tuple(FeedbackType))
APPROVAL_TYPE = EnumSchema(tuple(ApprovalType))
TASK_STATUS = EnumSchema(tuple(TaskStatus))
NOTIFICATION_TYPE = EnumSchema(tuple(NotificationType))
NOTIFICATION_CHANNEL = EnumSchema(tuple(NotificationChannel))
REPORT_TYPE = EnumSchema(tuple(ReportType))

# ---------------------------------------------------------------------------
# Primitives
# ---------------------------------------------------------------------------

UUID = StringSchema().uuid("ID deve ser um UUID válido")

EMAIL = (
    StringSchema()
    .trim()
    .lower()
    .email("Email deve ter um formato válido")
    .min_length(limits.EMAIL_MIN_LENGTH, "Email deve ter pelo menos 5 caracteres")
    .max_length(limits.EMAIL_MAX_LENGTH, "Email deve ter no máximo 255 caracteres")
)

PASSWORD = (
    StringSchema()
    .min_length(limits.PASSWORD_MIN_LENGTH, "Senha deve ter pelo menos 8 caracteres")
    .max_length(limits.PASSWORD_MAX_LENGTH, "Senha deve ter no máximo 128 caracteres")
    .regex(
        rf"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[{PASSWORD_SPECIALS}])[A-Za-z\d{PASSWORD_SPECIALS}]",
        "Senha deve conter pelo menos: 1 letra minúscula, 1 maiúscula, 1 número e 1 caractere especial",
    )
)

PHONE = (
    StringSchema()
    .regex(
        r"^(\+55\s?)?(\(?\d{2}\)?\s?)?\d{4,5}-?\d{4}$",
        "Telefone deve estar no formato brasileiro válido",
    )
    .optional()
)

NAME = (
    StringSchema()
    .trim()
    .min_length(limits.NAME_MIN_LENGTH, "Nome deve ter pelo menos 2 caracteres")
    .max_length(limits.NAME_MAX_LENGTH, "Nome deve ter no máximo 100 caracteres")
    .regex(r"^[a-zA-ZÀ-ÿ\s]+$", "Nome deve conter apenas letras e espaços")
)

URL = StringSchema().url("URL deve ter um formato válido").max_length(2048, "URL deve ter no máximo 2048 caracteres")

ISO_DATE = DateSchema(type_message="Data deve estar no formato ISO 8601")

HEX_COLOR = (
    StringSchema()
    .regex(
        r"^#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})$",
        "Cor deve estar no formato hexadecimal (#RRGGBB ou #RGB)",
    )
    .optional()
)

TAG = (
    StringSchema()
    .min_length(1, "Tag não pode estar vazia")
    .max_length(limits.TAG_MAX_LENGTH, "Tag deve ter no máximo 50 caracteres")
    .regex(r"^[a-zA-Z0-9\-_]+$", "Tag deve conter apenas letras, números, hífens e underscores")
)

TAGS = ArraySchema(TAG).max_items(limits.TAGS_MAX_COUNT, "Máximo de 20 tags permitidas").default([])

MONEY = (
    NumberSchema()
    .int_("Valor deve ser um número inteiro")
    .min(0, "Valor deve ser positivo")
    .max(limits.MONEY_MAX_CENTAVOS, "Valor muito alto")
)

PERCENTAGE = (
    NumberSchema()
    .min(0, "Porcentagem deve ser entre 0 e 100")
    .max(100, "Porcentagem deve ser entre 0 e 100")
)

COORDINATE = (
    NumberSchema()
    .min(0, "Coordenada deve ser positiva")
    .max(limits.COORDINATE_MAX, "Coordenada muito alta")
)

# ---------------------------------------------------------------------------
# Pagination and API envelopes
# ---------------------------------------------------------------------------

PAGINATION_PARAMS = ObjectSchema(
    {
        "page": NumberSchema()
        .int_("Página deve ser um número inteiro")
        .min(1, "Página deve ser maior que 0")
        .default(1),
        "limit": NumberSchema()
        .int_("Limite deve ser um número inteiro")
        .min(limits.PAGINATION_MIN_LIMIT, "Limite deve ser maior que 0")
        .max(limits.PAGINATION_MAX_LIMIT, "Limite deve ser no máximo 100")
        .default(limits.PAGINATION_DEFAULT_LIMIT),
        "sortBy": StringSchema().optional(),
        "sortOrder": EnumSchema(("asc", "desc")).default("desc"),
    }
)

API_ERROR = ObjectSchema(
    {
        "code": StringSchema(),
        "message": StringSchema(),
        "field": StringSchema().optional(),
        "details": RecordSchema(AnySchema()).optional(),
    }
)


def paginated(item: Schema) -> ObjectSchema:
    """Envelope for a paginated list of *item*."""
    return ObjectSchema(
        {
            "data": ArraySchema(item),
            "pagination": ObjectSchema(
                {
                    "page": NumberSchema(),
                    "limit": NumberSchema(),
                    "total": NumberSchema(),
                    "totalPages": NumberSchema(),
                    "hasNext": BooleanSchema(),
                    "hasPrev": BooleanSchema(),
                }
            ),
        }
    )


def api_response(data: Schema) -> ObjectSchema:
    """Standard ``{success, data?, message?, errors?, timestamp}`` envelope."""
    return ObjectSchema(
        {
            "success": BooleanSchema(),
            "data": data.optional(),
            "message": StringSchema().optional(),
            "errors": ArraySchema(StringSchema()).optional(),
            "timestamp": StringSchema(),
        }
    )


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------

DIMENSIONS = ObjectSchema(
    {
        "largura": NumberSchema().int_().min(1, "Largura deve ser maior que 0"),
        "altura": NumberSchema().int_().min(1, "Altura deve ser maior que 0"),
        "resolucao": NumberSchema().min(1, "Resolução deve ser maior que 0").optional(),
    }
)

UPLOAD_METADATA = ObjectSchema(
    {
        "largura": NumberSchema().int_().min(1).optional(),
        "altura": NumberSchema().int_().min(1).optional(),
        "duracao": NumberSchema().min(0).optional(),
        "qualidade": NumberSchema().min(0).max(1).optional(),
        "formato": StringSchema().optional(),
        "compressao": StringSchema().optional(),
    }
)

# ---------------------------------------------------------------------------
# User settings
# ---------------------------------------------------------------------------

USER_SETTINGS = ObjectSchema(
    {
        "tema": EnumSchema(("light", "dark", "auto")).default("light"),
        "idioma": StringSchema().min_length(2).max_length(5).default("pt-BR"),
        "timezone": StringSchema().default("America/Sao_Paulo"),
        "notificacoesPush": BooleanSchema().default(True),
        "notificacoesEmail": BooleanSchema().default(True),
        "notificacoesSms": BooleanSchema().default(False),
        "autoAprovacao": BooleanSchema().default(False),
        "formatoData": StringSchema().default("DD/MM/YYYY"),
        "formatoHora": StringSchema().default("HH:mm"),
    }
)

# ---------------------------------------------------------------------------
# Reports and search
# ---------------------------------------------------------------------------

REPORT_PERIOD = ObjectSchema({"dataInicio": ISO_DATE, "dataFim": ISO_DATE}).refine(
    lambda period: period["dataInicio"] <= period["dataFim"],
    "Data de início deve ser anterior à data de fim",
    path="dataInicio",
)

SEARCH_REQUEST = ObjectSchema(
    {
        "query": StringSchema()
        .trim()
        .min_length(1, "Termo de busca não pode estar vazio")
        .max_length(limits.SEARCH_QUERY_MAX_LENGTH, "Termo de busca muito longo"),
        "filtros": ObjectSchema(
            {
                "tipo": ArraySchema(EnumSchema(("projeto", "arte", "usuario", "tarefa"))).optional(),
                "status": ArraySchema(StringSchema()).optional(),
                # TAGS carries default([]), which outranks optional() for a missing key.
                "tags": TAGS.optional(),
                "dataInicio": ISO_DATE.optional(),
                "dataFim": ISO_DATE.optional(),
            }
        ).optional(),
        "pagination": PAGINATION_PARAMS.optional(),
    }
)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def optional_string(schema: StringSchema) -> StringSchema:
    """Optional string where an empty form field (``""``) counts as absent."""
    return schema.preprocess(lambda v: None if v == "" else v).optional()


def array_from_string(item: Schema) -> ArraySchema:
    """Array that also accepts a comma-separated string (query-string filters)."""

    def _split(value: Any) -> Any:
        if isinstance(value, str):
            return [part.strip() for part in value.split(",") if part.strip()]
        return value

    return ArraySchema(item).preprocess(_split)


def exists_in_database(
    entity_name: str,
    exists: Callable[[str], Awaitable[bool]],
) -> StringSchema:
    """UUID that must reference an existing *entity_name*.

    The lookup is the caller's: *exists* is awaited only once the UUID is
    well-formed, so use :func:`~viu_shared.validation.validate_async`.
    """
    return UUID.refine(exists, f"{entity_name} não encontrado")


def unique_in_database(
    field: str,
    is_unique: Callable[[str], Awaitable[bool]],
    base: StringSchema | None = None,
) -> StringSchema:
    """String that must not already be taken (email, slug, ...); *is_unique* is awaited."""
    return (base or StringSchema()).refine(is_unique, f"{field} já está em uso")
