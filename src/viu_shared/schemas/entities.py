"""Create/update request payloads for the core entities.

Update payloads are the create payload's fields made optional, so a
PATCH body may carry any subset of them.
"""

from __future__ import annotations

from viu_shared.domain import limits
from viu_shared.domain.types import CommunicationPreference, Priority, SubscriptionPlan
from viu_shared.schemas.base import (
    APPROVAL_TYPE,
    COMMUNICATION_PREFERENCE,
    COORDINATE,
    EMAIL,
    FEEDBACK_TYPE,
    HEX_COLOR,
    ISO_DATE,
    MONEY,
    NAME,
    PERCENTAGE,
    PHONE,
    PRIORITY,
    PROJECT_STATUS,
    SUBSCRIPTION_PLAN,
    TAGS,
    TASK_STATUS,
    URL,
    USER_SETTINGS,
    USER_TYPE,
    UUID,
)
from viu_shared.validation.schema import ArraySchema, BooleanSchema, NumberSchema, ObjectSchema, StringSchema


def _title(label: str, max_length: int) -> StringSchema:
    return (
        StringSchema()
        .trim()
        .min_length(1, f"{label} é obrigatório")
        .max_length(max_length, f"{label} deve ter no máximo {max_length} caracteres")
    )


def _description(max_length: int) -> StringSchema:
    return (
        StringSchema()
        .max_length(max_length, f"Descrição deve ter no máximo {max_length} caracteres")
        .optional()
    )


ESTIMATED_HOURS = (
    NumberSchema()
    .min(limits.TASK_MIN_HOURS, "Estimativa deve ser pelo menos 0.5 horas")
    .max(limits.TASK_MAX_HOURS, "Estimativa muito alta")
)

# --- Users ---

CREATE_USER_REQUEST = ObjectSchema(
    {
        "nome": NAME,
        "email": EMAIL,
        "senha": StringSchema().min_length(
            limits.PASSWORD_MIN_LENGTH, "Senha deve ter pelo menos 8 caracteres"
        ),
        "tipo": USER_TYPE,
        "telefone": PHONE,
        "plano": SUBSCRIPTION_PLAN.default(SubscriptionPlan.GRATUITO),
        "preferenciaComunicacao": COMMUNICATION_PREFERENCE.default(CommunicationPreference.EMAIL),
    }
)

UPDATE_USER_REQUEST = ObjectSchema(
    {
        "nome": NAME,
        "email": EMAIL,
        "telefone": PHONE,
        "avatar": URL,
        "preferenciaComunicacao": COMMUNICATION_PREFERENCE,
        "configuracoes": USER_SETTINGS,
    }
).partial()

# --- Projects ---

CREATE_PROJECT_REQUEST = ObjectSchema(
    {
        "nome": _title("Nome", limits.PROJECT_NAME_MAX_LENGTH),
        "descricao": _description(limits.PROJECT_DESCRIPTION_MAX_LENGTH),
        "clienteId": UUID,
        "prioridade": PRIORITY.default(Priority.MEDIA),
        "prazoEntrega": ISO_DATE.optional(),
        "orcamento": MONEY.optional(),
        "tags": TAGS,
        "cor": HEX_COLOR,
    }
)

UPDATE_PROJECT_REQUEST = (
    CREATE_PROJECT_REQUEST.omit("clienteId").extend({"status": PROJECT_STATUS}).partial()
)

# --- Artworks ---

CREATE_ART_REQUEST = ObjectSchema(
    {
        "titulo": _title("Título", limits.ART_TITLE_MAX_LENGTH),
        "descricao": _description(limits.ART_DESCRIPTION_MAX_LENGTH),
        "projetoId": UUID,
        "tags": TAGS,
    }
)

# The file itself is checked by the upload layer (see domain.files).
ART_UPLOAD_REQUEST = CREATE_ART_REQUEST

UPDATE_ART_REQUEST = CREATE_ART_REQUEST.omit("projetoId").partial()

# --- Feedback ---

FEEDBACK_CONTENT = (
    StringSchema()
    .trim()
    .min_length(1, "Conteúdo é obrigatório")
    .max_length(limits.FEEDBACK_CONTENT_MAX_LENGTH, "Feedback deve ter no máximo 2000 caracteres")
)

CREATE_FEEDBACK_REQUEST = ObjectSchema(
    {
        "arteId": UUID,
        "conteudo": FEEDBACK_CONTENT,
        "tipo": FEEDBACK_TYPE,
        "posicaoX": COORDINATE.optional(),
        "posicaoY": COORDINATE.optional(),
    }
)

CREATE_AUDIO_FEEDBACK_REQUEST = CREATE_FEEDBACK_REQUEST.pick("arteId", "posicaoX", "posicaoY")

UPDATE_FEEDBACK_REQUEST = ObjectSchema(
    {"conteudo": FEEDBACK_CONTENT, "resolvido": BooleanSchema()}
).partial()

# --- Approvals ---

CREATE_APPROVAL_REQUEST = ObjectSchema(
    {
        "arteId": UUID,
        "tipo": APPROVAL_TYPE,
        "comentario": StringSchema()
        .max_length(limits.APPROVAL_COMMENT_MAX_LENGTH, "Comentário deve ter no máximo 1000 caracteres")
        .optional(),
        "condicoes": ArraySchema(
            StringSchema()
            .min_length(1, "Condição não pode estar vazia")
            .max_length(limits.APPROVAL_CONDITION_MAX_LENGTH, "Condição deve ter no máximo 255 caracteres")
        )
        .max_items(limits.APPROVAL_CONDITIONS_MAX_COUNT, "Máximo de 10 condições")
        .optional(),
    }
)

# --- Tasks ---

CREATE_TASK_REQUEST = ObjectSchema(
    {
        "titulo": _title("Título", limits.TASK_TITLE_MAX_LENGTH),
        "descricao": _description(limits.TASK_DESCRIPTION_MAX_LENGTH),
        "projetoId": UUID,
        "responsavelId": UUID,
        "prioridade": PRIORITY.default(Priority.MEDIA),
        "prazo": ISO_DATE.optional(),
        "estimativaHoras": ESTIMATED_HOURS.optional(),
        "tags": TAGS,
    }
)

UPDATE_TASK_REQUEST = (
    CREATE_TASK_REQUEST.omit("projetoId", "responsavelId")
    .extend(
        {
            "status": TASK_STATUS,
            "horasGastas": NumberSchema()
            .min(0, "Horas gastas deve ser positivo")
            .max(limits.TASK_MAX_HOURS, "Horas gastas muito alto"),
            "progresso": PERCENTAGE,
            "bloqueada": BooleanSchema(),
            "motivoBloqueio": StringSchema().max_length(
                limits.TASK_BLOCK_REASON_MAX_LENGTH, "Motivo deve ter no máximo 500 caracteres"
            ),
        }
    )
    .partial()
)

# --- Notifications ---

MARK_NOTIFICATIONS_READ_REQUEST = ObjectSchema(
    {"ids": ArraySchema(UUID).min_items(1, "Pelo menos uma notificação deve ser selecionada")}
)
