"""Platform enums and their display tables.

Values match the PostgreSQL enum labels used by the API, so they are
upper-case Portuguese identifiers. Labels are the pt-BR strings shown in
the web client.
"""

from __future__ import annotations

from enum import StrEnum

# --- Users ---


class UserType(StrEnum):
    """Account role."""

    DESIGNER = "DESIGNER"
    CLIENTE = "CLIENTE"
    ADMIN = "ADMIN"


class SubscriptionPlan(StrEnum):
    """Billing plan."""

    GRATUITO = "GRATUITO"
    PROFISSIONAL = "PROFISSIONAL"
    PREMIUM = "PREMIUM"


class CommunicationPreference(StrEnum):
    EMAIL = "EMAIL"
    SMS = "SMS"
    PUSH = "PUSH"


# --- Projects ---


class ProjectStatus(StrEnum):
    EM_ANDAMENTO = "EM_ANDAMENTO"
    PAUSADO = "PAUSADO"
    CONCLUIDO = "CONCLUIDO"
    CANCELADO = "CANCELADO"


class Priority(StrEnum):
    BAIXA = "BAIXA"
    MEDIA = "MEDIA"
    ALTA = "ALTA"
    URGENTE = "URGENTE"


# --- Artworks ---


class FileType(StrEnum):
    """Artwork file category."""

    IMAGEM = "IMAGEM"
    VIDEO = "VIDEO"
    DOCUMENTO = "DOCUMENTO"
    VETOR = "VETOR"


class ApprovalStatus(StrEnum):
    """Review state of an artwork version."""

    PENDENTE = "PENDENTE"
    APROVADA = "APROVADA"
    REJEITADA = "REJEITADA"


# --- Feedback and approvals ---


class FeedbackType(StrEnum):
    TEXTO = "TEXTO"
    AUDIO = "AUDIO"


class ApprovalType(StrEnum):
    """Full approval, or approval subject to listed conditions."""

    APROVACAO_TOTAL = "APROVACAO_TOTAL"
    APROVACAO_CONDICIONAL = "APROVACAO_CONDICIONAL"


# --- Tasks ---


class TaskStatus(StrEnum):
    PENDENTE = "PENDENTE"
    EM_ANDAMENTO = "EM_ANDAMENTO"
    CONCLUIDA = "CONCLUIDA"
    CANCELADA = "CANCELADA"


# --- Notifications and reports ---


class NotificationType(StrEnum):
    FEEDBACK = "FEEDBACK"
    APROVACAO = "APROVACAO"
    PRAZO = "PRAZO"
    SISTEMA = "SISTEMA"


class NotificationChannel(StrEnum):
    EMAIL = "EMAIL"
    SMS = "SMS"
    PUSH = "PUSH"
    SISTEMA = "SISTEMA"


class ReportType(StrEnum):
    PRODUTIVIDADE = "PRODUTIVIDADE"
    CLIENTE = "CLIENTE"
    FINANCEIRO = "FINANCEIRO"
    TEMPO = "TEMPO"


# --- Display labels ---

USER_TYPE_LABELS: dict[UserType, str] = {
    UserType.DESIGNER: "Designer",
    UserType.CLIENTE: "Cliente",
    UserType.ADMIN: "Administrador",
}

SUBSCRIPTION_PLAN_LABELS: dict[SubscriptionPlan, str] = {
    SubscriptionPlan.GRATUITO: "Gratuito",
    SubscriptionPlan.PROFISSIONAL: "Profissional",
    SubscriptionPlan.PREMIUM: "Premium",
}

PROJECT_STATUS_LABELS: dict[ProjectStatus, str] = {
    ProjectStatus.EM_ANDAMENTO: "Em Andamento",
    ProjectStatus.PAUSADO: "Pausado",
    ProjectStatus.CONCLUIDO: "Concluído",
    ProjectStatus.CANCELADO: "Cancelado",
}

PRIORITY_LABELS: dict[Priority, str] = {
    Priority.BAIXA: "Baixa",
    Priority.MEDIA: "Média",
    Priority.ALTA: "Alta",
    Priority.URGENTE: "Urgente",
}

APPROVAL_STATUS_LABELS: dict[ApprovalStatus, str] = {
    ApprovalStatus.PENDENTE: "Pendente",
    ApprovalStatus.APROVADA: "Aprovada",
    ApprovalStatus.REJEITADA: "Rejeitada",
}

FILE_TYPE_LABELS: dict[FileType, str] = {
    FileType.IMAGEM: "Imagem",
    FileType.VIDEO: "Vídeo",
    FileType.DOCUMENTO: "Documento",
    FileType.VETOR: "Vetor",
}


# Keyed by enum class: StrEnum members compare equal to their string value,
# so TaskStatus.PENDENTE would otherwise hit the ApprovalStatus table.
_LABEL_TABLES: dict[type[StrEnum], dict] = {
    UserType: USER_TYPE_LABELS,
    SubscriptionPlan: SUBSCRIPTION_PLAN_LABELS,
    ProjectStatus: PROJECT_STATUS_LABELS,
    Priority: PRIORITY_LABELS,
    ApprovalStatus: APPROVAL_STATUS_LABELS,
    FileType: FILE_TYPE_LABELS,
}


def label_for(value: StrEnum) -> str:
    """Return the pt-BR display label for *value*, falling back to the raw value."""
    table = _LABEL_TABLES.get(type(value), {})
    return table.get(value, str(value))
