"""DocumentService: checksum checks for Brazilian documents and passwords."""

from __future__ import annotations

import logging
from collections.abc import Callable

from viu_shared.domain.documents import (
    format_cep,
    format_cnpj,
    format_cpf,
    is_valid_cep,
    is_valid_cnpj,
    is_valid_cpf,
    only_digits,
)
from viu_shared.services.base import BaseService
from viu_shared.services.result import ServiceError, ServiceResult
from viu_shared.validation.predicates import get_password_strength

logger = logging.getLogger(__name__)

# kind -> (label, validator, formatter)
_DOCUMENTS: dict[str, tuple[str, Callable[[str], bool], Callable[[str], str]]] = {
    "cpf": ("CPF", is_valid_cpf, format_cpf),
    "cnpj": ("CNPJ", is_valid_cnpj, format_cnpj),
    "cep": ("CEP", is_valid_cep, format_cep),
}

DOCUMENT_KINDS: tuple[str, ...] = tuple(_DOCUMENTS)


class DocumentService(BaseService):
    """Validates identifiers typed by users."""

    def check_document(self, kind: str, value: str) -> ServiceResult:
        """Check *value* as a ``cpf``, ``cnpj`` or ``cep``."""
        op = f"check_{kind}"
        if kind not in _DOCUMENTS:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="UNKNOWN_DOCUMENT",
                    message=f"Unknown document kind: {kind}",
                    detail={"available": list(DOCUMENT_KINDS)},
                ),
            )

        label, is_valid, formatter = _DOCUMENTS[kind]
        valid = is_valid(value)
        logger.debug("%s check on %d digit(s): %s", label, len(only_digits(value)), valid)
        data = {"kind": kind, "value": value, "valid": valid}
        if not valid:
            return ServiceResult(
                ok=False,
                op=op,
                data=data,
                error=ServiceError(code="INVALID_DOCUMENT", message=f"{label} inválido"),
            )
        return ServiceResult(ok=True, op=op, data={**data, "formatted": formatter(only_digits(value))})

    def check_password(self, password: str) -> ServiceResult:
        """Score *password* against the configured minimum strength."""
        min_score = self._settings.security.password_min_score
        strength = get_password_strength(password, min_score=min_score)
        data = {
            "score": strength.score,
            "min_score": min_score,
            "valid": strength.is_valid,
            "feedback": strength.feedback,
        }
        if not strength.is_valid:
            return ServiceResult(
                ok=False,
                op="check_password",
                data=data,
                error=ServiceError(
                    code="WEAK_PASSWORD",
                    message="Senha fraca",
                    detail={"feedback": strength.feedback},
                ),
            )
        return ServiceResult(ok=True, op="check_password", data=data)
