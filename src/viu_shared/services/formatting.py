"""FormatService: pt-BR display formatting for the ``viu format`` commands."""

from __future__ import annotations

from collections.abc import Callable

from viu_shared.output.formatters import INVALID_DATE, format_currency, format_date, format_phone, slugify
from viu_shared.services.base import BaseService
from viu_shared.services.result import ServiceError, ServiceResult

FORMAT_KINDS: tuple[str, ...] = ("currency", "phone", "slug", "date")


class FormatService(BaseService):
    """Formats raw values the way the web client displays them."""

    def format_value(self, kind: str, value: str) -> ServiceResult:
        op = f"format_{kind}"
        formatters: dict[str, Callable[[str], str]] = {
            "currency": self._currency,
            "phone": format_phone,
            "slug": slugify,
            "date": self._date,
        }
        formatter = formatters.get(kind)
        if formatter is None:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="UNKNOWN_FORMAT",
                    message=f"Unknown format: {kind}",
                    detail={"available": list(FORMAT_KINDS)},
                ),
            )
        try:
            formatted = formatter(value)
        except ValueError as exc:
            return ServiceResult(
                ok=False,
                op=op,
                data={"value": value},
                error=ServiceError(code="INVALID_VALUE", message=str(exc)),
            )
        return ServiceResult(ok=True, op=op, data={"value": value, "formatted": formatted})

    @staticmethod
    def _currency(value: str) -> str:
        try:
            centavos = int(value)
        except ValueError:
            msg = f"Expected an amount in centavos, got {value!r}"
            raise ValueError(msg) from None
        return format_currency(centavos)

    def _date(self, value: str) -> str:
        formatted = format_date(value, self._settings.formatting.date_format)
        if formatted == INVALID_DATE:
            raise ValueError(INVALID_DATE)
        return formatted
