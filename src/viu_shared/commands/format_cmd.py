"""Command group: pt-BR display formatting."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from viu_shared.commands._base import ViuGroup
from viu_shared.services.formatting import FormatService

if TYPE_CHECKING:
    from viu_shared.commands._context import AppContext

_FORMAT_EXAMPLES = """\
  viu format currency 123456
  viu format phone 11987654321
  viu format slug 'Meu Projeto Incrível'
  viu format date 2024-03-15T10:30:00Z"""


@click.group("format", cls=ViuGroup, examples=_FORMAT_EXAMPLES)
def format_cmd() -> None:
    """Format values the way the web client displays them."""


@format_cmd.command(examples="  viu format currency 123456")
@click.argument("centavos")
@click.pass_obj
def currency(app: AppContext, centavos: str) -> None:
    """Format an amount in centavos as BRL."""
    app.emit(FormatService(app.settings).format_value("currency", centavos))


@format_cmd.command(examples="  viu format phone 11987654321")
@click.argument("value")
@click.pass_obj
def phone(app: AppContext, value: str) -> None:
    """Format a Brazilian phone number."""
    app.emit(FormatService(app.settings).format_value("phone", value))


@format_cmd.command(examples="  viu format slug 'Título com Acentos'")
@click.argument("value")
@click.pass_obj
def slug(app: AppContext, value: str) -> None:
    """Turn text into a URL slug."""
    app.emit(FormatService(app.settings).format_value("slug", value))


@format_cmd.command(examples="  viu format date 2024-03-15")
@click.argument("value")
@click.pass_obj
def date(app: AppContext, value: str) -> None:
    """Format an ISO date with the configured date format."""
    app.emit(FormatService(app.settings).format_value("date", value))
