"""Command group: document and password checks."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from viu_shared.commands._base import ViuGroup
from viu_shared.services.documents import DocumentService

if TYPE_CHECKING:
    from viu_shared.commands._context import AppContext

_CHECK_EXAMPLES = """\
  viu check cpf 123.456.789-09
  viu check cnpj 11.222.333/0001-81
  viu check cep 01310-100
  viu check password 'Segura@123'
  viu --json check cnpj 11222333000181"""


@click.group(cls=ViuGroup, examples=_CHECK_EXAMPLES)
def check() -> None:
    """Validate Brazilian documents and password strength."""


@check.command(examples="  viu check cpf 123.456.789-09\n  viu check cpf 12345678909")
@click.argument("value")
@click.pass_obj
def cpf(app: AppContext, value: str) -> None:
    """Check a CPF (punctuation is ignored)."""
    app.emit(DocumentService(app.settings).check_document("cpf", value))


@check.command(examples="  viu check cnpj 11.222.333/0001-81")
@click.argument("value")
@click.pass_obj
def cnpj(app: AppContext, value: str) -> None:
    """Check a CNPJ (punctuation is ignored)."""
    app.emit(DocumentService(app.settings).check_document("cnpj", value))


@check.command(examples="  viu check cep 01310-100")
@click.argument("value")
@click.pass_obj
def cep(app: AppContext, value: str) -> None:
    """Check that a CEP has eight digits."""
    app.emit(DocumentService(app.settings).check_document("cep", value))


@check.command(examples="  viu check password 'Segura@123'")
@click.argument("value")
@click.pass_obj
def password(app: AppContext, value: str) -> None:
    """Score a password against the configured minimum strength."""
    app.emit(DocumentService(app.settings).check_password(value))
