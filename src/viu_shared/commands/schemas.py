"""Command: list the registered request schemas."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from viu_shared.commands._base import ViuCommand
from viu_shared.services.validation import ValidationService

if TYPE_CHECKING:
    from viu_shared.commands._context import AppContext


@click.command(cls=ViuCommand, examples="  viu schemas\n  viu --json schemas")
@click.pass_obj
def schemas(app: AppContext) -> None:
    """List schema names accepted by ``viu validate``."""
    app.emit(ValidationService(app.settings).list_schemas())
