"""Command: validate a JSON payload against a registered schema."""

from __future__ import annotations

import json
from typing import IO, TYPE_CHECKING

import click

from viu_shared.commands._base import ViuCommand
from viu_shared.services.result import ServiceError, ServiceResult
from viu_shared.services.validation import ValidationService

if TYPE_CHECKING:
    from viu_shared.commands._context import AppContext


@click.command(
    cls=ViuCommand,
    examples="""\
  viu validate register payload.json
  echo '{"email": "a@b.co", "senha": "x"}' | viu validate login
  viu --json validate create-project - < project.json
  viu schemas""",
)
@click.argument("schema_name")
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.pass_obj
def validate(app: AppContext, schema_name: str, source: IO[str]) -> None:
    """Validate a JSON document (file or stdin) against SCHEMA_NAME."""
    try:
        payload = json.load(source)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        app.emit(
            ServiceResult(
                ok=False,
                op="validate",
                data={"schema": schema_name},
                error=ServiceError(code="INVALID_JSON", message=f"Invalid JSON: {exc}"),
            )
        )
        return
    app.emit(ValidationService(app.settings).validate_payload(schema_name, payload))
