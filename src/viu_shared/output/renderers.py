"""Rich/JSON rendering of service and validation results.

Renderers write to a StringIO-backed Rich Console and return the text.
Human renderers are dispatched by ``result.op``; unknown ops fall through
to a generic key-value renderer. JSON mode dumps the result model as is.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from viu_shared.output.console import create_console, get_output, style_for_score
from viu_shared.validation.errors import extract_errors

if TYPE_CHECKING:
    from collections.abc import Mapping

    from rich.console import Console

    from viu_shared.services.result import ServiceResult
    from viu_shared.validation.result import ValidationResult


@dataclass(frozen=True)
class OutputSettings:
    json_output: bool = False
    verbose: bool = False


# ── Public API ────────────────────────────────────────────────────────


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult as JSON or as human-readable text."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    return render_result(result, verbose=settings.verbose)


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult via Rich (plain text when not on a terminal)."""
    console = create_console()
    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def render_validation_result(result: ValidationResult, *, json_output: bool = False) -> str:
    """Render a ValidationResult directly (library use, outside the service layer)."""
    if json_output:
        return result.model_dump_json(indent=2)
    console = create_console()
    if result.ok:
        console.print(Text("OK", style="viu.ok"), Text("  valid", style="viu.op"))
    else:
        console.print(Text("INVALID", style="viu.error"), f"  {len(result.errors)} error(s)")
        console.print(_issues_table(extract_errors(result)))
    return get_output(console).rstrip("\n")


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="viu.ok"), Text(f"  {result.op}", style="viu.op"))


def _field(console: Console, key: str, value: Any, *, style: str = "") -> None:
    if isinstance(value, (dict, list)):
        value = json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    console.print(Text(f"  {key}: ", style="viu.key"), Text(str(value), style=style))


def _issues_table(grouped: Mapping[str, list[str]]) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Field", style="viu.path", no_wrap=True)
    table.add_column("Message")
    for path, messages in grouped.items():
        for message in messages:
            table.add_row(path or "(root)", message)
    return table


def _warnings(result: ServiceResult, console: Console) -> None:
    for warning in result.warnings:
        console.print(Text("  warning: ", style="viu.warning"), warning)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(Text("ERROR", style="viu.error"), Text(f"  {result.op}", style="viu.op"), f" - {msg}")
    if err is None:
        return

    if "errors" in err.detail:
        console.print(_issues_table(err.detail["errors"]))
    for hint in err.detail.get("feedback", []):
        console.print(Text(f"  - {hint}", style="viu.hint"))
    if "available" in err.detail:
        _field(console, "available", ", ".join(err.detail["available"]))
    if verbose:
        for key, value in result.data.items():
            _field(console, key, value)


# ── Op renderers ──────────────────────────────────────────────────────


def _render_document(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "formatted", result.data.get("formatted", ""), style="viu.value")
    if verbose:
        _field(console, "value", result.data.get("value", ""))


def _render_password(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    score = result.data.get("score", 0)
    _field(console, "score", f"{score}/5", style=style_for_score(score))
    for hint in result.data.get("feedback", []):
        console.print(Text(f"  - {hint}", style="viu.hint"))


def _render_validation(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "schema", result.data.get("schema", ""))
    value = result.data.get("value")
    if isinstance(value, dict):
        for key, item in value.items():
            _field(console, key, item)
    else:
        _field(console, "value", value)
    _warnings(result, console)


def _render_schema_list(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Schema", style="viu.op", no_wrap=True)
    table.add_column("Fields")
    for item in result.data.get("items", []):
        table.add_row(item["name"], ", ".join(item["fields"]))
    console.print(table)


def _render_formatted(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    if verbose:
        _status_line(console, result)
        _field(console, "value", result.data.get("value", ""))
    console.print(Text(str(result.data.get("formatted", "")), style="viu.value"))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    _warnings(result, console)


# ── Dispatch table ─────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    # Checks
    "check_cpf": _render_document,
    "check_cnpj": _render_document,
    "check_cep": _render_document,
    "check_password": _render_password,
    # Schemas
    "validate": _render_validation,
    "list_schemas": _render_schema_list,
    # Formatting
    "format_currency": _render_formatted,
    "format_phone": _render_formatted,
    "format_slug": _render_formatted,
    "format_date": _render_formatted,
}
