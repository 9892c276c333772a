"""Subcommand modules for viu.

register_commands() imports command modules lazily so ``viu --help``
stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register command groups and standalone commands on the root group."""
    # --- Groups ---
    from viu_shared.commands.check import check
    from viu_shared.commands.format_cmd import format_cmd

    cli.add_command(check)
    cli.add_command(format_cmd)

    # --- Standalone commands ---
    from viu_shared.commands.schemas import schemas
    from viu_shared.commands.validate import validate

    cli.add_command(validate)
    cli.add_command(schemas)
