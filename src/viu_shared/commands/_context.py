"""AppContext, the shared Click context object for all commands.

Created once by the root group and handed to subcommands via
``@click.pass_obj``. Owns logging setup and result emission (stdout vs
stderr routing and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from viu_shared.config.logging import configure_logging
from viu_shared.output.renderers import OutputSettings, format_result

if TYPE_CHECKING:
    from viu_shared.config.settings import ViuSettings
    from viu_shared.services.result import ServiceResult


class AppContext:
    """Settings plus output routing, shared by every subcommand."""

    def __init__(self, settings: ViuSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult.

        * Success: stdout; warnings go to stderr in human mode.
        * Failure: stderr, then exit with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
