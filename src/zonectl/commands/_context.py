"""AppContext — shared Click context for all commands.

Created once by the root group and passed to subcommands with
``@click.pass_obj``. The workspace is opened lazily, so ``--help`` and
``--version`` never touch the database.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from zonectl.config.logging import configure_logging
from zonectl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from zonectl.config.settings import ZonectlSettings
    from zonectl.infrastructure.workspace import Workspace
    from zonectl.services.blueprint import BlueprintService
    from zonectl.services.result import ServiceResult


class AppContext:
    """State shared through Click's command hierarchy."""

    def __init__(self, settings: ZonectlSettings) -> None:
        self.settings = settings
        self._workspace: Workspace | None = None
        self._service: BlueprintService | None = None
        configure_logging(
            verbose=settings.verbose,
            quiet=settings.quiet,
            log_json=settings.log_json,
        )

    @property
    def workspace(self) -> Workspace:
        if self._workspace is None:
            from zonectl.infrastructure.workspace import Workspace

            self._workspace = Workspace.from_settings(self.settings)
        return self._workspace

    @property
    def service(self) -> BlueprintService:
        if self._service is None:
            from zonectl.services.blueprint import BlueprintService

            self._service = BlueprintService(self.workspace)
        return self._service

    def close(self) -> None:
        if self._workspace is not None:
            self._workspace.close()
            self._workspace = None
            self._service = None

    def emit(self, result: ServiceResult) -> None:
        """Print a ServiceResult with the right stream and exit code.

        Success goes to stdout, with warnings on stderr in human mode.
        Failure goes to stderr and exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
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
