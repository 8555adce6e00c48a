"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Provides lazy service initialization and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pubky_app_specs.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from pubky_app_specs.config.settings import SpecsSettings
    from pubky_app_specs.services.result import ServiceResult
    from pubky_app_specs.services.specs import SpecsService


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``. The service is created
    on first use so ``--help`` and ``--version`` never import the core.
    """

    def __init__(self, settings: SpecsSettings) -> None:
        self.settings = settings
        self.owner: str | None = None
        self._service: SpecsService | None = None

        from pubky_app_specs.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from pubky_app_specs.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def service(self) -> SpecsService:
        """The specs service (created lazily on first access)."""
        if self._service is None:
            from pubky_app_specs.services.specs import SpecsService

            self._service = SpecsService(self.settings.config)
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
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
