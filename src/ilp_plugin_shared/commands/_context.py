"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy service construction, JSON input
loading, and centralized result emission (stdout/stderr routing + exit
codes).
"""

from __future__ import annotations

import json
from typing import IO, TYPE_CHECKING, Any

import click

from ilp_plugin_shared.output.formatters import format_result

if TYPE_CHECKING:
    from ilp_plugin_shared.config.settings import PluginSettings
    from ilp_plugin_shared.services.result import ServiceResult
    from ilp_plugin_shared.services.validation import ValidationService


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The validation service is built on first use so ``--help`` and
    ``--version`` never require a configured ledger.
    """

    def __init__(self, settings: PluginSettings) -> None:
        self.settings = settings
        self._service: ValidationService | None = None

        from ilp_plugin_shared.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> ValidationService:
        """The validation service (created lazily on first access)."""
        if self._service is None:
            from ilp_plugin_shared.context import StaticPluginContext
            from ilp_plugin_shared.plugins.manager import PluginManager
            from ilp_plugin_shared.services.validation import ValidationService

            ledger = self.settings.ledger
            if not ledger.prefix:
                raise click.UsageError(
                    "No ledger prefix configured. Pass --prefix or set [ledger] prefix."
                )
            if not ledger.account:
                raise click.UsageError(
                    "No local account configured. Pass --account or set [ledger] account."
                )

            plugin_manager = PluginManager()
            if self.settings.plugins.load_entry_points:
                plugin_manager.discover_and_load()
            self._service = ValidationService(
                StaticPluginContext.from_settings(self.settings),
                plugin_manager=plugin_manager,
            )
        return self._service

    @staticmethod
    def load_json(stream: IO[str]) -> Any:
        """Parse a JSON document from *stream*, as a usage error if malformed."""
        try:
            return json.load(stream)
        except json.JSONDecodeError as exc:
            name = getattr(stream, "name", "<input>")
            raise click.UsageError(f"Invalid JSON in {name}: {exc}") from exc

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        output = format_result(
            result,
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
        )
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not self.settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
