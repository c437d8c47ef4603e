"""Root CLI group for ilp-plugin-shared with global flags and command registration."""

from __future__ import annotations

import click

from ilp_plugin_shared import __version__
from ilp_plugin_shared.commands import register_commands
from ilp_plugin_shared.commands._context import AppContext
from ilp_plugin_shared.config.settings import PluginSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="ilp-plugin-shared")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the resulting object.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("--account", default=None, help="Local account (overrides [ledger] account).")
@click.option("--prefix", default=None, help="Ledger prefix (overrides [ledger] prefix).")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    account: str | None,
    prefix: str | None,
) -> None:
    """ilp-plugin-shared — validate and normalize ledger plugin transfers and messages."""
    ctx.ensure_object(dict)
    settings = PluginSettings.from_cli(
        config_path=config_path,
        account=account,
        prefix=prefix,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
