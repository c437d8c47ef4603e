"""Subcommand modules for ilp-plugin-shared.

Provides register_commands() which uses deferred imports to keep
``ilp-plugin-shared --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the command groups on the root CLI group."""
    from ilp_plugin_shared.commands.normalize import normalize
    from ilp_plugin_shared.commands.validate import validate

    cli.add_command(validate)
    cli.add_command(normalize)
