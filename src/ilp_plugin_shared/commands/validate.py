"""Command group: check transfers, messages and fulfillments without rewriting them."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ilp_plugin_shared.commands._base import IlpGroup, add_object_command

if TYPE_CHECKING:
    from ilp_plugin_shared.commands._context import AppContext


@click.group(
    cls=IlpGroup,
    examples="""\
  {prog} --prefix g.x. --account g.x.alice validate transfer t.json --direction outgoing
  cat m.json | {prog} validate message - --direction incoming
  {prog} validate fulfillment cz4FEOTTzBQ9vBr2rXJVHXaWu_Tow3OZT-V0FBhJvA8""",
)
def validate() -> None:
    """Validate transfers, messages and fulfillments."""


add_object_command(
    validate,
    "transfer",
    action="validate",
    examples="""\
  {prog} validate transfer incoming.json --direction incoming
  {prog} --json validate transfer - --direction outgoing < t.json""",
)
add_object_command(validate, "message", action="validate")


@validate.command(
    examples="""\
  {prog} --prefix g.x. --account g.x.alice validate fulfillment \\
      cz4FEOTTzBQ9vBr2rXJVHXaWu_Tow3OZT-V0FBhJvA8""",
)
@click.argument("value")
@click.pass_obj
def fulfillment(app: AppContext, value: str) -> None:
    """Check that VALUE is a 32-byte base64url fulfillment."""
    app.emit(app.service.validate_fulfillment(value))
