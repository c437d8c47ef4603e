"""Command group: validate and print the canonical form of a transfer or message."""

from __future__ import annotations

import click

from ilp_plugin_shared.commands._base import IlpGroup, add_object_command


@click.group(
    cls=IlpGroup,
    examples="""\
  {prog} --prefix g.x. --account g.x.alice normalize transfer t.json --direction outgoing
  {prog} -q normalize transfer - --direction incoming < incoming.json""",
)
def normalize() -> None:
    """Normalize transfers and messages into their canonical shape."""


add_object_command(
    normalize,
    "transfer",
    action="normalize",
    examples="""\
  {prog} -q normalize transfer t.json --direction outgoing > canonical.json""",
)
add_object_command(normalize, "message", action="normalize")
