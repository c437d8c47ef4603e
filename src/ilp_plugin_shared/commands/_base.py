"""Click building blocks shared by the ``validate`` and ``normalize`` groups.

Every transfer or message command has the same shape: a JSON ``SOURCE``
(``-`` for stdin), a required ``--direction`` and one ValidationService
call. :func:`add_object_command` builds that command for a group.

Commands and groups accept ``examples=`` text, printed by an eager
``--examples`` flag. ``{prog}`` in the text becomes the invoked program name.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import click

from ilp_plugin_shared.domain.types import Flow

if TYPE_CHECKING:
    from ilp_plugin_shared.commands._context import AppContext

FLOW_OPTION = click.option(
    "--direction",
    "flow",
    type=click.Choice([f.value for f in Flow]),
    required=True,
    help="Whether the object is arriving at or leaving the local account.",
)


def _print_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value:
        return
    examples: str = getattr(ctx.command, "examples", None) or ""
    prog = ctx.find_root().info_name or "ilp-plugin-shared"
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(examples.format(prog=prog))
    ctx.exit(0)


def _examples_option() -> click.Option:
    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=_print_examples,
        help="Show usage examples.",
    )


class IlpCommand(click.Command):
    """Command with an optional ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(_examples_option())


class IlpGroup(click.Group):
    """Group with an optional ``--examples`` flag; subcommands are IlpCommands."""

    command_class = IlpCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(_examples_option())


def add_object_command(
    group: IlpGroup,
    kind: str,
    *,
    action: str,
    examples: str | None = None,
) -> click.Command:
    """Register ``<group> <kind> SOURCE --direction ...`` on *group*.

    The command calls ``ValidationService.<action>_<kind>`` with the parsed
    JSON and the chosen flow, then emits the result.
    """

    @group.command(
        kind,
        examples=examples,
        help=f'{action.capitalize()} the {kind} JSON in SOURCE ("-" for stdin).',
    )
    @click.argument("source", type=click.File("r"))
    @FLOW_OPTION
    @click.pass_obj
    def run(app: AppContext, source: IO[str], flow: str) -> None:
        obj = app.load_json(source)
        call = getattr(app.service, f"{action}_{kind}")
        app.emit(call(obj, flow))

    return run
