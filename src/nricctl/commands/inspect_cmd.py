"""Command: show every field of a parsed identifier."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from nricctl.commands._base import NricCommand

if TYPE_CHECKING:
    from nricctl.commands._context import AppContext


@click.command(
    "inspect",
    cls=NricCommand,
    examples="""\
  nricctl inspect S1234567D
  nricctl --json inspect F1234567N""",
)
@click.argument("text")
@click.pass_obj
def inspect_cmd(app: AppContext, text: str) -> None:
    """Break TEXT into prefix, family, digits, and check digit."""
    app.emit(app.service.inspect(text))
