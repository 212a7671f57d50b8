"""Command: compute the check digit for a prefix and seven digits."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from nricctl.commands._base import NricCommand

if TYPE_CHECKING:
    from nricctl.commands._context import AppContext


@click.command(
    cls=NricCommand,
    examples="""\
  nricctl complete S 1234567
  nricctl complete G 123-4567
  nricctl --quiet complete T 0000000
  nricctl --json complete F 1234567""",
)
@click.argument("prefix", type=click.Choice(["S", "T", "F", "G"], case_sensitive=False))
@click.argument("digits")
@click.pass_obj
def complete(app: AppContext, prefix: str, digits: str) -> None:
    """Compute the check digit and full identifier for PREFIX and DIGITS."""
    app.emit(app.service.complete(prefix, digits))
