"""Command: validate one or more identifiers."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from nricctl.commands._base import NricCommand

if TYPE_CHECKING:
    from nricctl.commands._context import AppContext


def _read_inputs(texts: tuple[str, ...]) -> list[str]:
    """Expand ``-`` into the non-blank lines of stdin."""
    inputs: list[str] = []
    for text in texts:
        if text == "-":
            with click.open_file("-") as stdin:
                inputs.extend(line.rstrip("\r\n") for line in stdin if line.strip())
        else:
            inputs.append(text)
    return inputs


@click.command(
    cls=NricCommand,
    examples="""\
  nricctl validate S1234567D
  nricctl validate S1234567D F1234567N T1234567A
  cat ids.txt | nricctl validate -
  nricctl --json validate G1234567X""",
)
@click.argument("texts", nargs=-1, required=True)
@click.pass_obj
def validate(app: AppContext, texts: tuple[str, ...]) -> None:
    """Validate identifiers; exits 1 if any is malformed or has a wrong check digit.

    Pass ``-`` to read one identifier per line from stdin.
    """
    inputs = _read_inputs(texts)
    if not inputs:
        raise click.UsageError("No identifiers supplied.")

    if len(inputs) == 1 and texts != ("-",):
        result = app.service.validate(inputs[0])
        app.emit(result)
        all_valid = result.data["valid"]
    else:
        result = app.service.validate_batch(inputs)
        app.emit(result)
        all_valid = result.data["invalid_count"] == 0

    if not all_valid:
        raise SystemExit(1)
