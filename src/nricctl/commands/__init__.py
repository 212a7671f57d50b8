"""Subcommand modules for nricctl.

Provides register_commands() which uses deferred imports to keep
``nricctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from nricctl.commands.complete import complete
    from nricctl.commands.inspect_cmd import inspect_cmd
    from nricctl.commands.validate import validate

    cli.add_command(complete)
    cli.add_command(validate)
    cli.add_command(inspect_cmd)
