"""Command: print the project-name rules."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from projname.commands._base import ProjnameCommand

if TYPE_CHECKING:
    from projname.commands._context import AppContext


@click.command(
    cls=ProjnameCommand,
    examples="""\
  projname rules
  projname --json rules""",
)
@click.pass_obj
def rules(app: AppContext) -> None:
    """Show the rules every project name must follow."""
    app.emit(app.names.rules())
