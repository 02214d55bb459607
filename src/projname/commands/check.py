"""Command: validate candidate project names."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from projname.commands._base import ProjnameCommand

if TYPE_CHECKING:
    from projname.commands._context import AppContext


@click.command(
    cls=ProjnameCommand,
    examples="""\
  projname check my-app
  projname check my-app another-app
  projname --json check my-app
  projname -q check my-app My_App""",
)
@click.argument("names", nargs=-1, required=True)
@click.pass_obj
def check(app: AppContext, names: tuple[str, ...]) -> None:
    """Check that NAMES are valid project names.

    Exits with status 1 if any name is rejected.
    """
    app.emit(app.names.check(list(names)))
