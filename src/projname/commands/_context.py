"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy service construction and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from projname.config.logging import configure_logging
from projname.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from projname.config.settings import ProjnameSettings
    from projname.services.result import ServiceResult
    from projname.services.validation import NameService


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The name service is built on first use, so ``--help`` never loads
    the profanity word list.
    """

    def __init__(self, settings: ProjnameSettings) -> None:
        self.settings = settings
        self._names: NameService | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def names(self) -> NameService:
        """The name service (created lazily on first access)."""
        if self._names is None:
            from projname.services.validation import NameService

            self._names = NameService.from_settings(self.settings)
        return self._names

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
