"""The ``projname`` command group.

Global flags are collected here and folded into :class:`ProjnameSettings`.
Only flags the user actually passed are forwarded, so a flag left at its
default never masks a value from the environment or the config file.
"""

from __future__ import annotations

from typing import Any

import click

from projname import __version__
from projname.commands import register_commands
from projname.commands._context import AppContext
from projname.config.settings import ProjnameSettings

_FLAG_FIELDS = ("json_output", "quiet", "verbose", "log_json")


def _settings_overrides(flags: dict[str, Any]) -> dict[str, Any]:
    """Keyword overrides for the flags that were set on the command line."""
    overrides: dict[str, Any] = {name: True for name in _FLAG_FIELDS if flags[name]}
    if flags["no_wordlist"]:
        overrides["moderation"] = {"wordlist": False}
    return overrides


@click.group(
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(__version__, "-V", "--version", prog_name="projname")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the names, one per line.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and timing details.")
@click.option("--log-json", is_flag=True, help="Write log records to stderr as JSON.")
@click.option(
    "--no-wordlist",
    is_flag=True,
    help="Skip the better-profanity word list; use the built-in lexicon only.",
)
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Read settings from this file instead of searching for one.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, **flags: Any) -> None:
    """Validate project names."""
    settings = ProjnameSettings.from_cli(config_path=config_path, **_settings_overrides(flags))
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
