"""Locate and read the projname configuration table.

Settings live either in a dedicated ``projname.toml`` or under
``[tool.projname]`` in a ``pyproject.toml``. The search walks up from the
working directory and stops at the repository root (the first directory
containing ``.git``). ``PROJNAME_CONFIG`` names a file directly and
disables the search.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

CONFIG_FILENAME = "projname.toml"
PYPROJECT_FILENAME = "pyproject.toml"
CONFIG_ENV_VAR = "PROJNAME_CONFIG"
TOOL_TABLE = "projname"


def read_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as fh:
            return tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc


def config_table(path: Path) -> dict[str, Any]:
    """The projname settings held in *path*.

    A ``pyproject.toml`` contributes only its ``[tool.projname]`` table;
    any other file is read whole.
    """
    data = read_toml(path)
    if path.name == PYPROJECT_FILENAME:
        return data.get("tool", {}).get(TOOL_TABLE, {})
    return data


def _declares_tool_table(pyproject: Path) -> bool:
    return TOOL_TABLE in read_toml(pyproject).get("tool", {})


def find_config(start: Path | None = None) -> Path | None:
    """Nearest config file at or above *start* (default: cwd), or None.

    In each directory ``projname.toml`` wins over a ``pyproject.toml``;
    a ``pyproject.toml`` only counts if it has a ``[tool.projname]``
    table.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        path = Path(env_path)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        dedicated = directory / CONFIG_FILENAME
        if dedicated.is_file():
            return dedicated
        pyproject = directory / PYPROJECT_FILENAME
        if pyproject.is_file() and _declares_tool_table(pyproject):
            return pyproject
        if (directory / ".git").exists():
            break
    return None
