"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.text import Text

from projname.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from projname.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()
    renderer = _OP_RENDERERS[result.op]
    renderer(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    For ``check`` this is just the names that passed (or, on failure,
    the names that did not), one per line.
    """
    if result.op == "check" and "results" in result.data:
        wanted = result.ok
        return "\n".join(r["name"] for r in result.data["results"] if r["valid"] is wanted)
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    if result.ok:
        label = Text("OK", style="pn.ok")
    else:
        label = Text("ERROR", style="pn.error")
    op = Text(f"  {result.op}", style="pn.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}:", style="pn.key")
    console.print(k, Text(str(value)), end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block (verbose only)."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(Text(f"    {k}: {v}"))


def _render_error_message(console: Console, result: ServiceResult) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print()
    console.print(Text(msg, style="pn.error"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """One line per candidate, then the rule list if anything failed."""
    _status_line(console, result)
    for item in result.data.get("results", []):
        if item["valid"]:
            mark = Text("  ✓ ", style="pn.valid")
        else:
            mark = Text("  ✗ ", style="pn.invalid")
        console.print(mark, Text(item["name"], style="pn.name"), sep="", end="")
        console.print()
    _field(console, "valid", result.data.get("valid_count", 0))
    _field(console, "invalid", result.data.get("invalid_count", 0))
    if not result.ok:
        _render_error_message(console, result)
    if verbose:
        _render_meta(console, result)


def _render_rules(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Numbered rule list followed by the reserved words."""
    _status_line(console, result)
    console.print(Text("  Project names must:"))
    for i, rule in enumerate(result.data.get("rules", []), start=1):
        console.print(Text(f"    {i}. {rule}"))
    reserved = ", ".join(result.data.get("reserved", []))
    console.print(Text("  reserved:", style="pn.key"), Text(reserved, style="pn.reserved"), end="")
    console.print()
    if verbose:
        _field(console, "max_length", result.data.get("max_length"))


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "check": _render_check,
    "rules": _render_rules,
}
