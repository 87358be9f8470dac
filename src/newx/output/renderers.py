"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Successful results get the create_project confirmation, failures a single
error line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.text import Text

from newx.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from newx.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        _render_create_project(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}:", style="newx.key")
    v = Text(str(value), style="newx.path" if key == "path" else "")
    console.print(k, v, end="", soft_wrap=True)
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="newx.error")
    op = Text(f"  {result.op}", style="newx.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg), soft_wrap=True)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"), soft_wrap=True)


# ── Create renderer ───────────────────────────────────────────────────


def _render_create_project(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    """Final confirmation line; step lines were already reported live."""
    d = result.data
    console.print(Text(d.get("message", "OK"), style="newx.message"))
    if verbose:
        for key in ("path", "kind"):
            if key in d:
                _field(console, key, d[key])
        for f in d.get("files_added", []):
            _field(console, "file", f)
        _render_meta(console, result)

