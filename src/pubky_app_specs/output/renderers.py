"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from pubky_app_specs.output.console import create_console, get_output, style_for_key

if TYPE_CHECKING:
    from rich.console import Console

    from pubky_app_specs.services.result import ServiceResult

Renderer = Callable[["ServiceResult", "Console"], None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        if result.op.startswith("create_"):
            renderer = _render_created
        renderer(result, console)
        if verbose:
            _render_meta(console, result)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: the primary value only."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    for key in ("uri", "url", "path", "id"):
        value = result.data.get(key)
        if value:
            return str(value)
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="specs.ok")
    op = Text(f"  {result.op}", style="specs.op")
    console.print(label, op)


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    if isinstance(value, (dict, list)):
        value = json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    k = Text(f"  {key}: ", style="specs.key")
    v = Text("-" if value is None else str(value), style=style_for_key(key))
    console.print(k, v, sep="", soft_wrap=True)


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including the telemetry span (verbose only)."""
    if not result.meta:
        return
    console.print(Text("  meta:", style="dim"))
    for key, value in result.meta.items():
        if key == "telemetry":
            duration = value.get("duration_ms", 0.0)
            console.print(f"    [dim]{duration:>8.2f}ms[/dim]  {value.get('name', '?')}")
        else:
            console.print(f"    {key}: {value}")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="specs.error")
    op = Text(f"  {result.op}", style="specs.op")
    code = Text(f" [{err.code}]" if err else "", style="specs.key")
    console.print(label, op, code, Text(" — "), Text(msg), sep="")

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Operation renderers ───────────────────────────────────────────────


def _render_location(result: ServiceResult, console: Console) -> None:
    """Render parse/build results of URIs and paths."""
    _status_line(console, result)
    for key in ("uri", "path", "owner", "kind", "resource", "id"):
        if key in result.data:
            _field(console, key, result.data[key])


def _render_identifier(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key in ("id", "timestamp", "data"):
        if key in result.data:
            _field(console, key, result.data[key])


def _object_table(obj: dict[str, Any]) -> Table:
    """Build a two-column table of an object's wire fields."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Field", style="specs.key", no_wrap=True)
    table.add_column("Value")
    for key, value in obj.items():
        if isinstance(value, (dict, list)):
            value = json.dumps(value, separators=(",", ":"), ensure_ascii=False)
        table.add_row(key, Text("-" if value is None else str(value)))
    return table


def _render_imported(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    _field(console, "uri", result.data.get("uri"))
    _field(console, "kind", result.data.get("kind"))
    console.print(_object_table(result.data.get("object", {})))


def _render_created(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key in ("kind", "id", "path", "url"):
        if result.data.get(key):
            _field(console, key, result.data[key])
    console.print(_object_table(result.data.get("object", {})))


def _render_generic(result: ServiceResult, console: Console) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Renderer] = {
    "parse_uri": _render_location,
    "build_uri": _render_location,
    "parse_path": _render_location,
    "build_path": _render_location,
    "generate_id": _render_identifier,
    "validate_id": _render_identifier,
    "hash_id": _render_identifier,
    "import_object": _render_imported,
}
