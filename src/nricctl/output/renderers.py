"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from nricctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from nricctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    ``validate`` prints the identifier only when its check digit is
    correct, batches print one line per valid item, and other ops print
    the identifier they produced.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(item["identifier"] for item in items if item.get("valid"))

    if result.op == "validate" and not result.data.get("valid"):
        return ""

    identifier = result.data.get("identifier")
    if identifier:
        return str(identifier)
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="nric.ok")
    op = Text(f"  {result.op}", style="nric.op")
    console.print(label, op, sep="")


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="nric.key")
    if key == "identifier":
        v = Text(str(value), style="nric.id")
    elif key == "valid":
        v = _validity(bool(value))
    elif isinstance(value, (dict, list)):
        v = Text(_json.dumps(value, separators=(",", ":")))
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _validity(valid: bool) -> Text:
    if valid:
        return Text("valid", style="nric.valid")
    return Text("invalid", style="nric.invalid")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="nric.error")
    op = Text(f"  {result.op}", style="nric.op")
    console.print(label, op, Text(f" — {msg}"), sep="")

    if verbose and err:
        console.print(Text(f"  code: {err.code}", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"  {k}: {v}", style="dim"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_complete(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "identifier", result.data["identifier"])
    _field(console, "check_digit", result.data["check_digit"])
    if verbose:
        _field(console, "prefix", result.data["prefix"])
        _field(console, "digits", result.data["digits"])


def _render_batch(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Input", no_wrap=True)
    table.add_column("Identifier", style="nric.id", no_wrap=True)
    table.add_column("Result")
    if verbose:
        table.add_column("Expected")

    for item in d["items"]:
        if "error" in item:
            status = Text(item["error"], style="nric.error")
        else:
            status = _validity(item["valid"])
        row: list[Any] = [Text(item["input"]), item.get("identifier", ""), status]
        if verbose:
            row.append(item.get("expected_check_digit", ""))
        table.add_row(*row)

    console.print(table)
    _field(console, "count", d["count"])
    _field(console, "valid_count", d["valid_count"])
    _field(console, "invalid_count", d["invalid_count"])


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "complete": _render_complete,
    "validate": _render_generic,
    "validate_batch": _render_batch,
    "inspect": _render_generic,
}
