"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from facportal.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from facportal.services.result import ServiceResult


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
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items") or result.data.get("issues")
    if items and isinstance(items, list):
        ids = (str(item.get("id", item.get("record_id", ""))) for item in items)
        return "\n".join(i for i in ids if i)

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="fp.ok"), Text(f"  {result.op}", style="fp.op"))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="fp.key")
    if key == "id" or key.endswith("_id"):
        v = Text(str(value), style="fp.id")
    elif key == "title":
        v = Text(str(value), style="fp.title")
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}")


def _render_issue_lines(console: Console, issues: list[str]) -> None:
    for issue in issues:
        console.print(Text.assemble("  ", ("warning", "fp.warning"), f": {issue}"))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="fp.error"),
        Text(f"  {result.op}", style="fp.op"),
        Text(" — "),
        Text(msg),
        sep="",
    )
    if err is None:
        return
    field = err.detail.get("field")
    if field:
        _field(console, "field", field)
    if verbose:
        _field(console, "code", err.code)
        kind = err.detail.get("kind")
        if kind:
            _field(console, "kind", kind)


# ── Validation renderer ───────────────────────────────────────────────


def _render_verdict(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        if key != "valid" and value is not None:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Record renderers ──────────────────────────────────────────────────


def _render_record(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render one record: bookkeeping, payload fields, then date warnings."""
    _status_line(console, result)
    data = result.data
    for key in ("id", "type", "title"):
        if key in data:
            _field(console, key, data[key])
    for key, value in data.get("payload", {}).items():
        _field(console, key, value)
    if verbose:
        _field(console, "created_at", data.get("created_at", ""))
        _field(console, "modified_at", data.get("modified_at", ""))
    _render_issue_lines(console, data.get("issues", []))


def _render_record_table(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a record listing with a date-issue column."""
    items = result.data.get("items", [])
    if not items:
        console.print("No records found.")
        return

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="fp.id", no_wrap=True, justify="right")
    table.add_column("Type")
    table.add_column("Title", style="fp.title")
    table.add_column("Date Issues", style="fp.warning")
    if verbose:
        table.add_column("Modified", style="dim")

    for item in items:
        row = [
            str(item.get("id", "")),
            str(item.get("type", "")),
            str(item.get("title", "")),
            "; ".join(item.get("issues", [])),
        ]
        if verbose:
            row.append(str(item.get("modified_at", "")))
        table.add_row(*row)

    console.print(table)
    flagged = result.data.get("flagged", 0)
    console.print(f"\n{len(items)} records, {flagged} with date issues")


def _render_delete(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "id", result.data.get("id", ""))


# ── Check renderer ────────────────────────────────────────────────────


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render check results with issues grouped by record type."""
    issues = result.data.get("issues", [])
    scanned = result.data.get("scanned", 0)

    if not issues:
        console.print(f"[fp.ok]OK[/fp.ok]  No date issues found in {scanned} records.")
        return

    summary: dict[str, str] = result.data.get("summary", {})
    if summary:
        console.print("[bold]Data Validation Issues Found[/bold]")
        for line in summary.values():
            console.print(Text(f"  {line}"))

    by_type: dict[str, list[dict[str, Any]]] = {}
    for issue in issues:
        by_type.setdefault(str(issue.get("record_type", "unknown")), []).append(issue)

    for rtype, type_issues in by_type.items():
        console.print(f"\n[bold]{rtype}[/bold]")
        for issue in type_issues:
            title = issue.get("title")
            console.print(
                Text.assemble(
                    "  ",
                    ("warning", "fp.warning"),
                    " [",
                    (str(issue.get("record_id")), "fp.id"),
                    "]",
                    f" {title}" if title else "",
                    f": {issue.get('message', '')}",
                )
            )
            if verbose:
                console.print(f"    field: {issue.get('field')}  kind: {issue.get('kind')}")

    flagged = result.data.get("flagged", 0)
    console.print(f"\n{len(issues)} warnings in {flagged} of {scanned} records")


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":"), default=str))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    # Validation
    "validate_date": _render_verdict,
    "validate_year": _render_verdict,
    "validate_range": _render_verdict,
    "validate_ongoing": _render_verdict,
    "validate_birth_date": _render_verdict,
    # Records
    "submit": _render_record,
    "edit": _render_record,
    "get": _render_record,
    "list_records": _render_record_table,
    "delete": _render_delete,
    # Check
    "check": _render_check,
}
