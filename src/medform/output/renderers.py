"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from medform.output.console import create_console, get_output, style_for_issue

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from medform.services.result import ServiceResult

    Renderer = Callable[..., None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False, width: int | None = None) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console(width=width)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Rejections print one ``path: message`` line per issue so scripts can
    consume them without parsing JSON.
    """
    if not result.ok:
        errors = result.error.detail.get("errors") if result.error else None
        if errors:
            return "\n".join(f"{e['path']}: {e['message']}" for e in errors)
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(str(item["id"]) for item in items if "id" in item)

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="mf.ok")
    op = Text(f"  {result.op}", style="mf.op")
    console.print(label, op, end="")
    spec = result.data.get("spec")
    if spec:
        console.print(Text(f"  {spec}", style="mf.spec"), end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="mf.key")
    console.print(k, Text(str(value)), end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}")


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="mf.error")
    op = Text(f"  {result.op}", style="mf.op")
    console.print(label, op, Text(" — "), msg)

    errors = err.detail.get("errors") if err else None
    if errors:
        table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
        table.add_column("Field", style="mf.path")
        table.add_column("Message")
        if verbose:
            table.add_column("Kind")
        for issue in errors:
            path = issue.get("path") or "(record)"
            message = Text(str(issue.get("message", "")), style=style_for_issue(issue["kind"]))
            row: list[Any] = [path, message]
            if verbose:
                row.append(issue["kind"])
            table.add_row(*row)
        console.print(table)
    elif verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")

    if verbose:
        _render_meta(console, result)


# ── Operation renderers ───────────────────────────────────────────────


def _render_validate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render an accepted verdict as the normalized record."""
    _status_line(console, result)
    record: dict[str, Any] = result.data.get("record", {})
    for key, value in record.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


def _render_rules(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the rule catalog as a table."""
    items: list[dict[str, Any]] = result.data.get("items", [])
    table = Table(title=f"Rule specifications ({len(items)})", title_justify="left")
    table.add_column("Entity", style="mf.spec")
    table.add_column("Action", style="mf.op")
    table.add_column("Fields", justify="right")
    table.add_column("Summary")
    for item in items:
        table.add_row(
            item["entity"],
            item["action"],
            str(item["field_count"]),
            item.get("summary", ""),
        )
    console.print(table)


def _constraint_summary(constraint: dict[str, Any]) -> str:
    parts: list[str] = []
    if "choices" in constraint:
        parts.append("one of " + ", ".join(constraint["choices"]))
    for check in constraint.get("checks", []):
        name = check["check"]
        parts.append(f"{name}={check['arg']}" if "arg" in check else name)
    if constraint.get("allow_empty"):
        parts.append("empty=absent")
    if constraint.get("nullable"):
        parts.append("nullable")
    return "; ".join(parts)


def _render_describe(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render one spec's field table and refinements."""
    data = result.data
    console.print(Text(f"{data['entity']}:{data['action']}", style="mf.spec"))
    if data.get("summary"):
        console.print(Text(data["summary"], style="dim"))

    table = Table(show_header=True, header_style="bold")
    table.add_column("Field", style="mf.path")
    table.add_column("Kind")
    table.add_column("Required")
    table.add_column("Default")
    table.add_column("Constraints")
    for name, constraint in data["fields"].items():
        required = (
            Text("yes", style="mf.required")
            if constraint["required"]
            else Text("no", style="mf.optional")
        )
        default = repr(constraint["default"]) if "default" in constraint else ""
        table.add_row(name, constraint["kind"], required, default, _constraint_summary(constraint))
    console.print(table)

    refinements: list[dict[str, str]] = data.get("refinements", [])
    if refinements:
        console.print(Text("Refinements", style="bold"))
        for ref in refinements:
            console.print(f"  {ref['name']} -> {ref['path']}: {ref['message']}")

    if verbose:
        for name, constraint in data["fields"].items():
            for check in constraint.get("checks", []):
                console.print(f"  {name}.{check['check']}: {check['message']}")


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


_OP_RENDERERS: dict[str, Renderer] = {
    "validate": _render_validate,
    "rules": _render_rules,
    "describe": _render_describe,
}
