"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.text import Text

from bookctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from bookctl.services.result import ServiceResult

NO_RESULTS_MESSAGE = "No books found matching the criteria."


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        _OP_RENDERERS[result.op](result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"

    if result.op == "list_books":
        return "\n".join(str(item["id"]) for item in result.data.get("items", []))

    return f"OK: {result.op}"


def format_book_line(item: dict[str, Any]) -> str:
    """``id | title | author | yyyy-MM-dd | count``"""
    return f"{item['id']} | {item['title']} | {item['author']} | {item['year']} | {item['count']}"


# ── Helpers ───────────────────────────────────────────────────────────


def _plain(console: Console, line: str, style: str | None = None) -> None:
    # Book titles may contain brackets; never interpret them as markup.
    console.print(Text(line, style=style or ""), soft_wrap=True)


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="book.key")
    style = "book.id" if key == "id" else "book.title" if key == "title" else ""
    console.print(k, Text(str(value), style=style), sep="", soft_wrap=True)


def _render_verbose_fields(console: Console, result: ServiceResult, verbose: bool) -> None:
    if not verbose:
        return
    for key in ("id", "count", "added"):
        if key in result.data:
            _field(console, key, result.data[key])


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="book.error"),
        Text(f"  {result.op}", style="book.op"),
        Text(" - "),
        Text(msg),
        sep="",
        soft_wrap=True,
    )

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}", markup=False)


# ── Operation renderers ───────────────────────────────────────────────


def _render_book_list(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """One pipe-delimited line per book, or the no-results message."""
    items = result.data.get("items", [])
    for item in items:
        _plain(console, format_book_line(item))
    if not items:
        _plain(console, NO_RESULTS_MESSAGE, style="book.empty")
    if verbose:
        console.print(Text(f"\n{result.data.get('count', len(items))} books", style="dim"))


def _render_mutation(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render buy/restock results as their success message."""
    _plain(console, str(result.data["message"]), style="book.ok")
    _render_verbose_fields(console, result, verbose)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "list_books": _render_book_list,
    "buy": _render_mutation,
    "restock": _render_mutation,
}
