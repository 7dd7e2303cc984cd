"""Tests for operation-specific Rich renderers."""

from bookctl.output.renderers import (
    _OP_RENDERERS,
    format_book_line,
    render_quiet,
    render_result,
)
from bookctl.services.result import ServiceError, ServiceResult

# ── Helpers ───────────────────────────────────────────────────────────

BOOK_1 = {"id": 1, "title": "Book 1", "author": "Author 1", "year": "2020-01-01", "count": 10}
BOOK_2 = {"id": 2, "title": "Book 2", "author": "Author 2", "year": "2021-05-10", "count": 5}


def _ok(op: str, **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str, code: str, message: str, **detail: object) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=dict(detail)),
    )


# ── Error rendering ──────────────────────────────────────────────────


class TestErrorRenderer:
    def test_basic_error(self) -> None:
        output = render_result(_err("buy", "NOT_FOUND", "Book not found."))
        assert output == "ERROR  buy - Book not found."

    def test_verbose_shows_detail(self) -> None:
        output = render_result(_err("buy", "NOT_FOUND", "Book not found.", id=999), verbose=True)
        assert "detail" in output
        assert "id: 999" in output

    def test_no_error_object(self) -> None:
        assert "Unknown error" in render_result(ServiceResult(ok=False, op="buy"))


# ── Listing ──────────────────────────────────────────────────────────


class TestBookListRenderer:
    def test_line_format(self) -> None:
        assert format_book_line(BOOK_1) == "1 | Book 1 | Author 1 | 2020-01-01 | 10"

    def test_one_line_per_book(self) -> None:
        output = render_result(_ok("list_books", items=[BOOK_1, BOOK_2], count=2))
        assert output.splitlines() == [
            "1 | Book 1 | Author 1 | 2020-01-01 | 10",
            "2 | Book 2 | Author 2 | 2021-05-10 | 5",
        ]

    def test_empty_prints_only_message(self) -> None:
        output = render_result(_ok("list_books", items=[], count=0))
        assert output == "No books found matching the criteria."

    def test_markup_in_title_is_literal(self) -> None:
        item = {**BOOK_1, "title": "[bold]Loud[/bold]"}
        output = render_result(_ok("list_books", items=[item], count=1))
        assert "[bold]Loud[/bold]" in output

    def test_verbose_adds_count(self) -> None:
        output = render_result(_ok("list_books", items=[BOOK_1], count=1), verbose=True)
        assert "1 books" in output


# ── Mutations ────────────────────────────────────────────────────────


class TestMutationRenderer:
    def test_buy_message(self) -> None:
        result = _ok("buy", id=1, title="Book 1", count=9, message="Book 'Book 1' bought successfully.")
        assert render_result(result) == "Book 'Book 1' bought successfully."

    def test_restock_verbose_fields(self) -> None:
        result = _ok(
            "restock",
            id=2,
            title="Book 2",
            count=8,
            added=3,
            message="Book 'Book 2' restocked successfully.",
        )
        output = render_result(result, verbose=True)
        assert "restocked successfully" in output
        assert "added: 3" in output
        assert "count: 8" in output

    def test_every_service_op_has_a_renderer(self) -> None:
        assert set(_OP_RENDERERS) == {"list_books", "buy", "restock"}


# ── Quiet mode ───────────────────────────────────────────────────────


class TestRenderQuiet:
    def test_list_ids_only(self) -> None:
        assert render_quiet(_ok("list_books", items=[BOOK_1, BOOK_2], count=2)) == "1\n2"

    def test_empty_list(self) -> None:
        assert render_quiet(_ok("list_books", items=[], count=0)) == ""

    def test_mutation(self) -> None:
        assert render_quiet(_ok("buy", id=1)) == "OK: buy"

    def test_error(self) -> None:
        assert render_quiet(_err("buy", "NOT_FOUND", "Book not found.")) == (
            "ERROR: buy - Book not found."
        )
