"""Tests for Rich Console factory and theme."""

from io import StringIO

from bookctl.output.console import BOOK_THEME, create_console, get_output


class TestCreateConsole:
    def test_returns_console_with_stringio(self) -> None:
        assert isinstance(create_console().file, StringIO)

    def test_no_color_disables_ansi(self) -> None:
        console = create_console(no_color=True)
        console.print("[bold red]hello[/bold red]")
        output = get_output(console)
        assert "\x1b" not in output
        assert "hello" in output

    def test_custom_width(self) -> None:
        assert create_console(width=80).width == 80

    def test_default_width(self) -> None:
        assert create_console().width == 120

    def test_theme_styles(self) -> None:
        assert "book.error" in BOOK_THEME.styles
        assert "book.ok" in BOOK_THEME.styles
