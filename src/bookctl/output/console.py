"""Rich consoles for human-mode output.

Renderers draw into an in-memory console and hand back the text, so
``format_result`` stays a pure ``ServiceResult -> str`` function and
``AppContext.emit`` decides where it goes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

BOOK_THEME = Theme(
    {
        "book.ok": "bold green",
        "book.error": "bold red",
        "book.warning": "bold yellow",
        "book.op": "bold cyan",
        "book.key": "dim",
        "book.id": "bold blue",
        "book.title": "bold",
        "book.empty": "yellow",
    }
)

DEFAULT_WIDTH = 120


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Return a themed console writing to a fresh buffer.

    The buffer is not a terminal, so styles are dropped unless Rich is
    forced into color mode from the environment.
    """
    return Console(
        file=StringIO(),
        theme=BOOK_THEME,
        no_color=no_color,
        highlight=False,
        width=width or DEFAULT_WIDTH,
    )


def get_output(console: Console) -> str:
    """Text rendered so far into a console from :func:`create_console`."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
