"""Shared pytest fixtures for bookctl tests."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner
from sqlalchemy import select, update
from sqlalchemy.engine import Engine

from bookctl.config.settings import BookSettings
from bookctl.infrastructure.database.engine import init_database
from bookctl.infrastructure.database.schema import books
from bookctl.infrastructure.store import Store


@pytest.fixture(autouse=True)
def _no_env_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's BOOKCTL_* environment out of the tests."""
    for name in ("BOOKCTL_CONFIG", "BOOKCTL_DATABASE__PATH", "BOOKCTL_STORE_ROOT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def db_engine(tmp_path: Path) -> Iterator[Engine]:
    """Initialized SQLite engine with the books table and seed rows."""
    engine = init_database(tmp_path / "books.db")
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def store_root(tmp_path: Path) -> Path:
    """Temporary store directory."""
    return tmp_path


@pytest.fixture
def store(store_root: Path) -> Iterator[Store]:
    """Seeded store on a temp directory."""
    settings = BookSettings.from_cli(store_root=store_root)
    s = Store(settings)
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def rng() -> random.Random:
    """Deterministic random source for restock tests."""
    return random.Random(1234)


@pytest.fixture
def _isolated_store(store_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so the CLI creates an isolated database.

    Use via ``@pytest.mark.usefixtures("_isolated_store")`` on command
    test classes.
    """
    monkeypatch.chdir(store_root)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def stock_of(engine: Engine, book_id: int) -> int | None:
    """Current count for *book_id*, or None if the row is missing."""
    with engine.connect() as conn:
        row = conn.execute(select(books.c.count).where(books.c.id == book_id)).first()
    return None if row is None else row.count


def set_stock(engine: Engine, book_id: int, count: int) -> None:
    """Force a stock count directly in the database."""
    with engine.begin() as conn:
        conn.execute(update(books).where(books.c.id == book_id).values(count=count))


@pytest.fixture
def stock() -> Callable[[Engine, int], int | None]:
    """Expose :func:`stock_of` to tests as a fixture."""
    return stock_of


@pytest.fixture
def force_stock() -> Callable[[Engine, int, int], None]:
    """Expose :func:`set_stock` to tests as a fixture."""
    return set_stock
