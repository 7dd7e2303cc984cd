"""Tests for the Store repository and its transactions."""

from pathlib import Path

import pytest

from bookctl.config.settings import BookSettings
from bookctl.infrastructure.store import Store


class TestStore:
    def test_default_database_location(self, store: Store, store_root: Path) -> None:
        assert store.settings.database_path == store_root / ".bookctl" / "bookctl.db"
        assert store.settings.database_path.exists()
        assert store.root == store_root

    def test_list_books_in_id_order(self, store: Store) -> None:
        assert [b.id for b in store.list_books()] == [1, 2]

    def test_db_override(self, tmp_path: Path) -> None:
        settings = BookSettings.from_cli(store_root=tmp_path, db_path="custom/inv.db")
        s = Store(settings)
        try:
            assert (tmp_path / "custom" / "inv.db").exists()
            assert len(s.list_books()) == 2
        finally:
            s.close()


class TestStoreTransaction:
    def test_get_book(self, store: Store) -> None:
        with store.transaction() as txn:
            book = txn.get_book(2)
            missing = txn.get_book(999)
        assert book is not None
        assert book.title == "Book 2"
        assert missing is None

    def test_book_ids(self, store: Store) -> None:
        with store.transaction() as txn:
            assert txn.book_ids() == [1, 2]

    def test_set_count_commits(self, store: Store) -> None:
        with store.transaction() as txn:
            txn.set_count(1, 4)
        assert store.list_books()[0].count == 4

    def test_set_count_rejects_negative(self, store: Store) -> None:
        with pytest.raises(ValueError, match="negative"):
            with store.transaction() as txn:
                txn.set_count(1, -1)
        assert store.list_books()[0].count == 10

    def test_rollback_on_error(self, store: Store) -> None:
        with pytest.raises(RuntimeError):
            with store.transaction() as txn:
                txn.set_count(2, 0)
                raise RuntimeError("boom")
        assert store.list_books()[1].count == 5
