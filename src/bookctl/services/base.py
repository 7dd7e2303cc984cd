"""BaseService: foundation for bookctl services.

Every service receives a :class:`Store` at construction time and owns its
transaction boundaries via ``self._store.transaction()``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bookctl.infrastructure.store import Store


class BaseService:
    """Base for service-layer classes.

    Usage::

        class InventoryService(BaseService):
            def purchase(self, book_id: str | None) -> ServiceResult:
                with self._store.transaction() as txn:
                    ...
    """

    def __init__(self, store: Store) -> None:
        self._store = store
