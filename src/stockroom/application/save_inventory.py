"""Application service: Save Inventory use case."""

from __future__ import annotations

from stockroom.domain.model.store import InventoryStore
from stockroom.domain.repository.inventory_repository import InventoryRepository


class SaveInventoryHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(self, store: InventoryStore) -> int:
        """Rewrite storage from *store*; return the number of items written."""
        return self._inventory_repo.save(store)
