"""Application service: Search Item use case (query)."""

from __future__ import annotations

from stockroom.application.dto import ItemDTO
from stockroom.domain.model.store import InventoryStore


class SearchItemHandler:

    def __init__(self, store: InventoryStore) -> None:
        self._store = store

    def handle(self, name: str) -> ItemDTO | None:
        item = self._store.get(name)
        if item is None:
            return None
        return ItemDTO.from_item(item)
