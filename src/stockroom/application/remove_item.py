"""Application service: Remove Item use case."""

from __future__ import annotations

from stockroom.application.dto import ItemDTO
from stockroom.domain.model.store import InventoryStore


class RemoveItemHandler:

    def __init__(self, store: InventoryStore) -> None:
        self._store = store

    def handle(self, name: str) -> ItemDTO:
        return ItemDTO.from_item(self._store.remove(name))
