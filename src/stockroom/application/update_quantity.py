"""Application service: Update Quantity use case."""

from __future__ import annotations

from stockroom.application.dto import ItemDTO
from stockroom.domain.model.item import parse_quantity
from stockroom.domain.model.store import InventoryStore


class UpdateQuantityHandler:

    def __init__(self, store: InventoryStore) -> None:
        self._store = store

    def handle(self, name: str, quantity: str) -> ItemDTO:
        """Set the absolute stock level. Zero marks the item out of stock."""
        item = self._store.update_quantity(name, parse_quantity(quantity))
        return ItemDTO.from_item(item)
