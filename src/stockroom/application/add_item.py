"""Application service: Add / Restock Item use case."""

from __future__ import annotations

from stockroom.application.dto import AddItemResultDTO, ItemDTO
from stockroom.domain.model.item import parse_price, parse_quantity
from stockroom.domain.model.store import InventoryStore


class AddItemHandler:

    def __init__(self, store: InventoryStore) -> None:
        self._store = store

    def handle(self, name: str, quantity: str, price: str) -> AddItemResultDTO:
        """Add a new item, or restock it if the name is already stocked.

        *quantity* and *price* are raw user input and go through the same
        parsers the storage file uses.
        """
        qty = parse_quantity(quantity)
        unit_price = parse_price(price)
        restocked = name in self._store
        item = self._store.add(name, qty, unit_price)
        return AddItemResultDTO(item=ItemDTO.from_item(item), restocked=restocked)
