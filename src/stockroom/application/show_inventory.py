"""Application service: Show Inventory and Total Value use cases (queries)."""

from __future__ import annotations

from stockroom.application.dto import InventoryDTO, ItemDTO
from stockroom.domain.model.item import format_price
from stockroom.domain.model.store import InventoryStore


class ShowInventoryHandler:

    def __init__(self, store: InventoryStore) -> None:
        self._store = store

    def handle(self) -> InventoryDTO:
        return InventoryDTO(
            items=[ItemDTO.from_item(item) for item in self._store.list_items()],
            total=format_price(self._store.total_value()),
        )


class TotalValueHandler:

    def __init__(self, store: InventoryStore) -> None:
        self._store = store

    def handle(self) -> str:
        return format_price(self._store.total_value())
