"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world. Money is pre-formatted
to two decimals here, so no presentation code ever rounds a price.
"""

from __future__ import annotations

from dataclasses import dataclass

from stockroom.domain.model.item import Item, format_price


@dataclass(frozen=True)
class ItemDTO:
    """Output: one stocked item as displayed to the user."""

    name: str
    quantity: int
    price: str  # formatted, e.g. "2.50"
    value: str  # quantity x price, formatted

    @classmethod
    def from_item(cls, item: Item) -> ItemDTO:
        return cls(
            name=item.name,
            quantity=item.quantity,
            price=format_price(item.price),
            value=format_price(item.value),
        )


@dataclass(frozen=True)
class AddItemResultDTO:
    """Output: the item after an add, and whether it already existed."""

    item: ItemDTO
    restocked: bool


@dataclass(frozen=True)
class InventoryDTO:
    """Output: every item in store order plus the grand total."""

    items: list[ItemDTO]
    total: str


@dataclass(frozen=True)
class LoadReportDTO:
    """Output: how a load went. Warnings are human-readable lines."""

    source: str
    loaded: int
    warnings: list[str]
