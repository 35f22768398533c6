"""InventoryStore aggregate: the in-memory record store.

The store owns an ordered list of Items (insertion order preserved) and is
the only place they can be changed. It holds no module-level state, so any
number of stores can coexist.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import replace

from stockroom.domain.exceptions import (
    CapacityExceededError,
    EntityNotFoundError,
    InvalidNameError,
    InvalidQuantityError,
)
from stockroom.domain.model.item import (
    MAX_QUANTITY,
    Item,
    check_name,
    check_price,
    check_quantity,
    name_key,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
MAX_ITEMS = 500


class InventoryStore:
    """Aggregate root for stocked items.

    Invariants:
    - at most one Item per case-insensitive name
    - never more than ``capacity`` Items

    Every operation validates before it mutates, so a rejected call leaves
    the store exactly as it was.
    """

    def __init__(
        self,
        items: Iterable[Item] = (),
        capacity: int = MAX_ITEMS,
    ) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        self._capacity = capacity
        self._items: list[Item] = []
        for item in items:
            self.insert(item)

    # --- Lookup ---------------------------------------------------------------

    def find_by_name(self, name: str) -> int | None:
        """Return the position of *name* (case-insensitive), or None.

        A linear scan keeps "first occurrence wins" trivially true and is
        fast enough for a few hundred items.
        """
        key = name_key(name.strip())
        for index, item in enumerate(self._items):
            if item.key == key:
                return index
        return None

    def get(self, name: str) -> Item | None:
        index = self.find_by_name(name)
        if index is None:
            return None
        return self._items[index]

    # --- Mutations ------------------------------------------------------------

    def add(self, name: str, quantity: int, price: float) -> Item:
        """Add a new item, or restock an existing one.

        Restocking adds *quantity* to the current stock and replaces the
        price with *price*; it never creates a second record.
        """
        name = check_name(name)
        check_quantity(quantity)
        if quantity <= 0:
            raise InvalidQuantityError(f"Quantity must be positive, got {quantity}")
        price = check_price(price)

        index = self.find_by_name(name)
        if index is not None:
            current = self._items[index]
            new_quantity = current.quantity + quantity
            if new_quantity > MAX_QUANTITY:
                raise InvalidQuantityError(
                    f"Restocking {current.name} by {quantity} would exceed "
                    f"{MAX_QUANTITY} units (currently {current.quantity})"
                )
            restocked = replace(current, quantity=new_quantity, price=price)
            self._items[index] = restocked
            logger.info(
                "Restocked %r: qty=%d, price=%.2f",
                restocked.name, restocked.quantity, restocked.price,
            )
            return restocked

        item = Item(name=name, quantity=quantity, price=price)
        self._append(item)
        logger.info("Added %r: qty=%d, price=%.2f", name, quantity, price)
        return item

    def insert(self, item: Item) -> None:
        """Append an already-built Item, refusing duplicates.

        Used when reconstituting a store from storage, where a repeated
        name must be rejected rather than merged.
        """
        if self.find_by_name(item.name) is not None:
            raise InvalidNameError(f"Duplicate item name: {item.name!r}")
        self._append(item)

    def remove(self, name: str) -> Item:
        """Delete an item; the items after it keep their relative order."""
        index = self._require(name)
        removed = self._items.pop(index)
        logger.info("Removed %r", removed.name)
        return removed

    def update_quantity(self, name: str, new_quantity: int) -> Item:
        """Set the absolute stock level. Zero means out of stock, not gone."""
        check_quantity(new_quantity)
        index = self._require(name)
        updated = replace(self._items[index], quantity=new_quantity)
        self._items[index] = updated
        logger.info("%r quantity -> %d", updated.name, new_quantity)
        return updated

    # --- Queries --------------------------------------------------------------

    def total_value(self) -> float:
        """Sum of quantity x price over every item; 0.0 when empty."""
        total = 0.0
        for item in self._items:
            total += item.quantity * item.price
        return total

    def list_items(self) -> list[Item]:
        """Snapshot of the items in store order."""
        return list(self._items)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.list_items())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.find_by_name(name) is not None

    def __repr__(self) -> str:
        return f"InventoryStore(items={len(self._items)}, capacity={self._capacity})"

    # --- Internal helpers -----------------------------------------------------

    def _append(self, item: Item) -> None:
        if self.is_full:
            raise CapacityExceededError(
                f"Inventory full (max {self._capacity} items); cannot add {item.name!r}"
            )
        self._items.append(item)

    def _require(self, name: str) -> int:
        index = self.find_by_name(name)
        if index is None:
            raise EntityNotFoundError(f"'{name}' not found in inventory")
        return index
