"""Console rendering of inventory DTOs."""

from __future__ import annotations

from stockroom.application.dto import InventoryDTO, ItemDTO

_RULE = "-" * 66


def inventory_table(inventory: InventoryDTO) -> list[str]:
    if not inventory.items:
        return ["(inventory is empty)"]

    lines = [
        f"{'Name':<30} {'Qty':>8} {'Price ($)':>10} {'Value ($)':>14}",
        _RULE,
    ]
    for item in inventory.items:
        lines.append(
            f"{item.name:<30} {item.quantity:>8} {item.price:>10} {item.value:>14}"
        )
    lines.append(_RULE)
    lines.append(f"{'TOTAL':<30} {'':>8} {'':>10} {inventory.total:>14}")
    return lines


def item_line(item: ItemDTO) -> str:
    return (
        f"{item.name:<30} qty={item.quantity:<6} price=${item.price}  "
        f"stock value=${item.value}"
    )
