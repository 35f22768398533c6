"""Flat-file implementation of InventoryRepository.

One record per line, ``name,quantity,price``, UTF-8. Lines starting with
``#`` are comments. Loading is forgiving: a bad line is skipped with a
warning and the rest of the file is still read. Saving always rewrites
the whole file.
"""

from __future__ import annotations

import logging
from pathlib import Path

from stockroom.domain.exceptions import StorageError, ValidationError
from stockroom.domain.model.item import (
    Item,
    check_name,
    format_price,
    parse_price,
    parse_quantity,
)
from stockroom.domain.model.store import MAX_ITEMS, InventoryStore
from stockroom.domain.repository.inventory_repository import (
    InventoryRepository,
    LoadResult,
    LoadWarning,
)

logger = logging.getLogger(__name__)

HEADER = "# Retail Inventory - format: name,quantity,price"
FIELD_SEPARATOR = ","
COMMENT_PREFIX = "#"


class CsvInventoryRepository(InventoryRepository):

    def __init__(self, file_path: Path, capacity: int = MAX_ITEMS) -> None:
        self._file_path = Path(file_path)
        self._capacity = capacity

    @property
    def file_path(self) -> Path:
        return self._file_path

    # --- InventoryRepository interface ----------------------------------------

    def load(self) -> LoadResult:
        result = LoadResult(store=InventoryStore(capacity=self._capacity))

        try:
            text = self._file_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.info(
                "%s not found; starting with an empty inventory", self._file_path
            )
            return result
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageError(f"Cannot read {self._file_path}: {exc}") from exc

        # Records end with "\n" only; read_text already folded "\r\n" into it
        for line_number, raw_line in enumerate(text.split("\n"), start=1):
            line = raw_line.strip()
            if not line or line.startswith(COMMENT_PREFIX):
                continue

            if result.store.is_full:
                self._warn(
                    result,
                    line_number,
                    f"capacity of {self._capacity} items reached; "
                    "remaining lines ignored",
                    line,
                )
                break

            item = self._parse_line(result, line_number, line)
            if item is not None:
                result.store.insert(item)

        logger.info(
            "Loaded %d item(s) from %s (%d skipped)",
            result.loaded, self._file_path, len(result.warnings),
        )
        return result

    def save(self, store: InventoryStore) -> int:
        items = store.list_items()
        lines = [HEADER]
        lines.extend(self._to_line(item) for item in items)
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(
                "\n".join(lines) + "\n", encoding="utf-8", newline="\n"
            )
        except OSError as exc:
            raise StorageError(f"Cannot write {self._file_path}: {exc}") from exc

        logger.info("Saved %d item(s) to %s", len(items), self._file_path)
        return len(items)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_line(item: Item) -> str:
        return FIELD_SEPARATOR.join(
            (item.name, str(item.quantity), format_price(item.price))
        )

    def _parse_line(
        self, result: LoadResult, line_number: int, line: str
    ) -> Item | None:
        """Turn one data line into an Item, or record why it was skipped."""
        fields = [part.strip() for part in line.split(FIELD_SEPARATOR)]
        if len(fields) != 3:
            self._warn(
                result,
                line_number,
                f"expected 3 fields (name,quantity,price), got {len(fields)}",
                line,
            )
            return None

        raw_name, raw_quantity, raw_price = fields
        try:
            name = check_name(raw_name)
            quantity = parse_quantity(raw_quantity)
            price = parse_price(raw_price)
        except ValidationError as exc:
            self._warn(result, line_number, str(exc), line)
            return None

        existing = result.store.get(name)
        if existing is not None:
            self._warn(
                result,
                line_number,
                f"duplicate name {name!r} (first seen as {existing.name!r})",
                line,
            )
            return None

        return Item(name=name, quantity=quantity, price=price)

    @staticmethod
    def _warn(result: LoadResult, line_number: int, reason: str, line: str) -> None:
        warning = LoadWarning(line_number=line_number, reason=reason, line=line)
        result.warnings.append(warning)
        logger.warning("Skipped %s: %s", warning, line)
