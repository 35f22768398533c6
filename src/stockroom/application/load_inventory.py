"""Application service: Load Inventory use case.

Runs once at startup. Skipped lines are reported, never fatal; a
StorageError from the repository is left to propagate.
"""

from __future__ import annotations

from stockroom.application.dto import LoadReportDTO
from stockroom.domain.model.store import InventoryStore
from stockroom.domain.repository.inventory_repository import InventoryRepository


class LoadInventoryHandler:

    def __init__(self, inventory_repo: InventoryRepository, source: str = "") -> None:
        self._inventory_repo = inventory_repo
        self._source = source

    def handle(self) -> tuple[InventoryStore, LoadReportDTO]:
        result = self._inventory_repo.load()
        report = LoadReportDTO(
            source=self._source,
            loaded=result.loaded,
            warnings=[str(warning) for warning in result.warnings],
        )
        return result.store, report
