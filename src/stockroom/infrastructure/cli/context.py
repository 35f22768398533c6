"""State shared by every command of one CLI invocation."""

from __future__ import annotations

from dataclasses import dataclass

import click

from stockroom.application.load_inventory import LoadInventoryHandler
from stockroom.application.save_inventory import SaveInventoryHandler
from stockroom.domain.exceptions import DomainException
from stockroom.domain.model.store import InventoryStore
from stockroom.infrastructure.persistence.csv_inventory_repository import (
    CsvInventoryRepository,
)


@dataclass
class CliContext:
    repository: CsvInventoryRepository

    @property
    def source(self) -> str:
        return str(self.repository.file_path)

    def load(self) -> InventoryStore:
        """Load the store, turning a hard storage failure into a CLI error."""
        handler = LoadInventoryHandler(self.repository, source=self.source)
        try:
            store, _ = handler.handle()
        except DomainException as exc:
            raise click.ClickException(str(exc))
        return store

    def save(self, store: InventoryStore) -> int:
        try:
            return SaveInventoryHandler(self.repository).handle(store)
        except DomainException as exc:
            raise click.ClickException(str(exc))


pass_context = click.make_pass_decorator(CliContext)
