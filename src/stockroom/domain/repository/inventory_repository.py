"""Abstract repository for the InventoryStore aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. The concrete flat-file implementation lives in the
infrastructure layer; tests use an in-memory fake.

Unlike a row-per-call repository, this one moves the whole store at
once: ``load`` rebuilds it from storage and ``save`` rewrites storage
from it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from stockroom.domain.exceptions import ErrorKind
from stockroom.domain.model.store import InventoryStore


@dataclass(frozen=True)
class LoadWarning:
    """A stored record that was skipped while loading."""

    line_number: int
    reason: str
    line: str
    kind: ErrorKind = ErrorKind.MALFORMED_RECORD

    def __str__(self) -> str:
        return f"Line {self.line_number}: {self.reason}"


@dataclass
class LoadResult:
    """The rebuilt store plus every record that was dropped on the way."""

    store: InventoryStore
    warnings: list[LoadWarning] = field(default_factory=list)

    @property
    def loaded(self) -> int:
        return len(self.store)


class InventoryRepository(ABC):

    @abstractmethod
    def load(self) -> LoadResult:
        """Rebuild the store from storage.

        Missing storage yields an empty store. Raises StorageError when
        storage exists but cannot be read.
        """

    @abstractmethod
    def save(self, store: InventoryStore) -> int:
        """Replace everything in storage with *store*; return records written.

        Raises StorageError when storage cannot be written.
        """
