"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers,
and the only place that reads configuration from the environment.
"""

from __future__ import annotations

import os
from pathlib import Path

from stockroom.infrastructure.persistence.csv_inventory_repository import (
    CsvInventoryRepository,
)

FILE_ENV_VAR = "STOCKROOM_FILE"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"
DEFAULT_FILE = _DATA_DIR / "inventory.txt"


def inventory_file(override: str | os.PathLike[str] | None = None) -> Path:
    """Storage location: explicit override, then $STOCKROOM_FILE, then default."""
    if override:
        return Path(override)
    from_env = os.environ.get(FILE_ENV_VAR)
    if from_env:
        return Path(from_env)
    return DEFAULT_FILE


def inventory_repository(
    file_path: str | os.PathLike[str] | None = None,
) -> CsvInventoryRepository:
    return CsvInventoryRepository(inventory_file(file_path))
