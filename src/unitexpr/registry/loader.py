"""Load unit and prefix catalogs from JSON documents."""
from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List

from ..config import get_settings
from .schemas import PrefixDefinition, UnitDefinition
from .tables import PrefixTable, UnitTable

__all__ = [
    "load_unit_table",
    "load_prefix_table",
    "default_unit_table",
    "default_prefix_table",
]

LOGGER = logging.getLogger(__name__)


def _read_entries(path: Path, key: str) -> List[Dict[str, Any]]:
    path = Path(path)
    with path.open("r", encoding="utf-8") as handle:
        payload = json.load(handle)
    if isinstance(payload, list):
        entries = payload
    elif isinstance(payload, dict):
        entries = payload.get(key, [])
    else:
        entries = None
    if not isinstance(entries, list):
        raise ValueError(f"Catalog '{path}' must contain a list under '{key}'")
    return entries


def load_unit_table(path: Path) -> UnitTable:
    entries = _read_entries(path, "units")
    table = UnitTable(UnitDefinition.model_validate(entry) for entry in entries)
    LOGGER.debug("unit_catalog_loaded", extra={"path": str(path), "units": len(table)})
    return table


def load_prefix_table(path: Path) -> PrefixTable:
    entries = _read_entries(path, "prefixes")
    table = PrefixTable(PrefixDefinition.model_validate(entry) for entry in entries)
    LOGGER.debug("prefix_catalog_loaded", extra={"path": str(path), "prefixes": len(table)})
    return table


@lru_cache(maxsize=1)
def default_unit_table() -> UnitTable:
    """Return the unit table resolved from :func:`get_settings` (cached)."""

    return load_unit_table(get_settings().units_path)


@lru_cache(maxsize=1)
def default_prefix_table() -> PrefixTable:
    """Return the prefix table resolved from :func:`get_settings` (cached)."""

    return load_prefix_table(get_settings().prefixes_path)
