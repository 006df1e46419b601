"""Unit and prefix registries."""
from __future__ import annotations

from .loader import default_prefix_table, default_unit_table, load_prefix_table, load_unit_table
from .schemas import PrefixDefinition, UnitDefinition
from .tables import PrefixTable, UnitTable

__all__ = [
    "UnitDefinition",
    "PrefixDefinition",
    "UnitTable",
    "PrefixTable",
    "load_unit_table",
    "load_prefix_table",
    "default_unit_table",
    "default_prefix_table",
]
