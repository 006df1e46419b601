"""Read-only lookup services over unit and prefix catalogs."""
from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional

from ..units import Unit
from .schemas import PrefixDefinition, UnitDefinition

__all__ = ["UnitTable", "PrefixTable"]


def _index_by_code(entries: Iterable, kind: str) -> Dict[str, object]:
    index: Dict[str, object] = {}
    for entry in entries:
        if entry.code in index:
            raise ValueError(f"Duplicate {kind} code '{entry.code}'")
        index[entry.code] = entry
    return index


class UnitTable:
    """Map unit codes to canonical :class:`Unit` values."""

    def __init__(self, definitions: Iterable[UnitDefinition]) -> None:
        self._definitions: Dict[str, UnitDefinition] = _index_by_code(definitions, "unit")  # type: ignore[assignment]
        self._units: Dict[str, Unit] = {code: item.to_unit() for code, item in self._definitions.items()}

    def get_by_code(self, code: str) -> Optional[Unit]:
        return self._units.get(code)

    def definition(self, code: str) -> Optional[UnitDefinition]:
        return self._definitions.get(code)

    def codes(self) -> List[str]:
        return list(self._units)

    def __contains__(self, code: object) -> bool:
        return code in self._units

    def __len__(self) -> int:
        return len(self._units)

    def __iter__(self) -> Iterator[Unit]:
        return iter(self._units.values())


class PrefixTable:
    """Map one- or two-character codes to :class:`PrefixDefinition`."""

    def __init__(self, definitions: Iterable[PrefixDefinition]) -> None:
        self._prefixes: Dict[str, PrefixDefinition] = _index_by_code(definitions, "prefix")  # type: ignore[assignment]

    def get_by_code(self, code: str) -> Optional[PrefixDefinition]:
        return self._prefixes.get(code)

    def codes(self) -> List[str]:
        return list(self._prefixes)

    def __contains__(self, code: object) -> bool:
        return code in self._prefixes

    def __len__(self) -> int:
        return len(self._prefixes)
