"""Fixed-arity dimension vectors over the base dimensions."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Mapping, Tuple

__all__ = ["BASE_DIMENSIONS", "Dimension"]

BASE_DIMENSIONS: Tuple[str, ...] = (
    "length",
    "time",
    "mass",
    "angle",
    "temperature",
    "charge",
    "luminosity",
)


@dataclass(frozen=True)
class Dimension:
    """Integer exponents of a unit over :data:`BASE_DIMENSIONS`."""

    exponents: Tuple[int, ...] = (0,) * len(BASE_DIMENSIONS)

    def __post_init__(self) -> None:
        if len(self.exponents) != len(BASE_DIMENSIONS):
            raise ValueError(
                f"Dimension needs {len(BASE_DIMENSIONS)} exponents, got {len(self.exponents)}"
            )
        object.__setattr__(self, "exponents", tuple(int(value) for value in self.exponents))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, int] | None) -> "Dimension":
        mapping = mapping or {}
        unknown = set(mapping) - set(BASE_DIMENSIONS)
        if unknown:
            raise ValueError(f"Unknown base dimension(s): {', '.join(sorted(unknown))}")
        return cls(tuple(int(mapping.get(name, 0)) for name in BASE_DIMENSIONS))

    def __add__(self, other: "Dimension") -> "Dimension":
        return Dimension(tuple(a + b for a, b in zip(self.exponents, other.exponents)))

    def __sub__(self, other: "Dimension") -> "Dimension":
        return Dimension(tuple(a - b for a, b in zip(self.exponents, other.exponents)))

    def __neg__(self) -> "Dimension":
        return self.mul(-1)

    def mul(self, factor: int) -> "Dimension":
        return Dimension(tuple(value * factor for value in self.exponents))

    def is_dimensionless(self) -> bool:
        return not any(self.exponents)

    def as_dict(self) -> Dict[str, int]:
        """Return the non-zero exponents keyed by base dimension name."""

        return {name: value for name, value in zip(BASE_DIMENSIONS, self.exponents) if value}

    def __str__(self) -> str:
        parts = [f"{name}^{value}" for name, value in self.as_dict().items()]
        return " ".join(parts) if parts else "1"
