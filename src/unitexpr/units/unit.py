"""Immutable unit values: a magnitude and a dimension vector."""
from __future__ import annotations

import math
from dataclasses import dataclass, field, fields, replace
from typing import Any

from ..expressions import build_product, build_quotient
from .dimension import Dimension

__all__ = ["Unit"]


def _power_code(code: str, exponent: int) -> str:
    # compound codes and codes ending in a digit are repeated, not suffixed
    if code and not code[-1].isdigit() and "." not in code and "/" not in code:
        return f"{code}{exponent}"
    if exponent == 0:
        return "1"
    repeated = code
    for _ in range(abs(exponent) - 1):
        repeated = build_product(repeated, code)
    return repeated if exponent > 0 else build_quotient("1", repeated)


@dataclass(frozen=True)
class Unit:
    """A resolved unit.

    ``magnitude`` is the scale factor relative to the coherent base unit of
    ``dim``; ``code`` is the unit expression the value was built from.
    """

    code: str
    name: str
    magnitude: float = 1.0
    dim: Dimension = field(default_factory=Dimension)

    def __post_init__(self) -> None:
        if not math.isfinite(self.magnitude) or self.magnitude <= 0:
            raise ValueError(f"Unit magnitude must be a positive finite number, got {self.magnitude!r}")
        if not isinstance(self.dim, Dimension):
            raise TypeError(f"Unit dimension must be a Dimension, got {type(self.dim).__name__}")

    # ------------------------------------------------------------------
    # Capability set used by the expression parser
    # ------------------------------------------------------------------

    def clone(self) -> "Unit":
        return replace(self)

    def get_property(self, name: str) -> Any:
        if name not in {item.name for item in fields(self)}:
            raise AttributeError(f"Unit has no property '{name}'")
        return getattr(self, name)

    def with_updated(self, **changes: Any) -> "Unit":
        """Return a copy with ``changes`` applied; the receiver is untouched."""

        unknown = set(changes) - {item.name for item in fields(self)}
        if unknown:
            raise AttributeError(f"Unit has no property '{sorted(unknown)[0]}'")
        return replace(self, **changes)

    def multiply(self, other: "Unit") -> "Unit":
        return Unit(
            code=build_product(self.code, other.code),
            name=f"{self.name}*{other.name}",
            magnitude=self.magnitude * other.magnitude,
            dim=self.dim + other.dim,
        )

    def divide(self, other: "Unit") -> "Unit":
        return Unit(
            code=build_quotient(self.code, other.code),
            name=f"{self.name}/{other.name}",
            magnitude=self.magnitude / other.magnitude,
            dim=self.dim - other.dim,
        )

    def power(self, exponent: int) -> "Unit":
        return Unit(
            code=_power_code(self.code, exponent),
            name=f"{self.name}^{exponent}",
            magnitude=self.magnitude ** exponent,
            dim=self.dim.mul(exponent),
        )

    def invert(self) -> "Unit":
        return Unit(
            code=build_quotient("1", self.code),
            name=f"1/{self.name}",
            magnitude=1.0 / self.magnitude,
            dim=-self.dim,
        )

    # ------------------------------------------------------------------
    # Helpers for callers
    # ------------------------------------------------------------------

    def is_same_dimension(self, other: "Unit") -> bool:
        return self.dim == other.dim

    def convert_from(self, value: float, other: "Unit") -> float:
        """Express ``value`` given in ``other`` in this unit."""

        if not self.is_same_dimension(other):
            raise ValueError(
                f"Cannot convert from '{other.code}' ({other.dim}) to '{self.code}' ({self.dim})"
            )
        return value * other.magnitude / self.magnitude

    def to_dict(self) -> dict:
        return {
            "code": self.code,
            "name": self.name,
            "magnitude": self.magnitude,
            "dim": self.dim.as_dict(),
        }
