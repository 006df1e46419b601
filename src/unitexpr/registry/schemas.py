"""Pydantic models describing catalog entries for units and prefixes."""
from __future__ import annotations

import math
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..units import BASE_DIMENSIONS, Dimension, Unit

__all__ = ["UnitDefinition", "PrefixDefinition"]


class UnitDefinition(BaseModel):
    """Canonical definition of a unit as declared in the catalog."""

    code: str = Field(..., min_length=1, description="Case-sensitive unit code")
    name: str = Field(..., description="Human friendly unit name")
    magnitude: float = Field(default=1.0, gt=0, description="Scale relative to the base units of dim")
    dim: Dict[str, int] = Field(default_factory=dict, description="Exponents keyed by base dimension")
    print_symbol: Optional[str] = Field(default=None, description="Symbol used for display")
    property: Optional[str] = Field(default=None, description="Kind of quantity measured")

    model_config = ConfigDict(extra="allow", frozen=True)

    @field_validator("code")
    @classmethod
    def _reject_operators(cls, value: str) -> str:
        if any(char in value for char in "./()"):
            raise ValueError(f"unit code '{value}' must not contain operators or parentheses")
        return value

    @field_validator("magnitude")
    @classmethod
    def _finite(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("magnitude must be finite")
        return value

    @field_validator("dim")
    @classmethod
    def _known_dimensions(cls, value: Dict[str, int]) -> Dict[str, int]:
        unknown = set(value) - set(BASE_DIMENSIONS)
        if unknown:
            raise ValueError(f"unknown base dimension(s): {', '.join(sorted(unknown))}")
        return value

    def to_unit(self) -> Unit:
        return Unit(
            code=self.code,
            name=self.name,
            magnitude=self.magnitude,
            dim=Dimension.from_mapping(self.dim),
        )


class PrefixDefinition(BaseModel):
    """Multiplicative prefix such as ``k`` (kilo) or ``Ki`` (kibi)."""

    code: str = Field(..., min_length=1, max_length=2)
    name: str
    value: float = Field(..., gt=0, description="Scale applied to the unit magnitude")
    exp: Optional[int] = Field(default=None, description="Decimal exponent for base-10 prefixes")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _value_matches_exponent(self) -> "PrefixDefinition":
        if self.exp is not None and not math.isclose(self.value, 10.0 ** self.exp, rel_tol=1e-12):
            raise ValueError(f"prefix '{self.code}' value {self.value} does not equal 10^{self.exp}")
        return self
