"""Resolve a single operand code into a number or a unit.

An operand such as ``cm2`` is decomposed into an optional prefix (``c``), a
base code (``m``) and an optional signed integer exponent (``2``). The base
code is looked up in the unit registry; when that fails and a prefix was
split off, the prefix characters are put back and the lookup is retried once
without a prefix. This is how ``m2`` (square meter, not milli-"2") and
``Pa`` (pascal, not peta-"a") resolve.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Protocol, Tuple, Union

from ..errors import UnrecognizedElement, UnresolvedUnit
from ..registry.schemas import PrefixDefinition
from ..units import Unit
from ..utils.logging import log_event

__all__ = [
    "UnitLookup",
    "PrefixLookup",
    "ScalarOperand",
    "UnitOperand",
    "Operand",
    "CodeParts",
    "parse_number",
    "split_exponent",
    "OperandResolver",
]

LOGGER = logging.getLogger(__name__)

_SIGNS = "+-"
_DIGITS = "0123456789"


class UnitLookup(Protocol):
    def get_by_code(self, code: str) -> Optional[Unit]: ...


class PrefixLookup(Protocol):
    def get_by_code(self, code: str) -> Optional[PrefixDefinition]: ...


@dataclass(frozen=True)
class ScalarOperand:
    """Dimensionless number taking part in the expression as a pure factor."""

    value: float


@dataclass(frozen=True)
class UnitOperand:
    """Unit resolved from an operand code.

    ``retried`` is set when the code only resolved after its leading
    characters were re-read as part of the unit code instead of a prefix.
    """

    unit: Unit
    retried: bool = False


Operand = Union[ScalarOperand, UnitOperand]


@dataclass(frozen=True)
class CodeParts:
    """Decomposition of a unit code."""

    base: str
    prefix: Optional[PrefixDefinition] = None
    prefix_code: str = ""
    exponent: Optional[int] = None


def parse_number(code: str) -> Optional[float]:
    """Return ``code`` as a number, or ``None`` when it is not one."""

    if not code or "_" in code:
        return None
    try:
        return int(code)
    except ValueError:
        pass
    try:
        value = float(code)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def split_exponent(code: str) -> Tuple[str, Optional[int]]:
    """Split a trailing signed integer exponent off ``code``.

    The scan reads characters that are neither signs nor digits, then an
    optional sign, then digits up to the end of the code. Anything else
    (``m2s``, ``m-``) means there is no exponent and ``code`` is returned
    unchanged.
    """

    index = 0
    while index < len(code) and code[index] not in _SIGNS and code[index] not in _DIGITS:
        index += 1
    base, suffix = code[:index], code[index:]
    if not suffix:
        return code, None
    digits = suffix[1:] if suffix[0] in _SIGNS else suffix
    if not digits or any(char not in _DIGITS for char in digits):
        return code, None
    return base, int(suffix)


class OperandResolver:
    """Turn operand codes into :class:`ScalarOperand` or :class:`UnitOperand`."""

    def __init__(self, units: UnitLookup, prefixes: PrefixLookup) -> None:
        self._units = units
        self._prefixes = prefixes

    def resolve(self, code: str, *, expression: Optional[str] = None) -> Operand:
        number = parse_number(code)
        if number is not None:
            return ScalarOperand(number)
        return self.resolve_unit(code, expression=expression)

    def split(self, code: str) -> CodeParts:
        """Split ``code`` into prefix, base code and exponent (no lookup)."""

        if len(code) <= 1:
            return CodeParts(base=code)

        prefix_code = code[0]
        prefix = self._prefixes.get_by_code(prefix_code)
        if prefix is None and len(code) >= 2:
            prefix_code = code[:2]
            prefix = self._prefixes.get_by_code(prefix_code)
        if prefix is None:
            prefix_code = ""

        base, exponent = split_exponent(code[len(prefix_code):])
        return CodeParts(base=base, prefix=prefix, prefix_code=prefix_code, exponent=exponent)

    def resolve_unit(self, code: str, *, expression: Optional[str] = None) -> UnitOperand:
        parts = self.split(code)
        canonical = self._units.get_by_code(parts.base)
        retried = False

        if canonical is None and parts.prefix is not None:
            parts = CodeParts(base=parts.prefix_code + parts.base, exponent=parts.exponent)
            canonical = self._units.get_by_code(parts.base)
            retried = True
            log_event(
                LOGGER,
                "operand.prefix_retry",
                level=logging.DEBUG,
                code=code,
                base=parts.base,
                resolved=canonical is not None,
            )

        if canonical is None:
            log_event(LOGGER, "operand.unresolved", level=logging.DEBUG, code=code, base=parts.base)
            raise UnresolvedUnit(expression if expression is not None else code, code, parts.base)

        try:
            unit = self._apply(canonical.clone(), code, parts)
        except (OverflowError, ValueError) as exc:
            raise UnrecognizedElement(expression if expression is not None else code, code) from exc
        return UnitOperand(unit, retried=retried)

    def _apply(self, unit: Unit, code: str, parts: CodeParts) -> Unit:
        magnitude = unit.get_property("magnitude")
        dim = unit.get_property("dim")
        name = unit.get_property("name")
        prefix = parts.prefix
        prefix_value = prefix.value if prefix is not None else None

        if parts.exponent is not None:
            dim = dim.mul(parts.exponent)
            magnitude = magnitude ** parts.exponent
            name = f"{name}^{parts.exponent}"
            # decimal prefixes are raised with the unit: km2 is 10^(3*2) m2
            if prefix is not None and prefix.exp is not None:
                prefix_value = 10.0 ** (prefix.exp * parts.exponent)

        if prefix is not None:
            magnitude *= prefix_value
            name = f"{prefix.name}{name}"

        return unit.with_updated(code=code, name=name, magnitude=magnitude, dim=dim)
