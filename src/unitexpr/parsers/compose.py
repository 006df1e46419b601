"""Fold resolved operands left to right into a single value."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Union

from ..errors import EmptyExpression, UnrecognizedElement
from ..expressions import build_product, build_quotient
from ..units import Unit
from .operands import Operand, ScalarOperand, UnitOperand
from .tokens import Token

__all__ = ["ResolvedToken", "compose"]


@dataclass(frozen=True)
class ResolvedToken:
    """A token paired with its operand (``None`` for an empty code)."""

    token: Token
    operand: Optional[Operand]


def _format_number(value: float) -> str:
    return f"{value:g}" if isinstance(value, float) else str(value)


def _scale_unit(running: float, unit: Unit, divide: bool) -> Unit:
    # number (op) unit: the unit is adopted, inverted when it is the divisor
    if divide:
        return Unit(
            code=build_quotient(_format_number(running), unit.code),
            name=f"{_format_number(running)}/{unit.name}",
            magnitude=running / unit.magnitude,
            dim=-unit.dim,
        )
    return unit.with_updated(
        code=build_product(_format_number(running), unit.code),
        magnitude=running * unit.magnitude,
    )


def _rescale(unit: Unit, factor: float, divide: bool) -> Unit:
    builder = build_quotient if divide else build_product
    magnitude = unit.magnitude / factor if divide else unit.magnitude * factor
    return unit.with_updated(code=builder(unit.code, _format_number(factor)), magnitude=magnitude)


def _combine(running: Operand, operand: Operand, divide: bool) -> Operand:
    if isinstance(running, UnitOperand):
        if isinstance(operand, UnitOperand):
            unit = running.unit.divide(operand.unit) if divide else running.unit.multiply(operand.unit)
            return UnitOperand(unit)
        return UnitOperand(_rescale(running.unit, operand.value, divide))
    if isinstance(operand, UnitOperand):
        return UnitOperand(_scale_unit(running.value, operand.unit, divide))
    value = running.value / operand.value if divide else running.value * operand.value
    return ScalarOperand(value)


def compose(resolved: Sequence[ResolvedToken], *, expression: str) -> Union[float, Unit]:
    """Combine ``resolved`` operands with their multiply/divide operators.

    Evaluation is strictly left to right with equal precedence, so ``a/b.c``
    is ``(a/b)*c``. Returns a plain number when every operand is numeric.
    """

    if not resolved or not isinstance(resolved[0].operand, (ScalarOperand, UnitOperand)):
        raise EmptyExpression(expression, resolved[0].token.code if resolved else None)

    running = resolved[0].operand
    for item in resolved[1:]:
        operand = item.operand
        if not isinstance(operand, (ScalarOperand, UnitOperand)):
            raise UnrecognizedElement(expression, item.token.code)
        try:
            running = _combine(running, operand, item.token.is_division)
        except (ValueError, ZeroDivisionError) as exc:
            raise UnrecognizedElement(expression, item.token.code) from exc

    if isinstance(running, ScalarOperand):
        return running.value
    return running.unit
