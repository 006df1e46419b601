"""Exceptions raised while turning unit expressions into unit values."""
from __future__ import annotations

from typing import Optional

__all__ = [
    "UnitStringError",
    "UnsupportedSyntax",
    "EmptyExpression",
    "UnrecognizedElement",
    "UnresolvedUnit",
]


class UnitStringError(ValueError):
    """Base class carrying the offending expression and token."""

    def __init__(self, message: str, *, expression: str, token: Optional[str] = None) -> None:
        super().__init__(message)
        self.expression = expression
        self.token = token


class UnsupportedSyntax(UnitStringError):
    """The expression uses grouping, which is not supported."""

    def __init__(self, expression: str) -> None:
        super().__init__(
            f"Unit string ({expression}) contains parentheses, which are not supported",
            expression=expression,
            token="(" if "(" in expression else ")",
        )


class EmptyExpression(UnitStringError):
    """The leading operand did not yield anything usable."""

    def __init__(self, expression: str, token: Optional[str] = None) -> None:
        super().__init__(
            f"Unit string ({expression}) did not contain anything that could be used to create a unit",
            expression=expression,
            token=token,
        )


class UnrecognizedElement(UnitStringError):
    """A non-leading operand is neither a number nor a unit."""

    def __init__(self, expression: str, token: Optional[str]) -> None:
        super().__init__(
            f"Unit string ({expression}) contains unrecognized element ({token!r})",
            expression=expression,
            token=token,
        )


class UnresolvedUnit(UnitStringError):
    """An operand code matches no unit in the registry."""

    def __init__(self, expression: str, token: str, base_code: Optional[str] = None) -> None:
        detail = f" (base code {base_code!r})" if base_code is not None and base_code != token else ""
        super().__init__(
            f"Unit string ({expression}) references unknown unit {token!r}{detail}",
            expression=expression,
            token=token,
        )
        self.base_code = base_code
