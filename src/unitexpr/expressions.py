"""String algebra on unit codes.

These helpers combine two *codes* (not resolved units) into the code of
their product or quotient, e.g. when a derived unit needs a synthetic code.
"""
from __future__ import annotations

__all__ = ["build_product", "build_quotient", "invert_operators"]

_MUL = "."
_DIV = "/"
_PLACEHOLDER = "\x00"


def build_product(first: str, second: str) -> str:
    """Return the code of ``first`` multiplied by ``second``."""

    return f"{first}{_MUL}{second}"


def invert_operators(code: str) -> str:
    """Swap every ``/`` with ``.`` and vice versa."""

    # three steps so the two operators never collide mid-transform
    swapped = code.replace(_DIV, _PLACEHOLDER)
    swapped = swapped.replace(_MUL, _DIV)
    return swapped.replace(_PLACEHOLDER, _MUL)


def build_quotient(first: str, second: str) -> str:
    """Return the code of ``first`` divided by ``second``.

    Dividing by the empty code is the identity. The operators inside
    ``second`` are inverted so that ``m`` / ``s.kg`` becomes ``m/s/kg``.
    """

    if not second:
        return first
    inverted = invert_operators(second)
    if inverted[0] in (_MUL, _DIV):
        return first + inverted
    return f"{first}{_DIV}{inverted}"
