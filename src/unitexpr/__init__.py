"""unitexpr – parse compact unit expressions into unit values."""

from ._version import __version__
from .errors import EmptyExpression, UnitStringError, UnrecognizedElement, UnresolvedUnit, UnsupportedSyntax
from .expressions import build_product, build_quotient
from .unit_string import UnitString, parse
from .units import Dimension, Unit

__all__ = [
    "__version__",
    "UnitString",
    "parse",
    "build_product",
    "build_quotient",
    "Unit",
    "Dimension",
    "UnitStringError",
    "UnsupportedSyntax",
    "EmptyExpression",
    "UnrecognizedElement",
    "UnresolvedUnit",
]
