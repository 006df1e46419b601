"""Parse unit expressions such as ``cm2``, ``m/s`` or ``kg.m/s2``."""
from __future__ import annotations

import logging
from typing import Optional, Tuple, Union

from .expressions import build_product, build_quotient
from .parsers.compose import ResolvedToken, compose
from .parsers.operands import OperandResolver, PrefixLookup, UnitLookup
from .parsers.tokens import Token, tokenize
from .registry import default_prefix_table, default_unit_table
from .units import Unit

__all__ = ["UnitString", "parse", "build_product", "build_quotient"]

LOGGER = logging.getLogger(__name__)


class UnitString:
    """Parser bound to a unit registry and a prefix registry.

    Both registries are only read. When omitted, the bundled catalogs are
    used.
    """

    def __init__(self, units: Optional[UnitLookup] = None, prefixes: Optional[PrefixLookup] = None) -> None:
        self.units = units if units is not None else default_unit_table()
        self.prefixes = prefixes if prefixes is not None else default_prefix_table()
        self._resolver = OperandResolver(self.units, self.prefixes)

    @property
    def resolver(self) -> OperandResolver:
        return self._resolver

    def tokenize(self, expression: str) -> Tuple[Token, ...]:
        return tokenize(expression)

    def parse(self, expression: str) -> Union[float, Unit]:
        """Return the unit (or plain number) described by ``expression``.

        Raises a :class:`~unitexpr.errors.UnitStringError` subclass when the
        expression cannot be parsed.
        """

        resolved = [
            ResolvedToken(
                token,
                self._resolver.resolve(token.code, expression=expression) if token.code else None,
            )
            for token in tokenize(expression)
        ]
        result = compose(resolved, expression=expression)
        LOGGER.debug("unit_string_parsed", extra={"expression": expression, "tokens": len(resolved)})
        return result

    def mul_string(self, first: str, second: str) -> str:
        return build_product(first, second)

    def div_string(self, first: str, second: str) -> str:
        return build_quotient(first, second)


_DEFAULT: Optional[UnitString] = None


def _default_parser() -> UnitString:
    global _DEFAULT
    if _DEFAULT is None:
        _DEFAULT = UnitString()
    return _DEFAULT


def parse(expression: str) -> Union[float, Unit]:
    """Parse ``expression`` with the bundled unit and prefix catalogs."""

    return _default_parser().parse(expression)
