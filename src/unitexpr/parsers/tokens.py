"""Split a unit expression into operator/operand pairs."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from ..errors import UnsupportedSyntax

__all__ = ["MULTIPLY", "DIVIDE", "Token", "tokenize"]

MULTIPLY = "."
DIVIDE = "/"
_OPERATORS = (MULTIPLY, DIVIDE)
_PARENTHESES = ("(", ")")


@dataclass(frozen=True)
class Token:
    """Operand code and the operator joining it to the previous result."""

    code: str
    operator: str = ""

    @property
    def is_division(self) -> bool:
        return self.operator == DIVIDE


def tokenize(expression: str) -> Tuple[Token, ...]:
    """Return the ordered tokens of ``expression``.

    The first token never carries an operator. A leading ``/`` is read as
    ``1/``, so ``/s`` and ``1/s`` tokenize the same way. Operand codes may be
    empty (``m.`` yields a trailing empty operand); callers decide how to
    report that.
    """

    if any(char in expression for char in _PARENTHESES):
        raise UnsupportedSyntax(expression)

    if expression.startswith(DIVIDE):
        expression = "1" + expression

    tokens: List[Token] = []
    operator = ""
    chunk: List[str] = []
    for char in expression:
        if char in _OPERATORS:
            tokens.append(Token(code="".join(chunk), operator=operator))
            operator = char
            chunk = []
        else:
            chunk.append(char)
    tokens.append(Token(code="".join(chunk), operator=operator))
    return tuple(tokens)
