"""Tokenizer, operand resolver and composer for unit expressions."""

from .compose import ResolvedToken, compose
from .operands import (
    CodeParts,
    Operand,
    OperandResolver,
    ScalarOperand,
    UnitOperand,
    parse_number,
    split_exponent,
)
from .tokens import DIVIDE, MULTIPLY, Token, tokenize

__all__ = [
    "Token",
    "MULTIPLY",
    "DIVIDE",
    "tokenize",
    "CodeParts",
    "Operand",
    "OperandResolver",
    "ScalarOperand",
    "UnitOperand",
    "parse_number",
    "split_exponent",
    "ResolvedToken",
    "compose",
]
