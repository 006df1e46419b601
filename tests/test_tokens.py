import pytest

from unitexpr.errors import UnsupportedSyntax
from unitexpr.parsers.tokens import Token, tokenize


def test_tokenize_pairs_operators_with_operands() -> None:
    assert tokenize("kg.m/s2") == (
        Token("kg", ""),
        Token("m", "."),
        Token("s2", "/"),
    )


def test_single_operand_has_no_operator() -> None:
    assert tokenize("cm2") == (Token("cm2", ""),)


def test_leading_division_inserts_one() -> None:
    assert tokenize("/s") == tokenize("1/s") == (Token("1", ""), Token("s", "/"))


def test_operand_text_keeps_signs_and_digits() -> None:
    tokens = tokenize("m-1.[in_i]+2")
    assert [token.code for token in tokens] == ["m-1", "[in_i]+2"]


def test_empty_operands_are_preserved() -> None:
    tokens = tokenize("m..s")
    assert [token.code for token in tokens] == ["m", "", "s"]
    assert tokenize("m.")[-1] == Token("", ".")


@pytest.mark.parametrize("expression", ["m(s)", "(m)", "kg/(m.s)", "m)"])
def test_parentheses_are_rejected(expression: str) -> None:
    with pytest.raises(UnsupportedSyntax) as excinfo:
        tokenize(expression)
    assert excinfo.value.expression == expression


@pytest.mark.parametrize("expression", ["m", "m/s", "kg.m/s2", "/s", "mol/L.h", "10.m/min"])
def test_token_count_matches_operator_count(expression: str) -> None:
    tokens = tokenize(expression)
    operators = sum(expression.count(op) for op in "./")
    assert len(tokens) == operators + 1
    assert tokens[0].operator == ""


def test_division_flag() -> None:
    first, second = tokenize("m/s")
    assert not first.is_division
    assert second.is_division
