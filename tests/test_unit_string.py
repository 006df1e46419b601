"""End-to-end parsing against the bundled unit and prefix catalogs."""
import pytest

from unitexpr import (
    EmptyExpression,
    Unit,
    UnitString,
    UnitStringError,
    UnrecognizedElement,
    UnresolvedUnit,
    UnsupportedSyntax,
    parse,
)
from unitexpr.registry import default_unit_table


@pytest.fixture(scope="module")
def parser() -> UnitString:
    return UnitString()


def test_base_unit(parser: UnitString) -> None:
    meter = parser.parse("m")
    assert isinstance(meter, Unit)
    assert meter.dim.as_dict() == {"length": 1}
    assert meter.magnitude == default_unit_table().get_by_code("m").magnitude


def test_prefixed_unit(parser: UnitString) -> None:
    km = parser.parse("km")
    meter = parser.parse("m")
    assert km.magnitude == pytest.approx(1000 * meter.magnitude)
    assert km.dim == meter.dim


def test_prefix_and_exponent(parser: UnitString) -> None:
    cm2 = parser.parse("cm2")
    assert cm2.dim.as_dict() == {"length": 2}
    assert cm2.magnitude == pytest.approx(0.01**2 * parser.parse("m").magnitude ** 2)


def test_leading_division_matches_explicit_one(parser: UnitString) -> None:
    implicit = parser.parse("/s")
    explicit = parser.parse("1/s")
    assert implicit.dim.as_dict() == explicit.dim.as_dict() == {"time": -1}
    assert implicit.magnitude == explicit.magnitude


def test_quotient_and_product(parser: UnitString) -> None:
    assert parser.parse("m/s").dim.as_dict() == {"length": 1, "time": -1}
    product = parser.parse("m.s")
    assert product.dim.as_dict() == {"length": 1, "time": 1}
    assert product.magnitude == parser.parse("m").magnitude * parser.parse("s").magnitude


def test_negative_exponent_equals_division(parser: UnitString) -> None:
    power = parser.parse("m-1")
    quotient = parser.parse("/m")
    assert power.dim == quotient.dim
    assert power.magnitude == pytest.approx(quotient.magnitude)


def test_newton_from_base_units(parser: UnitString) -> None:
    composed = parser.parse("kg.m/s2")
    newton = parser.parse("N")
    assert composed.dim == newton.dim
    assert composed.magnitude == pytest.approx(newton.magnitude)


def test_left_to_right_evaluation(parser: UnitString) -> None:
    assert parser.parse("m/s.s").dim.as_dict() == {"length": 1}


@pytest.mark.parametrize(
    "expression, magnitude, dim",
    [
        ("Pa", 1000.0, {"length": -1, "mass": 1, "time": -2}),
        ("kPa", 1e6, {"length": -1, "mass": 1, "time": -2}),
        ("min", 60.0, {"time": 1}),
        ("h", 3600.0, {"time": 1}),
        ("mL", 1e-6, {"length": 3}),
        ("mm2", 1e-6, {"length": 2}),
        ("KiBy", 8192.0, {}),
        ("[in_i]2", 0.0254**2, {"length": 2}),
        ("km/h", 1000.0 / 3600.0, {"length": 1, "time": -1}),
        ("mol/L", 6.02214076e26, {"length": -3}),
    ],
)
def test_catalog_units(parser: UnitString, expression: str, magnitude: float, dim: dict) -> None:
    unit = parser.parse(expression)
    assert unit.magnitude == pytest.approx(magnitude)
    assert unit.dim.as_dict() == dim


def test_numeric_factors(parser: UnitString) -> None:
    scaled = parser.parse("3.m")
    assert scaled.magnitude == pytest.approx(3.0)
    assert scaled.dim.as_dict() == {"length": 1}

    divided = parser.parse("m/4")
    assert divided.magnitude == pytest.approx(0.25)
    assert divided.dim.as_dict() == {"length": 1}

    assert parser.parse("10.m/min").magnitude == pytest.approx(10 / 60)


def test_all_numeric_expression_returns_number(parser: UnitString) -> None:
    assert parser.parse("2.3") == 6
    assert parser.parse("/4") == pytest.approx(0.25)


def test_repeated_parses_are_independent(parser: UnitString) -> None:
    first = parser.parse("cm2")
    second = parser.parse("cm2")
    assert first == second
    assert first is not second
    assert default_unit_table().get_by_code("m").magnitude == 1.0


@pytest.mark.parametrize(
    "expression, error, token",
    [
        ("m(s)", UnsupportedSyntax, "("),
        ("", EmptyExpression, ""),
        (".m", EmptyExpression, ""),
        ("m.", UnrecognizedElement, ""),
        ("m//s", UnrecognizedElement, ""),
        ("m/0", UnrecognizedElement, "0"),
        ("foo", UnresolvedUnit, "foo"),
        ("m/foo2", UnresolvedUnit, "foo2"),
        ("cm-200", UnrecognizedElement, "cm-200"),
        ("km-200", UnrecognizedElement, "km-200"),
        ("Ym20", UnrecognizedElement, "Ym20"),
        ("m.cm-200", UnrecognizedElement, "cm-200"),
    ],
)
def test_errors_carry_expression_and_token(parser: UnitString, expression: str, error, token: str) -> None:
    with pytest.raises(error) as excinfo:
        parser.parse(expression)
    assert isinstance(excinfo.value, UnitStringError)
    assert isinstance(excinfo.value, ValueError)
    assert excinfo.value.expression == expression
    assert excinfo.value.token == token


def test_module_level_helpers(parser: UnitString) -> None:
    assert parse("m/s") == parser.parse("m/s")
    assert parser.mul_string("m", "s") == "m.s"
    assert parser.div_string("m", "s") == "m/s"
    assert parser.div_string("m", "") == "m"


def test_injected_registries_are_used() -> None:
    class Units:
        def get_by_code(self, code):
            return Unit(code="apple", name="apple", magnitude=2.0) if code == "apple" else None

    class Prefixes:
        def get_by_code(self, code):
            return None

    fruit = UnitString(units=Units(), prefixes=Prefixes())
    assert fruit.parse("apple.apple").magnitude == 4.0
    with pytest.raises(UnresolvedUnit):
        fruit.parse("m")


def test_prefix_reading_wins_over_whole_code(parser: UnitString) -> None:
    # c (centi) + d (day) resolves before the candela code is tried
    centiday = parser.parse("cd")
    assert centiday.dim.as_dict() == {"time": 1}
    assert centiday.magnitude == pytest.approx(864.0)
    assert default_unit_table().get_by_code("cd").dim.as_dict() == {"luminosity": 1}
