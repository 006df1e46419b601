import json
from pathlib import Path

import pytest

from unitexpr.registry import (
    PrefixDefinition,
    PrefixTable,
    UnitDefinition,
    UnitTable,
    default_prefix_table,
    default_unit_table,
    load_prefix_table,
    load_unit_table,
)


def test_bundled_catalogs_load() -> None:
    units = default_unit_table()
    prefixes = default_prefix_table()
    assert {"m", "s", "g", "rad", "K", "C", "cd"} <= set(units.codes())
    assert "k" in prefixes and "Ki" in prefixes
    assert prefixes.get_by_code("Ki").exp is None
    assert prefixes.get_by_code("m").exp == -3
    assert units.get_by_code("N").dim.as_dict() == {"length": 1, "mass": 1, "time": -2}
    assert units.get_by_code("unknown") is None


def test_unit_definition_validation() -> None:
    with pytest.raises(ValueError):
        UnitDefinition(code="m/s", name="bad")
    with pytest.raises(ValueError):
        UnitDefinition(code="x", name="bad", magnitude=0)
    with pytest.raises(ValueError):
        UnitDefinition(code="x", name="bad", dim={"money": 1})


def test_prefix_definition_validation() -> None:
    with pytest.raises(ValueError):
        PrefixDefinition(code="k", name="kilo", value=100, exp=3)
    with pytest.raises(ValueError):
        PrefixDefinition(code="abc", name="too long", value=2)
    assert PrefixDefinition(code="Mi", name="mebi", value=1048576).exp is None


def test_duplicate_codes_are_rejected() -> None:
    meter = UnitDefinition(code="m", name="meter", dim={"length": 1})
    with pytest.raises(ValueError, match="Duplicate unit code 'm'"):
        UnitTable([meter, meter])
    kilo = PrefixDefinition(code="k", name="kilo", value=1000, exp=3)
    with pytest.raises(ValueError):
        PrefixTable([kilo, kilo])


def test_load_tables_from_json(tmp_path: Path) -> None:
    units_path = tmp_path / "units.json"
    units_path.write_text(
        json.dumps([{"code": "ft", "name": "foot", "magnitude": 0.3048, "dim": {"length": 1}}]),
        encoding="utf-8",
    )
    prefixes_path = tmp_path / "prefixes.json"
    prefixes_path.write_text(
        json.dumps({"prefixes": [{"code": "k", "name": "kilo", "value": 1000, "exp": 3}]}),
        encoding="utf-8",
    )

    units = load_unit_table(units_path)
    assert len(units) == 1
    assert units.get_by_code("ft").magnitude == pytest.approx(0.3048)
    assert units.definition("ft").name == "foot"
    assert len(load_prefix_table(prefixes_path)) == 1


def test_load_rejects_malformed_catalog(tmp_path: Path) -> None:
    path = tmp_path / "units.json"
    path.write_text(json.dumps({"units": {"m": {}}}), encoding="utf-8")
    with pytest.raises(ValueError):
        load_unit_table(path)
