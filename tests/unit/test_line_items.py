import pytest

from backend.schemas import ProjectArea
from backend.services.totals import compute_totals
from frontend import line_items


def _areas(*names):
    return tuple(ProjectArea(area_name=name) for name in names)


def test_add_appends_default_area():
    areas = line_items.add(_areas("Hall"))
    assert len(areas) == 2
    added = areas[-1]
    assert added.area_name == ""
    assert added.area_type == "indoor"
    assert added.surface_type == "drywall"
    assert added.ceiling_height == 8
    assert added.paint_brand == "Benjamin Moore"
    assert added.number_of_coats == 2
    assert added.labor_cost == 0 and added.material_cost == 0


def test_remove_never_drops_last_area():
    areas = _areas("Hall")
    assert line_items.remove(areas, 0) == areas

    areas = _areas("Hall", "Kitchen", "Bath")
    for _ in range(5):
        areas = line_items.remove(areas, 0)
        assert len(areas) >= 1
    assert [a.area_name for a in areas] == ["Bath"]


def test_remove_out_of_range_is_ignored():
    areas = _areas("Hall", "Kitchen")
    assert line_items.remove(areas, 5) == areas
    assert line_items.remove(areas, -1) == areas


def test_update_replaces_one_field_without_mutating():
    original = _areas("Hall", "Kitchen")
    updated = line_items.update(original, 1, "labor_cost", 250)

    assert updated[1].labor_cost == 250
    assert updated[1].area_name == "Kitchen"
    assert updated[0] is original[0]
    assert original[1].labor_cost == 0


def test_update_ignores_bad_index_and_unknown_field():
    areas = _areas("Hall")
    assert line_items.update(areas, 3, "labor_cost", 10) == areas
    assert line_items.update(areas, 0, "colour", "red") == areas


def test_as_areas_accepts_dicts():
    areas = line_items.as_areas([{"area_name": "Deck", "area_type": "outdoor", "surface_type": "wood"}])
    assert isinstance(areas, tuple)
    assert areas[0].area_type == "outdoor"


@pytest.mark.parametrize("field, value", [
    ("labor_cost", -50),
    ("material_cost", -0.01),
    ("number_of_coats", 99),
    ("number_of_coats", 0),
    ("labor_cost", "abc"),
    ("area_type", "basement"),
])
def test_update_rejects_values_the_model_forbids(field, value):
    areas = _areas("Hall")
    assert line_items.update(areas, 0, field, value) == areas


def test_rejected_update_keeps_totals_computable():
    areas = line_items.update(_areas("Hall"), 0, "labor_cost", 120)
    areas = line_items.update(areas, 0, "labor_cost", "abc")
    assert compute_totals(areas).total == 120


def test_update_coerces_numeric_text():
    areas = line_items.update(_areas("Hall"), 0, "material_cost", "42.5")
    assert areas[0].material_cost == 42.5
