from typing import Iterable, List

from backend.schemas import ProjectArea
from database.models.project_area import ProjectArea as ProjectAreaRow

AREA_FIELDS = [name for name in ProjectArea.model_fields if name != "id"]


def build_project_areas(areas: Iterable[ProjectArea]) -> List[ProjectAreaRow]:
    """Turn validated areas into unattached rows, keeping their order"""
    rows = []
    for position, area in enumerate(areas):
        values = area.model_dump(include=set(AREA_FIELDS))
        values["labor_cost"] = values.get("labor_cost") or 0
        values["material_cost"] = values.get("material_cost") or 0
        rows.append(ProjectAreaRow(position=position, **values))
    return rows


def copy_project_areas(rows: Iterable[ProjectAreaRow]) -> List[ProjectAreaRow]:
    """Detached copies of existing rows, used when an estimate becomes an invoice"""
    return [
        ProjectAreaRow(position=row.position, **{name: getattr(row, name) for name in AREA_FIELDS})
        for row in rows
    ]
