from typing import Any, Iterable, Tuple

from loguru import logger
from pydantic import ValidationError

from backend.schemas import ProjectArea

Areas = Tuple[ProjectArea, ...]


def as_areas(areas: Iterable) -> Areas:
    """Normalise dicts or models into an immutable tuple of ProjectArea"""
    return tuple(
        area if isinstance(area, ProjectArea) else ProjectArea.model_validate(area)
        for area in areas
    )


def add(areas: Areas) -> Areas:
    return tuple(areas) + (ProjectArea(),)


def remove(areas: Areas, index: int) -> Areas:
    # the last remaining area is never removed
    if len(areas) <= 1 or not 0 <= index < len(areas):
        return tuple(areas)
    return tuple(area for i, area in enumerate(areas) if i != index)


def update(areas: Areas, index: int, field: str, value: Any) -> Areas:
    if not 0 <= index < len(areas) or field not in ProjectArea.model_fields:
        return tuple(areas)
    try:
        changed = ProjectArea.model_validate({**areas[index].model_dump(), field: value})
    except ValidationError as e:
        logger.debug(f"Ignoring invalid {field}={value!r} for area {index}: {e.errors()[0]['msg']}")
        return tuple(areas)
    return tuple(changed if i == index else area for i, area in enumerate(areas))
