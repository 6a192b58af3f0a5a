from typing import Iterable, NamedTuple, Optional


class Totals(NamedTuple):
    total_labor: float
    total_material: float
    total: float


class Adjustment(NamedTuple):
    amount: float
    kind: str  # "discount" or "increase"

    def __str__(self):
        return f"{format_amount(self.amount)} {self.kind}"


def _cost(area, field: str) -> float:
    value = area.get(field) if isinstance(area, dict) else getattr(area, field, None)
    return float(value or 0)


def compute_totals(areas: Iterable) -> Totals:
    """Sum labor and material cost over project areas (models, ORM rows or dicts).

    Missing or None costs count as zero.
    """
    total_labor = 0.0
    total_material = 0.0
    for area in areas:
        total_labor += _cost(area, "labor_cost")
        total_material += _cost(area, "material_cost")
    return Totals(total_labor, total_material, total_labor + total_material)


def with_markup(totals: Totals, markup_percentage: float) -> float:
    """Grand total for an estimate: subtotal plus markup percent of it"""
    return totals.total + totals.total * ((markup_percentage or 0) / 100)


def describe_adjustment(original: float, new: float) -> Optional[Adjustment]:
    """Delta of a manually entered total against the stored one"""
    delta = round((new or 0) - (original or 0), 2)
    if delta == 0:
        return None
    if delta < 0:
        return Adjustment(-delta, "discount")
    return Adjustment(delta, "increase")


def format_amount(amount: float) -> str:
    # 100.0 -> "100", 1234.5 -> "1,234.5"
    return f"{amount:,.2f}".rstrip("0").rstrip(".")


def format_currency(amount: float) -> str:
    return f"${amount:,.2f}"
