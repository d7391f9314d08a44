"""Feasibility checks for derived targets and recipes."""

import math
from dataclasses import asdict, dataclass

from soylent_planner.domain.nutrition import Macros, Recipe


@dataclass(frozen=True)
class InfeasibleTarget:
    """A derived value the ingredient model cannot satisfy."""

    field: str
    value: float


def check_macros(macros: Macros) -> list[InfeasibleTarget]:
    """Return every macro target that is negative or not finite."""
    return _negative_fields(asdict(macros))


def check_recipe(recipe: Recipe) -> list[InfeasibleTarget]:
    """Return every ingredient quantity that is negative or not finite."""
    return _negative_fields(recipe.as_dict())


def _negative_fields(values: dict[str, float]) -> list[InfeasibleTarget]:
    return [
        InfeasibleTarget(field=name, value=value)
        for name, value in values.items()
        if not math.isfinite(value) or value < 0
    ]
