"""Plan service combining macro calculation and recipe generation."""

import logging
from dataclasses import dataclass, field

from soylent_planner.domain.feasibility import (
    InfeasibleTarget,
    check_macros,
    check_recipe,
)
from soylent_planner.domain.nutrition import Macros, Recipe
from soylent_planner.domain.profile import Profile
from soylent_planner.services.macros import MacroCalculator
from soylent_planner.services.recipes import RecipeGenerator

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlanResult:
    """Macro targets and recipe for a profile, with feasibility findings."""

    profile: Profile
    macros: Macros
    recipe: Recipe | None
    infeasible: list[InfeasibleTarget] = field(default_factory=list)

    @property
    def feasible(self) -> bool:
        """Return True when no derived value is infeasible."""
        return not self.infeasible


@dataclass
class PlanService:
    """Service producing a full plan from a profile."""

    macro_calculator: MacroCalculator
    recipe_generator: RecipeGenerator

    def plan(self, profile: Profile) -> PlanResult:
        """Calculate macros and, when they are feasible, the recipe."""
        macros = self.macro_calculator.calculate_macros(profile)
        infeasible = check_macros(macros)
        if infeasible:
            _log_infeasible("macros", infeasible)
            return PlanResult(
                profile=profile, macros=macros, recipe=None, infeasible=infeasible
            )

        recipe = self.recipe_generator.generate_recipe(macros)
        infeasible = check_recipe(recipe)
        if infeasible:
            _log_infeasible("recipe", infeasible)
        return PlanResult(
            profile=profile, macros=macros, recipe=recipe, infeasible=infeasible
        )

    def recipe_for(self, macros: Macros) -> tuple[Recipe, list[InfeasibleTarget]]:
        """Generate a recipe for caller-supplied macros and check it."""
        recipe = self.recipe_generator.generate_recipe(macros)
        infeasible = check_macros(macros) + check_recipe(recipe)
        if infeasible:
            _log_infeasible("recipe", infeasible)
        return recipe, infeasible


def _log_infeasible(stage: str, infeasible: list[InfeasibleTarget]) -> None:
    _logger.warning(
        "Infeasible %s: %s",
        stage,
        ", ".join(f"{item.field}={item.value:.2f}" for item in infeasible),
    )
