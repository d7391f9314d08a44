"""Dependency container wiring for the application."""

from dataclasses import dataclass

from soylent_planner.config import Settings
from soylent_planner.domain.nutrition import DEFAULT_INGREDIENTS, IngredientTable
from soylent_planner.services.macros import MacroCalculator
from soylent_planner.services.plans import PlanService
from soylent_planner.services.recipes import RecipeGenerator


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    macro_calculator: MacroCalculator
    recipe_generator: RecipeGenerator
    plan_service: PlanService


def build_container(
    settings: Settings | None = None,
    ingredients: IngredientTable = DEFAULT_INGREDIENTS,
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    macro_calculator = MacroCalculator()
    recipe_generator = RecipeGenerator(
        ingredients=ingredients,
        legacy_psyllium_carbs=resolved_settings.legacy_psyllium_carbs,
    )
    plan_service = PlanService(
        macro_calculator=macro_calculator,
        recipe_generator=recipe_generator,
    )
    return AppContainer(
        settings=resolved_settings,
        macro_calculator=macro_calculator,
        recipe_generator=recipe_generator,
        plan_service=plan_service,
    )
