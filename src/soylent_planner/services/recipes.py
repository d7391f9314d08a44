"""Recipe generation from macronutrient targets."""

import logging
from dataclasses import dataclass, field

from soylent_planner.domain.nutrition import (
    DEFAULT_INGREDIENTS,
    IngredientTable,
    Macros,
    Recipe,
)

OATS_BASE = 200.0
OATS_SCALE = 150.0
CALORIES_LOWER = 1600.0
CALORIES_UPPER = 3400.0
FIBRE_G_PER_1000_KCAL = 14.0
POTASSIUM_REQUIREMENT_MG = 2500.0
SALT = 4.0
MULTIVITAMIN = 1.8
CHOLINE = 1.0

_logger = logging.getLogger(__name__)


def oats_for_calories(calories: float) -> float:
    """Scale the oat base linearly with calories, without clamping."""
    return OATS_BASE + OATS_SCALE * (calories - CALORIES_LOWER) / (
        CALORIES_UPPER - CALORIES_LOWER
    )


def generate_recipe(
    macros: Macros,
    ingredients: IngredientTable = DEFAULT_INGREDIENTS,
    *,
    legacy_psyllium_carbs: bool = False,
) -> Recipe:
    """Allocate ingredient quantities that meet the macro targets.

    Quantities are fixed one at a time and never revisited. Oat flour is set
    first from the calorie target, whey covers the remaining protein, psyllium
    the remaining fibre, oil the remaining fat and maltodextrin the remaining
    carbohydrate. Potassium gluconate tops up potassium after oats and the
    multivitamin. Only oats and whey are counted towards protein and fat.

    With ``legacy_psyllium_carbs`` maltodextrin is reduced by the psyllium
    quantity plus the psyllium per-unit carbohydrate rate, as older recipes
    were computed.
    """
    oats, whey, psyllium = ingredients.oats, ingredients.whey, ingredients.psyllium
    if whey.protein_g == 0:
        raise ValueError(f"{whey.name} must contain protein")
    if psyllium.fibre_g == 0:
        raise ValueError(f"{psyllium.name} must contain fibre")

    salt_qty = SALT
    multivitamin_qty = MULTIVITAMIN
    choline_qty = CHOLINE

    oats_qty = oats_for_calories(macros.calories)
    whey_qty = (macros.protein_g - oats_qty * oats.protein_g) / whey.protein_g
    fibre_target = (macros.calories / 1000) * FIBRE_G_PER_1000_KCAL
    psyllium_qty = (
        fibre_target - whey_qty * whey.fibre_g - oats_qty * oats.fibre_g
    ) / psyllium.fibre_g
    oil_qty = macros.fat_g - oats_qty * oats.fat_g - whey_qty * whey.fat_g

    maltodextrin_qty = (
        macros.carbs_g - oats_qty * oats.carbs_g - whey_qty * whey.carbs_g
    )
    if legacy_psyllium_carbs:
        maltodextrin_qty = maltodextrin_qty - psyllium_qty - psyllium.carbs_g
    else:
        maltodextrin_qty -= psyllium_qty * psyllium.carbs_g
    potassium_qty = (
        POTASSIUM_REQUIREMENT_MG
        - oats_qty * oats.potassium_mg
        - multivitamin_qty * ingredients.multivitamin.potassium_mg
    )

    recipe = Recipe(
        oats=oats_qty,
        whey=whey_qty,
        maltodextrin=maltodextrin_qty,
        oil=oil_qty,
        psyllium=psyllium_qty,
        salt=salt_qty,
        multivitamin=multivitamin_qty,
        choline=choline_qty,
        potassium=potassium_qty,
    )
    _logger.debug("Recipe for %.1f kcal: %s", macros.calories, recipe)
    return recipe


@dataclass
class RecipeGenerator:
    """Service turning macro targets into ingredient quantities."""

    ingredients: IngredientTable = field(default=DEFAULT_INGREDIENTS)
    legacy_psyllium_carbs: bool = False

    def generate_recipe(self, macros: Macros) -> Recipe:
        """Return the recipe for the macro targets."""
        return generate_recipe(
            macros,
            self.ingredients,
            legacy_psyllium_carbs=self.legacy_psyllium_carbs,
        )
