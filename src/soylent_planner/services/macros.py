"""Daily calorie and macronutrient calculations."""

import logging
from dataclasses import dataclass

from soylent_planner.domain.nutrition import Macros
from soylent_planner.domain.profile import (
    Gender,
    Profile,
    Regime,
    kg_to_pounds,
)

PROTEIN_G_PER_LEAN_LB = 1.5
FAT_G_PER_LB = 0.45
KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_FAT = 9
KCAL_PER_G_CARBS = 4

REGIME_MODIFIERS = {
    Regime.BULK: 1.1,
    Regime.MAINTAIN: 1.0,
    Regime.CUT: 0.9,
}

_logger = logging.getLogger(__name__)


def harris_benedict(profile: Profile) -> float:
    """Harris-Benedict basal metabolic rate in kcal."""
    weight, height, age = profile.weight_kg, profile.height_cm, profile.age
    if profile.gender is Gender.MALE:
        return 66 + 13.7 * weight + 5 * height - 6.76 * age
    return 655 + 9.6 * weight + 1.8 * height - 4.7 * age


def mifflin_st_jeor(profile: Profile) -> float:
    """Mifflin-St Jeor basal metabolic rate in kcal."""
    base = 9.99 * profile.weight_kg + 6.25 * profile.height_cm - 4.92 * profile.age
    if profile.gender is Gender.MALE:
        return base + 5
    return base - 161


def katch_mcardle(profile: Profile) -> float:
    """Katch-McArdle basal metabolic rate in kcal."""
    return 370 + 21.6 * profile.lean_body_mass_kg


def calculate_calories(profile: Profile) -> float:
    """Return the daily calorie target for the profile.

    The three basal metabolic rate estimates are averaged, scaled by the
    activity level and then by the regime modifier.
    """
    modifier = REGIME_MODIFIERS[profile.regime]
    average = (
        harris_benedict(profile) + mifflin_st_jeor(profile) + katch_mcardle(profile)
    ) / 3
    return profile.activity_level * average * modifier


def calculate_macros(profile: Profile) -> Macros:
    """Return the daily macronutrient targets for the profile.

    Protein and fat are funded at fixed ratios per pound of lean and total
    body mass. Carbohydrates take the remaining calories and go negative
    when protein and fat already exceed the calorie target.
    """
    lean_body_mass_lb = kg_to_pounds(profile.lean_body_mass_kg)
    protein_g = PROTEIN_G_PER_LEAN_LB * lean_body_mass_lb
    fat_g = FAT_G_PER_LB * kg_to_pounds(profile.weight_kg)
    calories = calculate_calories(profile)
    carbs_g = (
        calories - KCAL_PER_G_PROTEIN * protein_g - KCAL_PER_G_FAT * fat_g
    ) / KCAL_PER_G_CARBS
    _logger.debug(
        "Macros: calories=%.1f protein=%.1f fat=%.1f carbs=%.1f",
        calories,
        protein_g,
        fat_g,
        carbs_g,
    )
    return Macros(calories=calories, protein_g=protein_g, fat_g=fat_g, carbs_g=carbs_g)


@dataclass
class MacroCalculator:
    """Service computing calorie and macronutrient targets from a profile."""

    def calculate_calories(self, profile: Profile) -> float:
        """Return the daily calorie target."""
        return calculate_calories(profile)

    def calculate_macros(self, profile: Profile) -> Macros:
        """Return the daily macronutrient targets."""
        return calculate_macros(profile)
