"""Pydantic models for API payloads."""

from typing import Literal

from pydantic import BaseModel

from soylent_planner.domain.feasibility import InfeasibleTarget
from soylent_planner.domain.nutrition import Macros, Recipe
from soylent_planner.domain.profile import Profile


class ProfileIn(BaseModel):
    """Body profile payload."""

    weight: float
    weight_unit: Literal["kg", "lb"] = "kg"
    height_cm: float
    body_fat_fraction: float
    activity_level: float
    age: float
    gender: str
    regime: str

    def to_profile(self) -> Profile:
        """Build a validated domain profile."""
        if self.weight_unit == "lb":
            return Profile.from_pounds(
                weight_lb=self.weight,
                height_cm=self.height_cm,
                body_fat_fraction=self.body_fat_fraction,
                activity_level=self.activity_level,
                age=self.age,
                gender=self.gender,
                regime=self.regime,
            )
        return Profile(
            weight_kg=self.weight,
            height_cm=self.height_cm,
            body_fat_fraction=self.body_fat_fraction,
            activity_level=self.activity_level,
            age=self.age,
            gender=self.gender,  # type: ignore[arg-type]
            regime=self.regime,  # type: ignore[arg-type]
        )


class MacrosIn(BaseModel):
    """Macronutrient targets payload."""

    calories: float
    protein_g: float
    fat_g: float
    carbs_g: float

    def to_macros(self) -> Macros:
        """Build domain macros."""
        return Macros(
            calories=self.calories,
            protein_g=self.protein_g,
            fat_g=self.fat_g,
            carbs_g=self.carbs_g,
        )


class MacrosOut(BaseModel):
    """Macronutrient targets response."""

    calories: float
    protein_g: float
    fat_g: float
    carbs_g: float


class RecipeOut(BaseModel):
    """Ingredient quantities response."""

    oats: float
    whey: float
    maltodextrin: float
    oil: float
    psyllium: float
    salt: float
    multivitamin: float
    choline: float
    potassium: float


class InfeasibleOut(BaseModel):
    """A derived value that cannot be satisfied."""

    field: str
    value: float


class MacrosResponse(BaseModel):
    """Response for the macros endpoint."""

    macros: MacrosOut
    feasible: bool
    infeasible: list[InfeasibleOut]


class RecipeResponse(BaseModel):
    """Response for the recipe endpoint."""

    recipe: RecipeOut
    feasible: bool
    infeasible: list[InfeasibleOut]


class PlanResponse(BaseModel):
    """Response for the plan endpoint."""

    macros: MacrosOut
    recipe: RecipeOut | None
    feasible: bool
    infeasible: list[InfeasibleOut]


def macros_out(macros: Macros) -> MacrosOut:
    """Convert domain macros to a response model."""
    return MacrosOut(
        calories=macros.calories,
        protein_g=macros.protein_g,
        fat_g=macros.fat_g,
        carbs_g=macros.carbs_g,
    )


def recipe_out(recipe: Recipe) -> RecipeOut:
    """Convert a domain recipe to a response model."""
    return RecipeOut(**recipe.as_dict())


def infeasible_out(items: list[InfeasibleTarget]) -> list[InfeasibleOut]:
    """Convert infeasibility findings to response models."""
    return [InfeasibleOut(field=item.field, value=item.value) for item in items]
