"""Nutrition domain models."""

from dataclasses import asdict, dataclass, fields


@dataclass(frozen=True)
class Macros:
    """Daily macronutrient targets."""

    calories: float
    protein_g: float
    fat_g: float
    carbs_g: float


@dataclass(frozen=True)
class Ingredient:
    """Nutrient content of one unit of a recipe ingredient."""

    name: str
    unit: str
    protein_g: float = 0.0
    carbs_g: float = 0.0
    fat_g: float = 0.0
    fibre_g: float = 0.0
    potassium_mg: float = 0.0


@dataclass(frozen=True)
class IngredientTable:
    """Per-unit nutrient contents for every recipe component."""

    oats: Ingredient
    whey: Ingredient
    maltodextrin: Ingredient
    oil: Ingredient
    psyllium: Ingredient
    salt: Ingredient
    multivitamin: Ingredient
    choline: Ingredient
    potassium: Ingredient

    def items(self) -> list[tuple[str, Ingredient]]:
        """Return (field name, ingredient) pairs in recipe order."""
        return [(item.name, getattr(self, item.name)) for item in fields(self)]


# Oat flour, whey isolate and psyllium husk values are per gram from typical
# label data. Maltodextrin and oil are treated as pure carbohydrate and pure
# fat. Potassium gluconate is dosed directly in mg of potassium.
DEFAULT_INGREDIENTS = IngredientTable(
    oats=Ingredient(
        name="Oat flour",
        unit="g",
        protein_g=0.1466,
        carbs_g=0.657,
        fat_g=0.0912,
        fibre_g=0.065,
        potassium_mg=3.71,
    ),
    whey=Ingredient(
        name="Whey protein",
        unit="g",
        protein_g=0.78,
        carbs_g=0.08,
        fat_g=0.06,
    ),
    maltodextrin=Ingredient(name="Maltodextrin", unit="g", carbs_g=1.0),
    oil=Ingredient(name="Vegetable oil", unit="g", fat_g=1.0),
    psyllium=Ingredient(
        name="Psyllium husk",
        unit="g",
        carbs_g=0.1,
        fibre_g=0.8,
    ),
    salt=Ingredient(name="Salt", unit="g"),
    multivitamin=Ingredient(name="Multivitamin", unit="g", potassium_mg=80.0),
    choline=Ingredient(name="Choline bitartrate", unit="g"),
    potassium=Ingredient(name="Potassium gluconate", unit="mg K", potassium_mg=1.0),
)


@dataclass(frozen=True)
class NutrientTotals:
    """Nutrients supplied by a recipe."""

    protein_g: float
    carbs_g: float
    fat_g: float
    fibre_g: float
    potassium_mg: float


@dataclass(frozen=True)
class Recipe:
    """Daily quantity of each ingredient, in the ingredient's unit."""

    oats: float
    whey: float
    maltodextrin: float
    oil: float
    psyllium: float
    salt: float
    multivitamin: float
    choline: float
    potassium: float

    def as_dict(self) -> dict[str, float]:
        """Return quantities keyed by ingredient field name."""
        return asdict(self)

    def totals(self, table: IngredientTable) -> NutrientTotals:
        """Sum the nutrients supplied by every ingredient in the recipe."""
        protein = carbs = fat = fibre = potassium = 0.0
        for key, ingredient in table.items():
            quantity = getattr(self, key)
            protein += quantity * ingredient.protein_g
            carbs += quantity * ingredient.carbs_g
            fat += quantity * ingredient.fat_g
            fibre += quantity * ingredient.fibre_g
            potassium += quantity * ingredient.potassium_mg
        return NutrientTotals(
            protein_g=protein,
            carbs_g=carbs,
            fat_g=fat,
            fibre_g=fibre,
            potassium_mg=potassium,
        )
