"""Body profile domain models."""

import math
from dataclasses import dataclass
from enum import StrEnum
from typing import TypeVar

KILO_TO_POUND = 2.20462262

E = TypeVar("E", bound=StrEnum)


class InvalidProfileError(ValueError):
    """Raised when a profile field is outside its allowed domain."""

    def __init__(self, field: str, value: object, reason: str) -> None:
        super().__init__(f"Invalid {field}={value!r}: {reason}")
        self.field = field
        self.value = value


class Gender(StrEnum):
    """Gender used to select the basal metabolic rate formulas."""

    MALE = "male"
    FEMALE = "female"


class Regime(StrEnum):
    """Dietary goal applied on top of the maintenance calories."""

    BULK = "bulk"
    CUT = "cut"
    MAINTAIN = "maintain"


def kg_to_pounds(weight_kg: float) -> float:
    """Convert kilograms to pounds."""
    return weight_kg * KILO_TO_POUND


def pounds_to_kg(weight_lb: float) -> float:
    """Convert pounds to kilograms."""
    return weight_lb / KILO_TO_POUND


@dataclass(frozen=True)
class Profile:
    """Body metrics and goal for a single calculation.

    Fields are validated on construction so that the calculators never see
    an unknown gender or regime, or a value outside the formulas' domain.
    Gender and regime may be passed as their exact lowercase string values.
    """

    weight_kg: float
    height_cm: float
    body_fat_fraction: float
    activity_level: float
    age: float
    gender: Gender
    regime: Regime

    def __post_init__(self) -> None:
        object.__setattr__(self, "gender", _coerce(Gender, "gender", self.gender))
        object.__setattr__(self, "regime", _coerce(Regime, "regime", self.regime))
        for name in ("weight_kg", "height_cm", "age"):
            value = _finite(name, getattr(self, name))
            if value <= 0:
                raise InvalidProfileError(name, value, "must be greater than 0")
        body_fat = _finite("body_fat_fraction", self.body_fat_fraction)
        if not 0 <= body_fat < 1:
            raise InvalidProfileError(
                "body_fat_fraction", body_fat, "must be in the range [0, 1)"
            )
        activity = _finite("activity_level", self.activity_level)
        if not 1 <= activity <= 2:  # noqa: PLR2004
            raise InvalidProfileError(
                "activity_level", activity, "must be in the range [1, 2]"
            )

    @classmethod
    def from_pounds(  # noqa: PLR0913
        cls,
        weight_lb: float,
        height_cm: float,
        body_fat_fraction: float,
        activity_level: float,
        age: float,
        gender: Gender | str,
        regime: Regime | str,
    ) -> "Profile":
        """Build a profile from a weight given in pounds."""
        return cls(
            weight_kg=pounds_to_kg(_finite("weight_lb", weight_lb)),
            height_cm=height_cm,
            body_fat_fraction=body_fat_fraction,
            activity_level=activity_level,
            age=age,
            gender=gender,  # type: ignore[arg-type]
            regime=regime,  # type: ignore[arg-type]
        )

    @property
    def lean_body_mass_kg(self) -> float:
        """Body weight minus estimated fat mass, in kg."""
        return self.weight_kg * (1 - self.body_fat_fraction)


def _coerce(enum_type: type[E], field: str, value: object) -> E:
    if isinstance(value, enum_type):
        return value
    allowed = ", ".join(member.value for member in enum_type)
    if not isinstance(value, str):
        raise InvalidProfileError(field, value, f"must be one of: {allowed}")
    try:
        return enum_type(value)
    except ValueError:
        raise InvalidProfileError(
            field, value, f"must be one of: {allowed}"
        ) from None


def _finite(field: str, value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise InvalidProfileError(field, value, "must be a number")
    number = float(value)
    if not math.isfinite(number):
        raise InvalidProfileError(field, value, "must be finite")
    return number
