"""Shared test fixtures."""

import pytest

from soylent_planner.config import Settings
from soylent_planner.containers import AppContainer, build_container
from soylent_planner.domain.profile import Gender, Profile, Regime


def make_profile(**overrides: object) -> Profile:
    """Build the reference male profile with optional overrides."""
    values: dict[str, object] = {
        "weight_kg": 80.0,
        "height_cm": 180.0,
        "body_fat_fraction": 0.15,
        "activity_level": 1.5,
        "age": 30.0,
        "gender": Gender.MALE,
        "regime": Regime.MAINTAIN,
    }
    values.update(overrides)
    return Profile(**values)  # type: ignore[arg-type]


@pytest.fixture
def profile() -> Profile:
    return make_profile()


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test", log_level="DEBUG")


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_container(settings)
