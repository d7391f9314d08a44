"""Tests for container wiring and settings."""

from soylent_planner.config import Settings
from soylent_planner.containers import build_container
from soylent_planner.domain.nutrition import DEFAULT_INGREDIENTS


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.plan_service.macro_calculator is container.macro_calculator
    assert container.plan_service.recipe_generator is container.recipe_generator
    assert container.recipe_generator.ingredients is DEFAULT_INGREDIENTS
    assert container.recipe_generator.legacy_psyllium_carbs is False


def test_legacy_psyllium_setting_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("LEGACY_PSYLLIUM_CARBS", "true")

    container = build_container(Settings())

    assert container.recipe_generator.legacy_psyllium_carbs is True


def test_settings_defaults(monkeypatch) -> None:
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("LEGACY_PSYLLIUM_CARBS", raising=False)

    settings = Settings(_env_file=None)

    assert settings.log_level == "INFO"
    assert settings.legacy_psyllium_carbs is False
