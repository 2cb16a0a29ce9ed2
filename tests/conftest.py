"""Pytest configuration and shared fixtures.

This module provides common fixtures and configuration for all tests
in the status screen test suite.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

import pytest

from status_screen.models import CharacterRecord, load_character


if TYPE_CHECKING:
    from collections.abc import Callable, Generator


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from status_screen.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty directory without STATUS_SCREEN_* variables."""
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("STATUS_SCREEN_"):
            monkeypatch.delenv(key)


# =============================================================================
# Record Fixtures
# =============================================================================


@pytest.fixture
def make_record() -> Callable[..., CharacterRecord]:
    """Provide a factory building records from camelCase keyword data.

    Returns:
        Function taking a level and record fields, returning a record.
    """

    def _make(level: int = 1, **data: Any) -> CharacterRecord:
        return load_character({"level": level, **data})

    return _make


@pytest.fixture
def warrior_phase() -> dict[str, Any]:
    """Provide a growth phase granting 2 strength per level from 5 to 10."""
    return {
        "name": "Warrior",
        "startLevel": 5,
        "endLevel": 10,
        "perLevelDeltas": {"strength": 2},
    }


@pytest.fixture
def sample_record_data() -> dict[str, Any]:
    """Provide a complete character record as stored by the tracker.

    Returns:
        Record data with growth, traits, titles, boosts and export fields.
    """
    return {
        "name": "Alex",
        "level": 5,
        "className": "Mage",
        "classAdvancement": True,
        "growthHistory": [
            {"name": "Novice", "startLevel": 0, "endLevel": None, "perLevelDeltas": {"mana": 2}},
        ],
        "freePoints": {"constitution": 3},
        "traitSlots": 3,
        "traits": [
            {
                "name": "Mana Affinity",
                "effects": [{"type": "stat_multiplier", "stat": "mana", "multiplier": 1.5}],
            },
        ],
        "titles": [
            {
                "name": "Firstborn",
                "isPrimary": True,
                "bonuses": [{"stat": "mana", "additive": 2}],
            },
            {"name": "Survivor", "bonuses": [{"stat": "vitality", "additive": 1}]},
        ],
        "statBoosts": [{"description": "Ironbark Fruit", "stat": "strength", "additive": 1}],
        "activeSkills": [
            {"name": "Fireball", "rank": "Adept", "level": 3, "advancement": True},
        ],
        "passiveSkills": [{"name": "Meditation", "tier": "II"}],
        "bondSkills": [
            {
                "name": "Shared Sight",
                "rank": "Novice",
                "level": 1,
                "primaryStatShared": "Wisdom",
            },
        ],
        "boundItems": [{"name": "Ashwood Staff", "rank": "Rare", "type": "Weapon"}],
    }


@pytest.fixture
def sample_record(sample_record_data: dict[str, Any]) -> CharacterRecord:
    """Provide the sample record parsed."""
    return load_character(sample_record_data)
