"""Tests for character record schemas."""

from __future__ import annotations

import json
from typing import Any

import pytest

from status_screen.core.exceptions import ValidationError
from status_screen.models import (
    CharacterRecord,
    RedirectFreePoints,
    Snapshot,
    Stat,
    StatDerivation,
    StatMultiplier,
    TitleBonus,
    load_character,
)


class TestLoadCharacter:
    """Tests for load_character parsing."""

    def test_minimal_record(self) -> None:
        """Test only the level is required."""
        record = load_character({"level": 1})

        assert record.level == 1
        assert record.growth_history == []
        assert record.snapshots == {}
        assert record.hp is None

    def test_from_json_string(self) -> None:
        """Test records parse from raw JSON."""
        record = load_character(json.dumps({"level": 4, "freePoints": {"strength": 2}}))

        assert record.free_points == {Stat.STRENGTH: 2}

    def test_missing_level(self) -> None:
        """Test a record without level is rejected with the field name."""
        with pytest.raises(ValidationError) as exc_info:
            load_character({"name": "Alex"})

        assert exc_info.value.details["field_name"] == "level"

    def test_level_below_one(self) -> None:
        """Test level 0 is rejected."""
        with pytest.raises(ValidationError):
            load_character({"level": 0})

    def test_unknown_effect_type(self) -> None:
        """Test effects outside the closed set are rejected."""
        with pytest.raises(ValidationError):
            load_character(
                {"level": 1, "traits": [{"name": "Odd", "effects": [{"type": "teleport"}]}]}
            )

    def test_incomplete_effects_accepted(self) -> None:
        """Test effects and rules missing their stats load without effect."""
        record = load_character(
            {
                "level": 3,
                "traits": [
                    {
                        "effects": [
                            {
                                "type": "stat_derivation",
                                "stat": "willpower",
                                "multiplier": 1,
                                "percent": 25,
                            },
                            {"type": "stat_multiplier", "multiplier": 2},
                        ]
                    }
                ],
                "statDerivations": [{"sourceStat": "mana", "percent": 10}],
            }
        )

        derivation, multiplier = record.traits[0].effects
        assert isinstance(derivation, StatDerivation)
        assert derivation.is_complete is False
        assert isinstance(multiplier, StatMultiplier)
        assert multiplier.stat is None
        assert record.stat_derivations[0].target_stat is None

    def test_unknown_stat(self) -> None:
        """Test stat names outside the closed set are rejected."""
        with pytest.raises(ValidationError):
            load_character({"level": 1, "freePoints": {"charisma": 1}})

    def test_invalid_json(self) -> None:
        """Test malformed JSON is reported as ValidationError."""
        with pytest.raises(ValidationError):
            load_character("{not json")


class TestEffects:
    """Tests for the trait effect union."""

    def test_effects_dispatch_on_type(self, make_record: Any) -> None:
        """Test each effect type parses to its own class."""
        record = make_record(
            traits=[
                {
                    "name": "Arcane Core",
                    "effects": [
                        {"type": "stat_multiplier", "stat": "mana", "multiplier": 2},
                        {"type": "redirect_free_points", "toStat": "mana"},
                        {
                            "type": "stat_derivation",
                            "sourceStat": "mana",
                            "targetStat": "wisdom",
                            "percent": 25,
                        },
                    ],
                }
            ]
        )

        multiplier, redirect, derivation = record.traits[0].effects
        assert isinstance(multiplier, StatMultiplier)
        assert multiplier.multiplier == 2
        assert isinstance(redirect, RedirectFreePoints)
        assert redirect.to_stat == Stat.MANA
        assert isinstance(derivation, StatDerivation)
        assert derivation.percent == 25


class TestLegacyShapes:
    """Tests for records written by older versions of the tracker."""

    def test_class_history_and_stats_per_level(self) -> None:
        """Test classHistory/statsPerLevel map onto the growth table."""
        record = load_character(
            {
                "level": 3,
                "class": "Warrior",
                "classHistory": [
                    {"name": "Warrior", "startLevel": 1, "statsPerLevel": {"strength": 2}},
                ],
            }
        )

        assert record.class_name == "Warrior"
        assert record.growth_history[0].per_level_deltas == {Stat.STRENGTH: 2}

    def test_trait_container(self) -> None:
        """Test {current, max, items} traits unwrap into a list and slot count."""
        record = load_character(
            {"level": 1, "traits": {"current": 1, "max": 4, "items": [{"name": "Tough"}]}}
        )

        assert [trait.name for trait in record.traits] == ["Tough"]
        assert record.trait_slots == 4
        assert record.trait_count == 1

    def test_title_bonus_value(self) -> None:
        """Test a bonus stored under 'value' becomes the additive part."""
        bonus = TitleBonus.model_validate({"stat": "mana", "value": 5})

        assert bonus.additive == 5
        assert bonus.multiplier == 0

    def test_flat_snapshot(self) -> None:
        """Test a flat stat map becomes a snapshot with an empty ledger."""
        record = load_character(
            {"level": 10, "levelSnapshots": {"5": {"strength": 12, "mana": 4}}}
        )

        snapshot = record.snapshots[5]
        assert snapshot.stats == {Stat.STRENGTH: 12, Stat.MANA: 4}
        assert snapshot.ledger.raw_title_additive is None
        assert snapshot.ledger.title_additive == {}

    def test_included_ledger_keys(self) -> None:
        """Test included* keys map onto the ledger."""
        snapshot = Snapshot.model_validate(
            {
                "stats": {"mana": 20},
                "includedTitleBonuses": {"mana": 6},
                "includedTitleMultipliers": {"mana": 0.1},
                "rawTitleBonuses": {"mana": 3},
                "includedTraitMultipliers": {"mana": 2},
                "includedDerivationBonuses": {"wisdom": 4},
            }
        )

        assert snapshot.stats == {Stat.MANA: 20}
        assert snapshot.ledger.title_additive == {Stat.MANA: 6}
        assert snapshot.ledger.title_rate == {Stat.MANA: 0.1}
        assert snapshot.ledger.raw_title_additive == {Stat.MANA: 3}
        assert snapshot.ledger.trait_multipliers == {Stat.MANA: 2}
        assert snapshot.ledger.derivation_bonus == {Stat.WISDOM: 4}


class TestCharacterRecord:
    """Tests for CharacterRecord helpers."""

    def test_latest_snapshot_level(self, make_record: Any) -> None:
        """Test the greatest snapshot level not above the level is chosen."""
        snapshots = {"5": {"strength": 1}, "10": {"strength": 2}, "20": {"strength": 3}}

        assert make_record(15, snapshots=snapshots).latest_snapshot_level() == 10
        assert make_record(10, snapshots=snapshots).latest_snapshot_level() == 10
        assert make_record(4, snapshots=snapshots).latest_snapshot_level() is None

    def test_fingerprint_stable(self, sample_record_data: dict[str, Any]) -> None:
        """Test equal content yields equal fingerprints."""
        first = load_character(sample_record_data)
        second = load_character(json.loads(json.dumps(sample_record_data)))

        assert first.fingerprint() == second.fingerprint()

    def test_fingerprint_changes_with_content(self, sample_record: CharacterRecord) -> None:
        """Test any edit changes the fingerprint."""
        edited = sample_record.model_copy(update={"free_points": {Stat.MANA: 1}})

        assert edited.fingerprint() != sample_record.fingerprint()

    def test_records_are_frozen(self, sample_record: CharacterRecord) -> None:
        """Test records cannot be mutated in place."""
        with pytest.raises(ValueError):
            sample_record.level = 6  # type: ignore[misc]

    def test_python_field_names(self) -> None:
        """Test records can be built with snake_case names."""
        record = CharacterRecord(level=2, free_points={Stat.MANA: 1}, class_name="Mage")

        assert record.free_points[Stat.MANA] == 1
        assert record.class_name == "Mage"
