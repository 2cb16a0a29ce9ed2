"""Pydantic V2 schemas for character records.

A Character Record is the input of the stat engine. It is owned by the
persistence layer, stored as JSON with camelCase keys, and passed into the
engine by value. Only ``level`` is required; every other field defaults to
empty so a freshly created character resolves to all-zero stats.

Records written by older versions of the tracker are accepted as well:
``classHistory``/``statsPerLevel`` growth tables, ``levelSnapshots``, traits
stored as ``{current, max, items}``, flat snapshot stat maps, and snapshot
ledgers stored under the ``included*`` keys.

Example:
    >>> record = load_character({"level": 4, "freePoints": {"strength": 2}})
    >>> record.free_points[Stat.STRENGTH]
    2
"""

from __future__ import annotations

import hashlib
import json
from collections.abc import Mapping
from typing import Annotated, Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from status_screen.core.exceptions import ValidationError
from status_screen.models.enums import (
    ALL_STATS,
    EffectType,
    PassiveTier,
    SkillRank,
    Stat,
)


class RecordModel(BaseModel):
    """Base for all record schemas: camelCase JSON, immutable, lenient on extras."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


# =============================================================================
# Growth
# =============================================================================


class GrowthPhase(RecordModel):
    """A level range during which a class or evolution grants per-level stats.

    The level a phase starts at grants nothing; every level after it up to
    and including ``end_level`` grants ``per_level_deltas``. An open phase
    (``end_level`` is None) is the character's active class.

    Attributes:
        name: Class or evolution name.
        start_level: Level the phase was received at.
        end_level: Last level covered by the phase, or None while active.
        per_level_deltas: Stat points granted per level inside the phase.
    """

    name: str = ""
    start_level: int = Field(default=1, ge=0)
    end_level: int | None = Field(default=None, ge=0)
    per_level_deltas: dict[Stat, int] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("perLevelDeltas", "statsPerLevel", "per_level_deltas"),
    )


# =============================================================================
# Traits
# =============================================================================


class DerivationRule(RecordModel):
    """Moves ``percent`` of one resolved stat into another.

    A rule missing either stat has no effect.

    Attributes:
        source_stat: Stat the bonus is read from.
        target_stat: Stat receiving the bonus.
        percent: Share of the source stat, in percent.
    """

    source_stat: Stat | None = None
    target_stat: Stat | None = None
    percent: float = 0.0

    @property
    def is_complete(self) -> bool:
        """Whether both the source and the target stat are set."""
        return self.source_stat is not None and self.target_stat is not None


class StatMultiplier(RecordModel):
    """Trait effect multiplying all gains of one stat."""

    type: Literal[EffectType.STAT_MULTIPLIER] = EffectType.STAT_MULTIPLIER
    stat: Stat | None = None
    multiplier: float = 1.0


class RedirectFreePoints(RecordModel):
    """Trait effect funneling every level-up's free points into one stat."""

    type: Literal[EffectType.REDIRECT_FREE_POINTS] = EffectType.REDIRECT_FREE_POINTS
    to_stat: Stat | None = None


class StatDerivation(DerivationRule):
    """Trait effect deriving a share of one stat into another."""

    type: Literal[EffectType.STAT_DERIVATION] = EffectType.STAT_DERIVATION


Effect = Annotated[
    StatMultiplier | RedirectFreePoints | StatDerivation,
    Field(discriminator="type"),
]
"""Discriminated union of trait effects, tagged by ``type``."""


class Trait(RecordModel):
    """A named bundle of effects."""

    name: str = ""
    effects: list[Effect] = Field(default_factory=list)


# =============================================================================
# Titles & Boosts
# =============================================================================


class TitleBonus(RecordModel):
    """One stat bonus granted by a title.

    ``multiplier`` is a rate: 0.1 means +10%.
    """

    stat: Stat | None = None
    additive: float = 0.0
    multiplier: float = 0.0

    @model_validator(mode="before")
    @classmethod
    def _accept_legacy_value(cls, data: Any) -> Any:
        # Early title bonuses stored the additive part under "value".
        if isinstance(data, dict) and "additive" not in data and "value" in data:
            data = {**data, "additive": data["value"]}
        return data


class Title(RecordModel):
    """A title with its bonuses. Titles appear in the exported status screen.

    Attributes:
        name: Title name as shown on the status screen.
        enabled: Disabled titles contribute nothing.
        is_primary: Marks the title shown next to the Titles header.
        bonuses: Stat bonuses granted while the title is enabled.
    """

    name: str = ""
    enabled: bool = True
    is_primary: bool = False
    bonuses: list[TitleBonus] = Field(default_factory=list)


class StatBoost(RecordModel):
    """A bonus independent of titles (body tempering, fruits, ...).

    Boosts are never trait-multiplied and never exported.
    """

    description: str = ""
    stat: Stat | None = None
    additive: float = 0.0
    multiplier: float = 0.0
    enabled: bool = True


# =============================================================================
# Snapshots
# =============================================================================


class SnapshotLedger(RecordModel):
    """What a snapshot's stats already include, per stat.

    Later computations subtract these amounts so nothing is counted twice.

    Attributes:
        raw_title_additive: Title additive totals before the trait multiplier,
            or None for snapshots taken before raw values were recorded.
        trait_multipliers: Trait multiplier active at capture.
        title_additive: Title additive totals after the trait multiplier.
        title_rate: Summed title multiplier rates.
        boost_additive: Stat boost additive totals.
        boost_rate: Summed stat boost multiplier rates.
        derivation_bonus: Derivation bonus folded into each target stat.
        free_points: Manual free points folded into each stat.
    """

    raw_title_additive: dict[Stat, float] | None = None
    trait_multipliers: dict[Stat, float] = Field(default_factory=dict)
    title_additive: dict[Stat, float] = Field(default_factory=dict)
    title_rate: dict[Stat, float] = Field(default_factory=dict)
    boost_additive: dict[Stat, float] = Field(default_factory=dict)
    boost_rate: dict[Stat, float] = Field(default_factory=dict)
    derivation_bonus: dict[Stat, float] = Field(default_factory=dict)
    free_points: dict[Stat, int] = Field(default_factory=dict)


# Ledger keys written by older versions of the tracker
_LEGACY_LEDGER_KEYS: dict[str, str] = {
    "rawTitleBonuses": "rawTitleAdditive",
    "includedTraitMultipliers": "traitMultipliers",
    "includedTitleBonuses": "titleAdditive",
    "includedTitleMultipliers": "titleRate",
    "includedStatBoostBonuses": "boostAdditive",
    "includedStatBoostMultipliers": "boostRate",
    "includedDerivationBonuses": "derivationBonus",
}

_STAT_KEYS = frozenset(stat.value for stat in ALL_STATS)


class Snapshot(RecordModel):
    """An immutable stat baseline captured at a level, plus its ledger."""

    stats: dict[Stat, int] = Field(default_factory=dict)
    ledger: SnapshotLedger = Field(default_factory=SnapshotLedger)

    @model_validator(mode="before")
    @classmethod
    def _normalize_legacy_shape(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        if "stats" not in data and "ledger" not in data:
            # Oldest format: a flat {stat: value} map with no ledger.
            return {"stats": {k: v for k, v in data.items() if k in _STAT_KEYS}}
        legacy = {new: data[old] for old, new in _LEGACY_LEDGER_KEYS.items() if old in data}
        if legacy and "ledger" not in data:
            return {"stats": data["stats"], "ledger": legacy}
        return data


# =============================================================================
# Resources & Export-only Data
# =============================================================================


class ResourcePool(RecordModel):
    """Stored HP or MP. ``current`` is None until first set."""

    current: int | None = None
    max: int = 0


class ActiveSkill(RecordModel):
    """An active skill line on the status screen."""

    name: str = ""
    rank: SkillRank = SkillRank.NOVICE
    level: int = 1
    advancement: bool = False


class BondSkill(ActiveSkill):
    """An active skill granted by the bond."""

    primary_stat_shared: str | None = None


class PassiveSkill(RecordModel):
    """A passive skill line on the status screen."""

    name: str = ""
    tier: PassiveTier = PassiveTier.I


class BoundItem(RecordModel):
    """An item bound to the character."""

    name: str = ""
    rank: str = ""
    type: str = ""


# =============================================================================
# Character Record
# =============================================================================


class CharacterRecord(RecordModel):
    """Everything the engine needs to resolve a character's stats.

    Attributes:
        name: Character name.
        level: Current level (the only required field).
        class_name: Current class label shown on the status screen.
        class_advancement: Whether a class advancement is on offer.
        growth_history: Growth phases sorted by start level.
        snapshots: Captured baselines keyed by level.
        free_points: Manually allocated points per stat.
        traits: Traits with their effects.
        trait_count: Stored trait count shown on the status screen.
        trait_slots: Maximum trait count shown on the status screen.
        titles: Titles with their bonuses.
        stat_boosts: Bonuses independent of titles.
        stat_derivations: Character-level derivation rules.
        hp: Stored HP pool.
        mp: Stored MP pool.
    """

    name: str = ""
    level: int = Field(ge=1)
    class_name: str = Field(
        default="",
        validation_alias=AliasChoices("className", "class", "class_name"),
    )
    class_advancement: bool = False
    growth_history: list[GrowthPhase] = Field(
        default_factory=list,
        validation_alias=AliasChoices("growthHistory", "classHistory", "growth_history"),
    )
    snapshots: dict[int, Snapshot] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("snapshots", "levelSnapshots"),
    )
    free_points: dict[Stat, int] = Field(default_factory=dict)
    traits: list[Trait] = Field(default_factory=list)
    trait_count: int | None = None
    trait_slots: int | None = None
    titles: list[Title] = Field(default_factory=list)
    stat_boosts: list[StatBoost] = Field(default_factory=list)
    stat_derivations: list[DerivationRule] = Field(default_factory=list)
    hp: ResourcePool | None = None
    mp: ResourcePool | None = None
    active_skills: list[ActiveSkill] = Field(default_factory=list)
    passive_skills: list[PassiveSkill] = Field(default_factory=list)
    bond_skills: list[BondSkill] = Field(default_factory=list)
    bound_items: list[BoundItem] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _unwrap_trait_container(cls, data: Any) -> Any:
        # Older records stored traits as {"current": n, "max": m, "items": [...]}.
        if isinstance(data, dict) and isinstance(data.get("traits"), dict):
            container = data["traits"]
            data = {
                **data,
                "traits": container.get("items") or [],
                "traitCount": data.get("traitCount", container.get("current")),
                "traitSlots": data.get("traitSlots", container.get("max")),
            }
        return data

    def latest_snapshot_level(self) -> int | None:
        """Get the greatest snapshot level not above the current level.

        Returns:
            The snapshot level, or None when no snapshot applies.
        """
        levels = [lvl for lvl in self.snapshots if lvl <= self.level]
        return max(levels) if levels else None

    def fingerprint(self) -> str:
        """Hash the record's content.

        Two records with equal content share a fingerprint, so a stat result
        can be matched to the exact record state it was resolved from.

        Returns:
            Hex SHA-256 digest of the record's canonical JSON.
        """
        payload = json.dumps(self.model_dump(mode="json", by_alias=True), sort_keys=True)
        return hashlib.sha256(payload.encode("utf-8")).hexdigest()


def load_character(data: Mapping[str, Any] | str | bytes) -> CharacterRecord:
    """Parse a character record from a mapping or a JSON document.

    Args:
        data: Decoded record or raw JSON.

    Returns:
        The validated record.

    Raises:
        ValidationError: If the record does not match the schema.
    """
    try:
        if isinstance(data, (str, bytes)):
            return CharacterRecord.model_validate_json(data)
        return CharacterRecord.model_validate(dict(data))
    except PydanticValidationError as exc:
        first = exc.errors()[0] if exc.errors() else {}
        field_name = ".".join(str(part) for part in first.get("loc", ())) or None
        raise ValidationError(
            f"Invalid character record: {exc.error_count()} error(s)",
            field_name=field_name,
            details={"errors": [err["msg"] for err in exc.errors()]},
        ) from exc


__all__ = [
    "RecordModel",
    "GrowthPhase",
    "DerivationRule",
    "StatMultiplier",
    "RedirectFreePoints",
    "StatDerivation",
    "Effect",
    "Trait",
    "TitleBonus",
    "Title",
    "StatBoost",
    "SnapshotLedger",
    "Snapshot",
    "ResourcePool",
    "ActiveSkill",
    "BondSkill",
    "PassiveSkill",
    "BoundItem",
    "CharacterRecord",
    "load_character",
]
