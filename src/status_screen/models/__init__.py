"""Pydantic V2 schemas for the status screen stat engine.

Submodules:
    enums: Stat names, effect discriminators, skill ranks.
    character: Character Record input (growth, traits, titles, snapshots).
    results: Engine output (StatResult, breakdowns, derived resources).

Example:
    >>> from status_screen.models import CharacterRecord, Stat
    >>> record = CharacterRecord(level=5, free_points={Stat.MANA: 3})
"""

from __future__ import annotations

# =============================================================================
# Enumerations
# =============================================================================
from status_screen.models.enums import (
    ALL_STATS,
    MAGICAL_STATS,
    PHYSICAL_STATS,
    EffectType,
    PassiveTier,
    Rounding,
    SkillRank,
    Stat,
)

# =============================================================================
# Character Record
# =============================================================================
from status_screen.models.character import (
    ActiveSkill,
    BondSkill,
    BoundItem,
    CharacterRecord,
    DerivationRule,
    Effect,
    GrowthPhase,
    PassiveSkill,
    RedirectFreePoints,
    ResourcePool,
    Snapshot,
    SnapshotLedger,
    StatBoost,
    StatDerivation,
    StatMultiplier,
    Title,
    TitleBonus,
    Trait,
    load_character,
)

# =============================================================================
# Results
# =============================================================================
from status_screen.models.results import (
    CharacterSheet,
    DerivedResources,
    GrowthContribution,
    ResourceValue,
    StatBreakdown,
    StatResult,
)


__all__ = [
    # === Enumerations ===
    "Stat",
    "PHYSICAL_STATS",
    "MAGICAL_STATS",
    "ALL_STATS",
    "EffectType",
    "Rounding",
    "SkillRank",
    "PassiveTier",
    # === Character Record ===
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
    # === Results ===
    "GrowthContribution",
    "StatBreakdown",
    "StatResult",
    "ResourceValue",
    "DerivedResources",
    "CharacterSheet",
]
