"""Enumeration types for the status screen stat engine.

Stats are a closed set: every map in a character record is keyed by
``Stat``, which lets the engine treat any missing key as a neutral value
instead of guarding against unknown names.
"""

from __future__ import annotations

from enum import StrEnum


class Stat(StrEnum):
    """Character attributes shown on the status screen.

    Four physical and four magical stats. Values are the lowercase keys
    used in stored records.
    """

    STRENGTH = "strength"
    AGILITY = "agility"
    CONSTITUTION = "constitution"
    VITALITY = "vitality"
    INTELLECT = "intellect"
    WILLPOWER = "willpower"
    MANA = "mana"
    WISDOM = "wisdom"

    @property
    def display_name(self) -> str:
        """Get the name shown on the status screen.

        Returns:
            Capitalized stat name (e.g., 'Strength').
        """
        return self.value.capitalize()

    @property
    def is_physical(self) -> bool:
        """Check if this stat belongs to the physical group."""
        return self in PHYSICAL_STATS


PHYSICAL_STATS: tuple[Stat, ...] = (
    Stat.STRENGTH,
    Stat.AGILITY,
    Stat.CONSTITUTION,
    Stat.VITALITY,
)
MAGICAL_STATS: tuple[Stat, ...] = (
    Stat.INTELLECT,
    Stat.WILLPOWER,
    Stat.MANA,
    Stat.WISDOM,
)
ALL_STATS: tuple[Stat, ...] = PHYSICAL_STATS + MAGICAL_STATS


class EffectType(StrEnum):
    """Discriminator values for trait effects."""

    STAT_MULTIPLIER = "stat_multiplier"
    REDIRECT_FREE_POINTS = "redirect_free_points"
    STAT_DERIVATION = "stat_derivation"


class Rounding(StrEnum):
    """How a fractional bond share is turned into whole points."""

    FLOOR = "floor"
    ROUND = "round"


class SkillRank(StrEnum):
    """Active skill ranks, lowest first."""

    NOVICE = "Novice"
    JOURNEYMAN = "Journeyman"
    ADEPT = "Adept"
    EXPERT = "Expert"
    MASTER = "Master"
    GRANDMASTER = "Grandmaster"


class PassiveTier(StrEnum):
    """Passive skill tiers."""

    I = "I"  # noqa: E741
    II = "II"
    III = "III"
    IV = "IV"
    V = "V"


__all__ = [
    "Stat",
    "PHYSICAL_STATS",
    "MAGICAL_STATS",
    "ALL_STATS",
    "EffectType",
    "Rounding",
    "SkillRank",
    "PassiveTier",
]
