"""Pydantic V2 schemas for engine output.

A StatResult holds the resolved stat map together with a breakdown per
stat. The breakdown records every intermediate quantity of the
computation; the UI renders it as an audit tooltip and snapshot capture
reads its ledger-relevant fields.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from status_screen.models.enums import Stat


class GrowthContribution(BaseModel):
    """Stat points one growth phase contributed since the snapshot."""

    model_config = ConfigDict(frozen=True)

    phase: str
    per_level: int
    levels: int

    @property
    def total(self) -> int:
        """Points contributed by this phase."""
        return self.per_level * self.levels


class StatBreakdown(BaseModel):
    """Trace of how one stat's final value was reached.

    Snapshot fields describe the baseline and what it already included;
    the remaining fields are the current inputs and the net amounts added
    on top of the baseline.
    """

    model_config = ConfigDict(frozen=True)

    stat: Stat

    # Baseline
    snapshot_level: int | None = None
    snapshot_base: int = 0
    snapshot_raw_title_additive: float | None = None
    snapshot_trait_multiplier: float = 1.0
    snapshot_title_additive: float = 0.0
    snapshot_title_rate: float = 0.0
    snapshot_boost_additive: float = 0.0
    snapshot_boost_rate: float = 0.0
    snapshot_free_points: int = 0

    # Gains
    growth: int = 0
    growth_detail: tuple[GrowthContribution, ...] = ()
    redirected_free_points: int = 0
    free_points: int = 0
    net_free_points: int = 0
    gains_before_trait: float = 0.0
    trait_multiplier: float = 1.0
    gains_after_trait: float = 0.0

    # Additive bonuses
    title_additive: float = 0.0
    title_additive_after_trait: float = 0.0
    net_title_additive: float = 0.0
    boost_additive: float = 0.0
    net_boost_additive: float = 0.0
    pre_multiplier_value: float = 0.0

    # Rates
    title_rate: float = 0.0
    net_title_rate: float = 0.0
    title_rate_escalated: bool = False
    boost_rate: float = 0.0
    net_boost_rate: float = 0.0

    # Derivation pass
    derivation_bonus: int = 0
    snapshot_derivation: float = 0.0
    net_derivation: float = 0.0
    derivation_sources: tuple[str, ...] = ()

    final: int = 0

    @property
    def included_free_points(self) -> int:
        """Manual free points folded into ``final``, cumulative over snapshots."""
        return self.snapshot_free_points + self.net_free_points


class StatResult(BaseModel):
    """Resolved stats of one character at one record state.

    Attributes:
        level: Level the stats were resolved at.
        fingerprint: Fingerprint of the record the stats were resolved from.
        stats: Final value per stat.
        breakdowns: Computation trace per stat.
    """

    model_config = ConfigDict(frozen=True)

    level: int
    fingerprint: str
    stats: dict[Stat, int] = Field(default_factory=dict)
    breakdowns: dict[Stat, StatBreakdown] = Field(default_factory=dict)

    def get(self, stat: Stat) -> int:
        """Get a resolved stat, 0 when absent."""
        return self.stats.get(stat, 0)


class ResourceValue(BaseModel):
    """Current and maximum value of a derived resource."""

    model_config = ConfigDict(frozen=True)

    current: int
    max: int


class DerivedResources(BaseModel):
    """HP and MP derived from resolved stats."""

    model_config = ConfigDict(frozen=True)

    hp: ResourceValue
    mp: ResourceValue


class CharacterSheet(BaseModel):
    """Everything displayed or exported for one character.

    Attributes:
        result: Resolved stats of the character itself.
        borrowed: Bond shares received from the partner, never part of ``result``.
        resources: HP and MP including borrowed mana.
    """

    model_config = ConfigDict(frozen=True)

    result: StatResult
    borrowed: dict[Stat, int] = Field(default_factory=dict)
    resources: DerivedResources

    def displayed(self, stat: Stat) -> int:
        """Get a stat as displayed: own value plus any bond share."""
        return self.result.get(stat) + self.borrowed.get(stat, 0)


__all__ = [
    "GrowthContribution",
    "StatBreakdown",
    "StatResult",
    "ResourceValue",
    "DerivedResources",
    "CharacterSheet",
]
