"""Stat engine: pure functions from a Character Record to resolved stats.

Submodules:
    growth: Growth table resolution since the applicable snapshot.
    traits: Trait multipliers, free point redirect, trait derivations.
    bonuses: Title and stat boost aggregation.
    ledger: Snapshot lookup and ledger netting.
    composer: Per-stat composition and full resolution.
    derivation: Derivation pass over composed stats.
    bond: Bond sync between two resolved characters.
    resources: HP and MP derived from resolved stats.
    snapshots: Snapshot capture.
    sheet: Character sheets for display and export.

The engine holds no state; calling it twice with the same record yields the
same result.
"""

from __future__ import annotations

from status_screen.engine.bond import bond_share, synchronize_bond
from status_screen.engine.bonuses import BonusTotals, aggregate_bonuses
from status_screen.engine.composer import compose_stat, resolve_stats, round_half_up
from status_screen.engine.derivation import apply_derivations, derivation_bonus
from status_screen.engine.growth import current_phase, growth_for_stat, levels_in_phase
from status_screen.engine.ledger import LedgerEntry, applicable_snapshot, ledger_entry, net_of
from status_screen.engine.resources import calculate_resources
from status_screen.engine.sheet import build_sheet, resolve_bonded_pair
from status_screen.engine.snapshots import capture_snapshot, record_snapshot
from status_screen.engine.traits import (
    FreePointRedirect,
    free_point_redirect,
    trait_derivations,
    trait_multiplier,
)


__all__ = [
    # Growth
    "growth_for_stat",
    "levels_in_phase",
    "current_phase",
    # Traits
    "FreePointRedirect",
    "trait_multiplier",
    "free_point_redirect",
    "trait_derivations",
    # Bonuses
    "BonusTotals",
    "aggregate_bonuses",
    # Ledger
    "net_of",
    "LedgerEntry",
    "applicable_snapshot",
    "ledger_entry",
    # Composition
    "round_half_up",
    "compose_stat",
    "resolve_stats",
    "derivation_bonus",
    "apply_derivations",
    # Bond & resources
    "bond_share",
    "synchronize_bond",
    "calculate_resources",
    # Snapshots
    "capture_snapshot",
    "record_snapshot",
    # Sheets
    "build_sheet",
    "resolve_bonded_pair",
]
