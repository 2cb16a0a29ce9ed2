"""Snapshot lookup and ledger netting.

A snapshot's stats already contain the bonuses recorded in its ledger.
Everything computed on top of a snapshot is therefore the *net* of a
current amount against a ledgered one, and ``net_of`` is the single place
that difference is taken.
"""

from __future__ import annotations

from dataclasses import dataclass

from status_screen.models.character import CharacterRecord, Snapshot
from status_screen.models.enums import Stat


def net_of(current: float, ledgered: float) -> float:
    """Get the part of ``current`` not already baked into a snapshot.

    Args:
        current: Amount as of now.
        ledgered: Amount the snapshot already includes.

    Returns:
        The difference; negative when a bonus was removed since the snapshot.

    Example:
        >>> net_of(25, 10)
        15
    """
    return current - ledgered


@dataclass(frozen=True)
class LedgerEntry:
    """One stat's view of the applicable snapshot.

    Missing values are neutral: 0 for additive amounts and rates, 1 for the
    trait multiplier. ``raw_title_additive`` stays None when the snapshot
    predates raw title tracking.
    """

    level: int | None = None
    base: int = 0
    raw_title_additive: float | None = None
    trait_multiplier: float = 1.0
    title_additive: float = 0.0
    title_rate: float = 0.0
    boost_additive: float = 0.0
    boost_rate: float = 0.0
    derivation_bonus: float = 0.0
    free_points: int = 0

    @property
    def records_raw_titles(self) -> bool:
        """Check if raw title values were recorded at capture."""
        return self.raw_title_additive is not None


NO_SNAPSHOT = LedgerEntry()
"""Baseline used when no snapshot applies."""


def applicable_snapshot(record: CharacterRecord) -> tuple[int | None, Snapshot | None]:
    """Find the most recent snapshot at or below the record's level.

    Args:
        record: The character record.

    Returns:
        (snapshot level, snapshot), or (None, None) when none applies.
    """
    level = record.latest_snapshot_level()
    if level is None:
        return None, None
    return level, record.snapshots[level]


def ledger_entry(snapshot_level: int | None, snapshot: Snapshot | None, stat: Stat) -> LedgerEntry:
    """Read one stat's baseline and ledger from a snapshot.

    Args:
        snapshot_level: Level the snapshot was taken at.
        snapshot: The snapshot, or None for a baseline of zero.
        stat: The stat to read.

    Returns:
        The stat's ledger entry.
    """
    if snapshot is None:
        return NO_SNAPSHOT

    ledger = snapshot.ledger
    raw = None
    if ledger.raw_title_additive is not None:
        raw = ledger.raw_title_additive.get(stat, 0.0)
    trait_multiplier = ledger.trait_multipliers.get(stat, 1.0)

    # Older ledgers may carry raw values without the multiplied total
    title_additive = ledger.title_additive.get(stat)
    if title_additive is None:
        title_additive = (raw or 0.0) * trait_multiplier

    return LedgerEntry(
        level=snapshot_level,
        base=snapshot.stats.get(stat, 0),
        raw_title_additive=raw,
        trait_multiplier=trait_multiplier,
        title_additive=title_additive,
        title_rate=ledger.title_rate.get(stat, 0.0),
        boost_additive=ledger.boost_additive.get(stat, 0.0),
        boost_rate=ledger.boost_rate.get(stat, 0.0),
        derivation_bonus=ledger.derivation_bonus.get(stat, 0.0),
        free_points=ledger.free_points.get(stat, 0),
    )


__all__ = [
    "net_of",
    "LedgerEntry",
    "NO_SNAPSHOT",
    "applicable_snapshot",
    "ledger_entry",
]
