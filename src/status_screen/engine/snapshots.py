"""Snapshot capture.

A snapshot freezes a resolved stat map at a level together with a ledger of
every bonus those values already include. Capture must read the stats and
the bonuses from the same record state; a result carries the fingerprint of
the record it was resolved from, and capture refuses a mismatch.
"""

from __future__ import annotations

from status_screen.core.exceptions import StaleResultError
from status_screen.core.logging import get_logger
from status_screen.models.character import CharacterRecord, Snapshot, SnapshotLedger
from status_screen.models.results import StatResult


logger = get_logger(__name__)


def capture_snapshot(record: CharacterRecord, result: StatResult) -> Snapshot:
    """Capture a snapshot of a resolved character.

    Args:
        record: The record ``result`` was resolved from.
        result: Resolved stats of ``record``.

    Returns:
        Snapshot with the result's stats and the record's current bonuses
        as ledger.

    Raises:
        StaleResultError: If ``result`` was resolved from a different record
            state or level.
    """
    fingerprint = record.fingerprint()
    if result.fingerprint != fingerprint or result.level != record.level:
        raise StaleResultError(
            "Stat result does not match the record it is captured from",
            expected_fingerprint=fingerprint,
            actual_fingerprint=result.fingerprint,
        )

    breakdowns = result.breakdowns.values()
    ledger = SnapshotLedger(
        raw_title_additive={b.stat: b.title_additive for b in breakdowns},
        trait_multipliers={b.stat: b.trait_multiplier for b in breakdowns},
        title_additive={b.stat: b.title_additive_after_trait for b in breakdowns},
        title_rate={b.stat: b.title_rate for b in breakdowns},
        boost_additive={b.stat: b.boost_additive for b in breakdowns},
        boost_rate={b.stat: b.boost_rate for b in breakdowns},
        derivation_bonus={b.stat: b.derivation_bonus for b in breakdowns},
        free_points={b.stat: b.included_free_points for b in breakdowns},
    )
    snapshot = Snapshot(stats=dict(result.stats), ledger=ledger)

    logger.info(
        "Snapshot captured",
        character=record.name,
        character_level=record.level,
        stats={stat.value: value for stat, value in result.stats.items()},
    )
    return snapshot


def record_snapshot(record: CharacterRecord, snapshot: Snapshot) -> CharacterRecord:
    """Store a snapshot under the record's current level.

    An existing snapshot at that level is replaced. The record itself is not
    modified; persisting the returned copy is up to the caller.

    Args:
        record: The character record.
        snapshot: Snapshot captured at the record's level.

    Returns:
        A copy of the record including the snapshot.
    """
    snapshots = {**record.snapshots, record.level: snapshot}
    return record.model_copy(update={"snapshots": snapshots})


__all__ = [
    "capture_snapshot",
    "record_snapshot",
]
