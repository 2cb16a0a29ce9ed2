"""Per-stat composition on top of the applicable snapshot.

The composer starts from the snapshot baseline, adds whatever was gained
since, and nets every bonus against the snapshot's ledger so amounts already
baked into the baseline are not counted twice.

Example:
    >>> from status_screen.engine.composer import resolve_stats
    >>> result = resolve_stats(record)
    >>> result.stats[Stat.STRENGTH]
    10
"""

from __future__ import annotations

import math

from status_screen.core.constants import TITLE_RATE_ESCALATION_LEVEL
from status_screen.core.logging import get_logger
from status_screen.engine.bonuses import aggregate_bonuses
from status_screen.engine.derivation import apply_derivations
from status_screen.engine.growth import growth_for_stat
from status_screen.engine.ledger import applicable_snapshot, ledger_entry, net_of
from status_screen.engine.traits import (
    FreePointRedirect,
    free_point_redirect,
    trait_derivations,
    trait_multiplier,
)
from status_screen.models.character import CharacterRecord, Snapshot
from status_screen.models.enums import ALL_STATS, Stat
from status_screen.models.results import StatBreakdown, StatResult


logger = get_logger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from negative infinity."""
    return math.floor(value + 0.5)


def _compose(
    record: CharacterRecord,
    stat: Stat,
    snapshot_level: int | None,
    snapshot: Snapshot | None,
    redirect: FreePointRedirect | None,
) -> StatBreakdown:
    entry = ledger_entry(snapshot_level, snapshot, stat)

    growth, growth_detail = growth_for_stat(
        record.growth_history, stat, snapshot_level, record.level
    )

    free_points = record.free_points.get(stat, 0)
    redirected = 0
    net_free_points = 0
    if redirect is not None:
        if redirect.to_stat == stat:
            redirected = redirect.points
    else:
        net_free_points = int(net_of(free_points, entry.free_points))

    gains = growth + redirected + net_free_points
    multiplier = trait_multiplier(record.traits, stat)
    gains_after_trait = gains * multiplier

    totals = aggregate_bonuses(record.titles, record.stat_boosts, stat)
    title_after_trait = totals.title_additive * multiplier
    if entry.raw_title_additive is not None:
        net_title_additive = net_of(
            title_after_trait, entry.raw_title_additive * entry.trait_multiplier
        )
    else:
        net_title_additive = net_of(title_after_trait, entry.title_additive)
    net_boost_additive = net_of(totals.boost_additive, entry.boost_additive)

    pre = entry.base + gains_after_trait + net_title_additive + net_boost_additive

    net_title_rate = net_of(totals.title_rate, entry.title_rate)
    escalated = (
        record.level >= TITLE_RATE_ESCALATION_LEVEL
        and multiplier > 1
        and net_title_rate > 0
    )
    if escalated:
        net_title_rate *= multiplier
    net_boost_rate = net_of(totals.boost_rate, entry.boost_rate)

    rate = net_title_rate + net_boost_rate
    final = round_half_up(pre * (1 + rate)) if rate > 0 else round_half_up(pre)

    return StatBreakdown(
        stat=stat,
        snapshot_level=entry.level,
        snapshot_base=entry.base,
        snapshot_raw_title_additive=entry.raw_title_additive,
        snapshot_trait_multiplier=entry.trait_multiplier,
        snapshot_title_additive=entry.title_additive,
        snapshot_title_rate=entry.title_rate,
        snapshot_boost_additive=entry.boost_additive,
        snapshot_boost_rate=entry.boost_rate,
        snapshot_free_points=entry.free_points,
        snapshot_derivation=entry.derivation_bonus,
        growth=growth,
        growth_detail=growth_detail,
        redirected_free_points=redirected,
        free_points=free_points,
        net_free_points=net_free_points,
        gains_before_trait=gains,
        trait_multiplier=multiplier,
        gains_after_trait=gains_after_trait,
        title_additive=totals.title_additive,
        title_additive_after_trait=title_after_trait,
        net_title_additive=net_title_additive,
        boost_additive=totals.boost_additive,
        net_boost_additive=net_boost_additive,
        pre_multiplier_value=pre,
        title_rate=totals.title_rate,
        net_title_rate=net_title_rate,
        title_rate_escalated=escalated,
        boost_rate=totals.boost_rate,
        net_boost_rate=net_boost_rate,
        final=final,
    )


def compose_stat(record: CharacterRecord, stat: Stat) -> StatBreakdown:
    """Compose one stat before the derivation pass.

    Never raises: missing snapshot entries, ledger entries and bonuses
    resolve to neutral values.

    Args:
        record: The character record.
        stat: The stat to compose.

    Returns:
        The stat's breakdown, ``final`` holding the composed value.
    """
    snapshot_level, snapshot = applicable_snapshot(record)
    redirect = free_point_redirect(record.traits, record.level, snapshot_level)
    return _compose(record, stat, snapshot_level, snapshot, redirect)


def resolve_stats(record: CharacterRecord) -> StatResult:
    """Resolve every stat of a character, derivations included.

    Args:
        record: The character record.

    Returns:
        Final stats with their breakdowns, tagged with the record's level
        and fingerprint.
    """
    snapshot_level, snapshot = applicable_snapshot(record)
    redirect = free_point_redirect(record.traits, record.level, snapshot_level)

    breakdowns = {
        stat: _compose(record, stat, snapshot_level, snapshot, redirect) for stat in ALL_STATS
    }
    stats = {stat: breakdown.final for stat, breakdown in breakdowns.items()}

    rules = [
        *trait_derivations(record.traits),
        *(rule for rule in record.stat_derivations if rule.is_complete),
    ]
    ledgered = snapshot.ledger.derivation_bonus if snapshot is not None else {}
    stats, breakdowns = apply_derivations(stats, breakdowns, rules, ledgered)

    logger.debug(
        "Stats resolved",
        character=record.name,
        character_level=record.level,
        snapshot_level=snapshot_level,
        redirect_to=redirect.to_stat if redirect else None,
        derivation_rules=len(rules),
    )
    return StatResult(
        level=record.level,
        fingerprint=record.fingerprint(),
        stats=stats,
        breakdowns=breakdowns,
    )


__all__ = [
    "round_half_up",
    "compose_stat",
    "resolve_stats",
]
