"""Derivation pass over composed stats.

Rules run in list order, each reading the stat map as left by the rules
before it. A snapshot already contains the derivation bonus it was captured
with, so the ledgered amount for a target is subtracted once, by the first
rule that reaches that target.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence

from status_screen.engine.ledger import net_of
from status_screen.models.character import DerivationRule
from status_screen.models.enums import Stat
from status_screen.models.results import StatBreakdown


def derivation_bonus(stats: Mapping[Stat, int], rule: DerivationRule) -> int:
    """Get the bonus a rule derives from the current stat map.

    Example:
        >>> derivation_bonus({Stat.MANA: 100}, rule)  # 25% of mana
        25
    """
    return math.floor(stats.get(rule.source_stat, 0) * rule.percent / 100)


def apply_derivations(
    stats: Mapping[Stat, int],
    breakdowns: Mapping[Stat, StatBreakdown],
    rules: Sequence[DerivationRule],
    ledgered: Mapping[Stat, float],
) -> tuple[dict[Stat, int], dict[Stat, StatBreakdown]]:
    """Apply derivation rules to composed stats.

    Rules missing a source or target stat are skipped. Cycles are not
    detected; the result of cyclic rules depends on their order.

    Args:
        stats: Composed stats.
        breakdowns: Breakdowns matching ``stats``.
        rules: Trait rules followed by character-level rules.
        ledgered: Derivation bonus per target already in the snapshot.

    Returns:
        New (stats, breakdowns); the inputs are not modified.
    """
    result = dict(stats)
    traces = dict(breakdowns)
    outstanding = dict(ledgered)

    for rule in rules:
        if not rule.is_complete:
            continue
        target = rule.target_stat
        bonus = derivation_bonus(result, rule)
        net = net_of(bonus, outstanding.pop(target, 0.0))
        result[target] = int(result.get(target, 0) + net)

        trace = traces.get(target)
        if trace is None:
            continue
        source = f"{rule.percent:g}% of {rule.source_stat.display_name}"
        traces[target] = trace.model_copy(
            update={
                "derivation_bonus": trace.derivation_bonus + bonus,
                "net_derivation": trace.net_derivation + net,
                "derivation_sources": (*trace.derivation_sources, source),
                "final": result[target],
            }
        )

    return result, traces


__all__ = [
    "derivation_bonus",
    "apply_derivations",
]
