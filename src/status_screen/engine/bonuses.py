"""Title and stat boost aggregation."""

from __future__ import annotations

from collections.abc import Sequence
from typing import NamedTuple

from status_screen.models.character import StatBoost, Title
from status_screen.models.enums import Stat


class BonusTotals(NamedTuple):
    """Current bonus totals for one stat.

    Rates are summed; the final factor applied to a stat is ``1 + Σrates``.
    """

    title_additive: float = 0.0
    title_rate: float = 0.0
    boost_additive: float = 0.0
    boost_rate: float = 0.0


def aggregate_bonuses(
    titles: Sequence[Title],
    boosts: Sequence[StatBoost],
    stat: Stat,
) -> BonusTotals:
    """Sum the enabled title and boost bonuses for a stat.

    Args:
        titles: The character's titles.
        boosts: The character's stat boosts.
        stat: The stat to aggregate.

    Returns:
        Additive and rate totals, titles and boosts kept apart since only
        title additives are trait-multiplied.
    """
    title_additive = title_rate = 0.0
    for title in titles:
        if not title.enabled:
            continue
        for bonus in title.bonuses:
            if bonus.stat == stat:
                title_additive += bonus.additive
                title_rate += bonus.multiplier

    boost_additive = boost_rate = 0.0
    for boost in boosts:
        if boost.enabled and boost.stat == stat:
            boost_additive += boost.additive
            boost_rate += boost.multiplier

    return BonusTotals(title_additive, title_rate, boost_additive, boost_rate)


__all__ = [
    "BonusTotals",
    "aggregate_bonuses",
]
