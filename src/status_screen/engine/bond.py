"""Bond sync between two resolved characters.

A bond lets one character borrow a share of its partner's resolved stats.
The borrowed amounts form an auxiliary map for display and derived
resources. They are never written into either character's own stats, so a
snapshot captured from a bonded character contains only its own values.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence

from status_screen.core.config import BondSyncRule
from status_screen.models.enums import Rounding, Stat


def bond_share(partner_stats: Mapping[Stat, int], rule: BondSyncRule) -> int:
    """Get the share of a partner stat a rule grants.

    Args:
        partner_stats: The partner's resolved stats.
        rule: The sync rule.

    Returns:
        ``fraction`` of the partner's source stat as whole points.
    """
    share = partner_stats.get(rule.source_stat, 0) * rule.fraction
    match rule.rounding:
        case Rounding.FLOOR:
            return math.floor(share)
        case Rounding.ROUND:
            return math.floor(share + 0.5)


def synchronize_bond(
    partner_stats: Mapping[Stat, int],
    rules: Sequence[BondSyncRule],
) -> dict[Stat, int]:
    """Compute everything a character borrows from its partner.

    Args:
        partner_stats: The partner's resolved stats.
        rules: Sync rules applied in this direction.

    Returns:
        Borrowed points per target stat; several rules on one target add up.
    """
    borrowed: dict[Stat, int] = {}
    for rule in rules:
        share = bond_share(partner_stats, rule)
        borrowed[rule.target_stat] = borrowed.get(rule.target_stat, 0) + share
    return borrowed


__all__ = [
    "bond_share",
    "synchronize_bond",
]
