"""Trait effect resolution.

Traits are closed bundles of effects. Each helper here walks every effect of
every trait and picks out the kind it cares about.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import NamedTuple

from status_screen.core.constants import FREE_POINTS_PER_LEVEL, REDIRECT_BASELINE_LEVEL
from status_screen.models.character import (
    DerivationRule,
    Effect,
    RedirectFreePoints,
    StatDerivation,
    StatMultiplier,
    Trait,
)
from status_screen.models.enums import Stat


class FreePointRedirect(NamedTuple):
    """Active free point redirect: every level-up's points go to ``to_stat``."""

    to_stat: Stat
    points: int


def _effects(traits: Sequence[Trait]) -> Iterator[Effect]:
    for trait in traits:
        yield from trait.effects


def trait_multiplier(traits: Sequence[Trait], stat: Stat) -> float:
    """Get the combined gain multiplier traits apply to a stat.

    Args:
        traits: The character's traits.
        stat: The stat to resolve.

    Returns:
        Product of all matching multipliers, 1.0 when none apply.
    """
    result = 1.0
    for effect in _effects(traits):
        match effect:
            case StatMultiplier(stat=target, multiplier=multiplier) if target == stat:
                result *= multiplier
            case StatMultiplier() | RedirectFreePoints() | StatDerivation():
                pass
    return result


def free_point_redirect(
    traits: Sequence[Trait],
    level: int,
    from_level: int | None = None,
) -> FreePointRedirect | None:
    """Find the active free point redirect, if any.

    The first redirect across all traits wins. Points accrue for every level
    after ``from_level``; without a snapshot that is level 1.

    Args:
        traits: The character's traits.
        level: The character's current level.
        from_level: Level of the applicable snapshot, or None.

    Returns:
        The redirect, or None when no trait redirects free points.
    """
    baseline = from_level if from_level is not None else REDIRECT_BASELINE_LEVEL
    for effect in _effects(traits):
        match effect:
            case RedirectFreePoints(to_stat=Stat() as to_stat):
                points = FREE_POINTS_PER_LEVEL * max(0, level - baseline)
                return FreePointRedirect(to_stat=to_stat, points=points)
            case StatMultiplier() | RedirectFreePoints() | StatDerivation():
                pass
    return None


def trait_derivations(traits: Sequence[Trait]) -> list[DerivationRule]:
    """Collect complete derivation rules contributed by traits, in order."""
    rules: list[DerivationRule] = []
    for effect in _effects(traits):
        match effect:
            case StatDerivation() if effect.is_complete:
                rules.append(effect)
            case StatMultiplier() | RedirectFreePoints() | StatDerivation():
                pass
    return rules


__all__ = [
    "FreePointRedirect",
    "trait_multiplier",
    "free_point_redirect",
    "trait_derivations",
]
