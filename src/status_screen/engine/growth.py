"""Growth table resolution.

A growth phase grants its per-level deltas for every level *after* the one
it starts at, up to and including the one it ends at. A snapshot already
contains everything up to its own level, so only levels after the snapshot
count.
"""

from __future__ import annotations

from collections.abc import Sequence

from status_screen.models.character import GrowthPhase
from status_screen.models.enums import Stat
from status_screen.models.results import GrowthContribution


def levels_in_phase(phase: GrowthPhase, snapshot_level: int | None, current_level: int) -> int:
    """Count levels since the snapshot that fall inside a phase.

    Overlap of ``[snapshot_level + 1, current_level]`` with
    ``[phase.start_level + 1, phase.end_level]`` (open-ended while the
    phase is active). Without a snapshot, counting starts at level 1.

    Args:
        phase: The growth phase.
        snapshot_level: Level of the applicable snapshot, or None.
        current_level: The character's current level.

    Returns:
        Number of granting levels, never negative.
    """
    range_start = (snapshot_level if snapshot_level is not None else 0) + 1
    start = max(range_start, phase.start_level + 1)
    end = current_level if phase.end_level is None else min(current_level, phase.end_level)
    return max(0, end - start + 1)


def growth_for_stat(
    history: Sequence[GrowthPhase],
    stat: Stat,
    snapshot_level: int | None,
    current_level: int,
) -> tuple[int, tuple[GrowthContribution, ...]]:
    """Sum a stat's growth across all phases since the snapshot.

    Args:
        history: Growth phases, sorted by start level.
        stat: The stat to resolve.
        snapshot_level: Level of the applicable snapshot, or None.
        current_level: The character's current level.

    Returns:
        (total growth, contribution per phase that granted anything).

    Example:
        >>> phase = GrowthPhase(start_level=5, end_level=10, per_level_deltas={Stat.STRENGTH: 2})
        >>> growth_for_stat([phase], Stat.STRENGTH, None, 10)[0]
        10
    """
    contributions: list[GrowthContribution] = []
    for phase in history:
        per_level = phase.per_level_deltas.get(stat, 0)
        if per_level == 0:
            continue
        levels = levels_in_phase(phase, snapshot_level, current_level)
        if levels > 0:
            contributions.append(
                GrowthContribution(phase=phase.name, per_level=per_level, levels=levels)
            )
    return sum(c.total for c in contributions), tuple(contributions)


def current_phase(history: Sequence[GrowthPhase], level: int) -> GrowthPhase | None:
    """Find the phase covering a level.

    Args:
        history: Growth phases, sorted by start level.
        level: The level to look up.

    Returns:
        The covering phase, the last phase when none covers the level, or
        None for an empty history.
    """
    if not history:
        return None
    for phase in history:
        end = phase.end_level if phase.end_level is not None else level
        if phase.start_level <= level <= end:
            return phase
    return history[-1]


__all__ = [
    "levels_in_phase",
    "growth_for_stat",
    "current_phase",
]
