"""HP and MP derived from resolved stats."""

from __future__ import annotations

from collections.abc import Mapping

from status_screen.core.constants import HP_PER_CONSTITUTION, MP_PER_MANA
from status_screen.models.character import CharacterRecord, ResourcePool
from status_screen.models.enums import Stat
from status_screen.models.results import DerivedResources, ResourceValue


def _resource(pool: ResourcePool | None, maximum: int) -> ResourceValue:
    # An unset pool starts full; a stored value never exceeds the new maximum
    stored = pool.current if pool is not None else None
    current = maximum if stored is None else min(stored, maximum)
    return ResourceValue(current=current, max=maximum)


def calculate_resources(
    stats: Mapping[Stat, int],
    record: CharacterRecord,
    borrowed_mana: int = 0,
) -> DerivedResources:
    """Derive HP and MP maxima and clamp the stored current values.

    Args:
        stats: The character's resolved stats.
        record: The character record holding stored HP and MP.
        borrowed_mana: Mana borrowed through the bond.

    Returns:
        HP and MP with current and maximum values.

    Example:
        >>> calculate_resources({Stat.CONSTITUTION: 12, Stat.MANA: 5}, record).hp.max
        120
    """
    max_hp = stats.get(Stat.CONSTITUTION, 0) * HP_PER_CONSTITUTION
    max_mp = (stats.get(Stat.MANA, 0) + borrowed_mana) * MP_PER_MANA
    return DerivedResources(
        hp=_resource(record.hp, max_hp),
        mp=_resource(record.mp, max_mp),
    )


__all__ = [
    "calculate_resources",
]
