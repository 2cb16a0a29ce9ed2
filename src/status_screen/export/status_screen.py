"""Plain-text status screen export.

The status screen is pasted into the story's chapters, so its layout is
fixed: bold section headers, one entry per line, a blank line after every
entry, and ``***`` fences around the whole block. Stats are shown as
resolved, bond shares included. Stat boosts are private bookkeeping and
never appear.

Example:
    >>> text = format_status_screen(record, build_sheet(record))
    >>> text.splitlines()[0]
    '***'
"""

from __future__ import annotations

from status_screen.core.config import FeatureSettings, get_settings
from status_screen.models.character import (
    ActiveSkill,
    BondSkill,
    BoundItem,
    CharacterRecord,
    PassiveSkill,
)
from status_screen.models.enums import MAGICAL_STATS, PHYSICAL_STATS
from status_screen.models.results import CharacterSheet


ADVANCEMENT_OFFERED = " + Advancement Offered"
FENCE = "***"


def format_skill(skill: ActiveSkill) -> str:
    """Format an active or bond skill line."""
    advancement = ADVANCEMENT_OFFERED if skill.advancement else ""
    return f"[{skill.name}] ({skill.rank} - Level {skill.level}){advancement}"


def format_passive_skill(skill: PassiveSkill) -> str:
    """Format a passive skill line."""
    return f"[{skill.name}] (Tier {skill.tier})"


def format_bound_item(item: BoundItem) -> str:
    """Format a bound item line."""
    return f"{item.rank} Rank {item.type} - {item.name}"


def _bond_skill_lines(skill: BondSkill) -> list[str]:
    lines = [format_skill(skill)]
    if skill.primary_stat_shared:
        lines.append(f"Primary Stat Shared - {skill.primary_stat_shared}")
    return lines


def format_status_screen(
    record: CharacterRecord,
    sheet: CharacterSheet,
    features: FeatureSettings | None = None,
) -> str:
    """Render a character's status screen.

    Args:
        record: The character record (names, skills, items).
        sheet: The character's resolved sheet.
        features: Sections to include; defaults to the configured ones.

    Returns:
        The status screen text.
    """
    if features is None:
        features = get_settings().features

    entries: list[str] = [FENCE, "**Status**", f"Name: {record.name} - Level {record.level}"]

    if record.class_name:
        advancement = ADVANCEMENT_OFFERED if record.class_advancement else ""
        entries.append(f"Class: {record.class_name}{advancement}")

    hp, mp = sheet.resources.hp, sheet.resources.mp
    entries.append(f"HP: {hp.current}/{hp.max}")
    entries.append(f"MP: {mp.current}/{mp.max}")

    if features.traits and (record.traits or record.trait_slots is not None):
        count = record.trait_count if record.trait_count is not None else len(record.traits)
        slots = record.trait_slots if record.trait_slots is not None else len(record.traits)
        entries.append(f"**Traits: ({count}/{slots})** ")
        entries.extend(f"{{{trait.name}}}" for trait in record.traits)

    if features.titles and record.titles:
        primary = next((t for t in record.titles if t.is_primary), None)
        marker = f" < {primary.name} >" if primary is not None else ""
        entries.append(f"**Titles:{marker}**")
        entries.extend(title.name for title in record.titles)

    entries.append("**Physical Stats:** ")
    entries.extend(f"{stat.display_name}: {sheet.displayed(stat)}" for stat in PHYSICAL_STATS)
    entries.append("**Magical Stats:** ")
    entries.extend(f"{stat.display_name}: {sheet.displayed(stat)}" for stat in MAGICAL_STATS)

    if features.bond_skills and record.bond_skills:
        entries.append("**Bond Skills:**")
        for skill in record.bond_skills:
            entries.extend(_bond_skill_lines(skill))

    if features.active_skills and record.active_skills:
        entries.append("**Active Skills:** ")
        entries.extend(format_skill(skill) for skill in record.active_skills)

    if features.passive_skills and record.passive_skills:
        entries.append("**Passive Skills:** ")
        entries.extend(format_passive_skill(skill) for skill in record.passive_skills)

    if features.bound_items and record.bound_items:
        entries.append("**Bound Items:**")
        entries.extend(format_bound_item(item) for item in record.bound_items)

    # Every entry but the closing fence is followed by a blank line
    lines: list[str] = []
    for entry in entries:
        lines.extend((entry, ""))
    lines.append(FENCE)
    return "\n".join(lines)


def format_status_screens(
    main: tuple[CharacterRecord, CharacterSheet],
    companion: tuple[CharacterRecord, CharacterSheet] | None = None,
    features: FeatureSettings | None = None,
) -> str:
    """Render the main character's screen followed by the companion's.

    Args:
        main: The main character's record and sheet.
        companion: The companion's record and sheet; skipped when absent
            or unnamed.
        features: Sections to include; defaults to the configured ones.

    Returns:
        Both screens separated by a blank line.
    """
    screen = format_status_screen(*main, features=features)
    if companion is None or not companion[0].name:
        return screen
    return f"{screen}\n\n{format_status_screen(*companion, features=features)}"


__all__ = [
    "format_skill",
    "format_passive_skill",
    "format_bound_item",
    "format_status_screen",
    "format_status_screens",
]
