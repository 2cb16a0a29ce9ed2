"""Character sheets: resolved stats, bond shares and derived resources.

Example:
    >>> from status_screen.core.config import get_settings
    >>> main_sheet, companion_sheet = resolve_bonded_pair(
    ...     main, companion, get_settings().bond
    ... )
    >>> main_sheet.displayed(Stat.MANA)
    42
"""

from __future__ import annotations

from collections.abc import Sequence

from status_screen.core.config import BondSettings, BondSyncRule
from status_screen.core.logging import get_logger
from status_screen.engine.bond import synchronize_bond
from status_screen.engine.composer import resolve_stats
from status_screen.engine.resources import calculate_resources
from status_screen.models.character import CharacterRecord
from status_screen.models.enums import Stat
from status_screen.models.results import CharacterSheet, StatResult


logger = get_logger(__name__)


def build_sheet(
    record: CharacterRecord,
    partner: StatResult | None = None,
    rules: Sequence[BondSyncRule] = (),
    *,
    result: StatResult | None = None,
) -> CharacterSheet:
    """Resolve a character and everything displayed alongside its stats.

    Args:
        record: The character record.
        partner: The bond partner's already-resolved stats, if any.
        rules: Sync rules sharing partner stats with this character.
        result: The character's own resolved stats, when already at hand.

    Returns:
        The character's sheet. Borrowed mana counts toward MP.
    """
    if result is None:
        result = resolve_stats(record)
    borrowed = synchronize_bond(partner.stats, rules) if partner is not None else {}
    resources = calculate_resources(
        result.stats, record, borrowed_mana=borrowed.get(Stat.MANA, 0)
    )
    return CharacterSheet(result=result, borrowed=borrowed, resources=resources)


def resolve_bonded_pair(
    main: CharacterRecord,
    companion: CharacterRecord,
    bond: BondSettings,
) -> tuple[CharacterSheet, CharacterSheet]:
    """Resolve a main character and companion with the bond applied both ways.

    Each side borrows from the other's own resolved stats, never from what
    the other side borrowed.

    Args:
        main: The main character's record.
        companion: The companion's record.
        bond: Bond settings supplying the rules for each direction.

    Returns:
        (main sheet, companion sheet).
    """
    main_rules, companion_rules = bond.active_rules()
    main_result = resolve_stats(main)
    companion_result = resolve_stats(companion)

    main_sheet = build_sheet(
        main, partner=companion_result, rules=main_rules, result=main_result
    )
    companion_sheet = build_sheet(
        companion, partner=main_result, rules=companion_rules, result=companion_result
    )

    logger.debug(
        "Bonded pair resolved",
        bond_enabled=bond.enabled,
        main_borrowed={stat.value: v for stat, v in main_sheet.borrowed.items()},
        companion_borrowed={stat.value: v for stat, v in companion_sheet.borrowed.items()},
    )
    return main_sheet, companion_sheet


__all__ = [
    "build_sheet",
    "resolve_bonded_pair",
]
