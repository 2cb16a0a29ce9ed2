"""Status Screen - stat engine for a LitRPG story tracker.

Resolves a character's displayed stats from growth tables, free points,
traits, titles, stat boosts and derivations layered on top of immutable
level snapshots, and renders the status screen pasted into each chapter.

ENGINE RULES:
- The engine is pure: a Character Record goes in, a StatResult comes out
- Snapshots bake bonuses into their stats; a ledger records what was baked
- Bond shares are displayed, never stored

Example:
    >>> from status_screen import load_character, resolve_stats, capture_snapshot
    >>>
    >>> record = load_character(open("alex.json").read())
    >>> result = resolve_stats(record)
    >>> result.stats[Stat.STRENGTH]
    42
    >>>
    >>> # Freeze the current level as the new baseline
    >>> record = record_snapshot(record, capture_snapshot(record, result))

Modules:
    core: Configuration, logging, constants and exceptions.
    models: Pydantic V2 schemas for records and results.
    engine: Growth, traits, bonuses, ledger netting, derivations, bond sync.
    export: Status screen and breakdown text.
"""

from __future__ import annotations

# Core
from status_screen.core.config import Settings, get_settings
from status_screen.core.exceptions import StaleResultError, StatusScreenError
from status_screen.core.logging import configure_logging, get_logger

# Models
from status_screen.models import (
    CharacterRecord,
    CharacterSheet,
    DerivedResources,
    Snapshot,
    Stat,
    StatBreakdown,
    StatResult,
    load_character,
)

# Engine
from status_screen.engine import (
    build_sheet,
    calculate_resources,
    capture_snapshot,
    record_snapshot,
    resolve_bonded_pair,
    resolve_stats,
)

# Export
from status_screen.export import breakdown_text, format_status_screen, format_status_screens


__version__ = "0.1.0"
__all__ = [
    # Version info
    "__version__",
    # Core
    "StatusScreenError",
    "StaleResultError",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Models
    "Stat",
    "CharacterRecord",
    "Snapshot",
    "StatResult",
    "StatBreakdown",
    "DerivedResources",
    "CharacterSheet",
    "load_character",
    # Engine
    "resolve_stats",
    "calculate_resources",
    "capture_snapshot",
    "record_snapshot",
    "build_sheet",
    "resolve_bonded_pair",
    # Export
    "format_status_screen",
    "format_status_screens",
    "breakdown_text",
]
