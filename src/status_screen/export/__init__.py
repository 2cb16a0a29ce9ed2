"""Text exports: the status screen and per-stat audit lines."""

from __future__ import annotations

from status_screen.export.breakdown import breakdown_text
from status_screen.export.status_screen import (
    format_bound_item,
    format_passive_skill,
    format_skill,
    format_status_screen,
    format_status_screens,
)


__all__ = [
    "breakdown_text",
    "format_skill",
    "format_passive_skill",
    "format_bound_item",
    "format_status_screen",
    "format_status_screens",
]
