"""Exception hierarchy for the status screen stat engine.

Stat resolution itself never raises: lookup misses degrade to neutral
values. Exceptions are reserved for the edges of the library, where a
caller hands in malformed data, a stale result, or broken configuration.
All exceptions inherit from StatusScreenError so callers can catch them at
a single boundary.

Example:
    >>> from status_screen.core.exceptions import ValidationError
    >>> raise ValidationError("Invalid character record", field_name="level")
"""

from __future__ import annotations

from typing import Any


def _with_context(details: dict[str, Any] | None, **context: Any) -> dict[str, Any]:
    """Merge keyword context into ``details``, skipping values left as None."""
    merged = dict(details or {})
    merged.update({key: value for key, value in context.items() if value is not None})
    return merged


class StatusScreenError(Exception):
    """Base exception for all status screen errors.

    Attributes:
        message: Human-readable error description.
        details: Structured context, rendered after the message.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(str(self))

    def __str__(self) -> str:
        if not self.details:
            return self.message
        rendered = ", ".join(f"{key}={value!r}" for key, value in self.details.items())
        return f"{self.message} [{rendered}]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Input Exceptions
# =============================================================================


class ConfigurationError(StatusScreenError):
    """Settings could not be loaded, or bond sync rules conflict.

    ``config_key`` names the offending setting, e.g. ``sync_rules``.
    """

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details=_with_context(details, config_key=config_key))


class ValidationError(StatusScreenError):
    """A character record does not match the schema.

    Raised by ``load_character``, wrapping the underlying Pydantic error.
    ``field_name`` is the dotted location of the first failing field.
    """

    def __init__(
        self,
        message: str,
        *,
        field_name: str | None = None,
        invalid_value: Any | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message,
            details=_with_context(details, field_name=field_name, invalid_value=invalid_value),
        )


# =============================================================================
# Engine Exceptions
# =============================================================================


class EngineError(StatusScreenError):
    """A stat engine call was made with inputs that break its contract."""


class StaleResultError(EngineError):
    """A snapshot was requested from a result of another record state.

    Snapshot stats and ledger must describe the same record. A result
    resolved before an edit carries the fingerprint of the old record and is
    rejected.

    Attributes:
        details: Holds ``expected_fingerprint`` (the record's) and
            ``actual_fingerprint`` (the result's).
    """

    def __init__(
        self,
        message: str,
        *,
        expected_fingerprint: str | None = None,
        actual_fingerprint: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message,
            details=_with_context(
                details,
                expected_fingerprint=expected_fingerprint,
                actual_fingerprint=actual_fingerprint,
            ),
        )


__all__ = [
    "StatusScreenError",
    "ConfigurationError",
    "ValidationError",
    "EngineError",
    "StaleResultError",
]
