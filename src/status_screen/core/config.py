"""Configuration management for the status screen stat engine.

This module provides centralized configuration using pydantic-settings,
supporting environment variables and .env files. Game rules are not
configurable (see ``core.constants``); configuration covers logging, the
bond between a main character and a companion, and which sections the
status screen export includes.

Example:
    >>> from status_screen.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.bond.enabled
    False

Environment Variables:
    STATUS_SCREEN_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    STATUS_SCREEN_LOG_JSON: Emit JSON log lines instead of console output
    STATUS_SCREEN_BOND_ENABLED: Enable bond sync between the two characters
    STATUS_SCREEN_BOND_SYNC_RULES: JSON list of sync rules
    STATUS_SCREEN_FEATURE_TITLES: Include titles in the export (and similar flags)
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel
from pydantic_settings import BaseSettings, SettingsConfigDict

from status_screen.core.constants import DEFAULT_BOND_FRACTION
from status_screen.core.exceptions import ConfigurationError
from status_screen.models.enums import Rounding, Stat


class BondSyncRule(BaseModel):
    """Shares a fraction of a partner's resolved stat with the receiver.

    Attributes:
        source_stat: Partner stat read.
        target_stat: Receiver stat the share is shown against.
        fraction: Share of the partner stat, in (0, 1].
        rounding: How the share is turned into whole points.

    Example:
        >>> BondSyncRule(source_stat=Stat.MANA, target_stat=Stat.MANA)
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )

    source_stat: Stat
    target_stat: Stat
    fraction: float = Field(default=DEFAULT_BOND_FRACTION, gt=0, le=1)
    rounding: Rounding = Rounding.FLOOR


class BondSettings(BaseSettings):
    """Configuration for the bond between the main character and a companion.

    Attributes:
        enabled: Whether bond sync rules are applied.
        sync_rules: Rules applied with the companion as partner of the main
            character.
        reverse_sync_rules: Rules applied with the main character as partner
            of the companion.
    """

    model_config = SettingsConfigDict(
        env_prefix="STATUS_SCREEN_BOND_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    enabled: bool = Field(
        default=False,
        description="Apply bond sync rules",
    )
    sync_rules: list[BondSyncRule] = Field(
        default_factory=list,
        description="Rules sharing companion stats with the main character",
    )
    reverse_sync_rules: list[BondSyncRule] = Field(
        default_factory=list,
        description="Rules sharing main character stats with the companion",
    )

    @model_validator(mode="after")
    def validate_unique_rules(self) -> "BondSettings":
        """Ensure no direction shares the same stat pair twice.

        Returns:
            Self if validation passes.

        Raises:
            ConfigurationError: If a (source, target) pair repeats.
        """
        for key, rules in (
            ("sync_rules", self.sync_rules),
            ("reverse_sync_rules", self.reverse_sync_rules),
        ):
            pairs = [(rule.source_stat, rule.target_stat) for rule in rules]
            if len(pairs) != len(set(pairs)):
                raise ConfigurationError(
                    "Bond sync rules share the same stat pair more than once",
                    config_key=key,
                )
        return self

    def active_rules(self) -> tuple[list[BondSyncRule], list[BondSyncRule]]:
        """Get the rules to apply in each direction.

        Returns:
            (rules for the main character, rules for the companion); both
            empty while the bond is disabled.
        """
        if not self.enabled:
            return [], []
        return list(self.sync_rules), list(self.reverse_sync_rules)


class FeatureSettings(BaseSettings):
    """Sections included in the exported status screen.

    Attributes:
        traits: Include the traits section.
        titles: Include the titles section.
        bond_skills: Include bond skills.
        active_skills: Include active skills.
        passive_skills: Include passive skills.
        bound_items: Include bound items.
    """

    model_config = SettingsConfigDict(
        env_prefix="STATUS_SCREEN_FEATURE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    traits: bool = Field(default=True, description="Export traits")
    titles: bool = Field(default=True, description="Export titles")
    bond_skills: bool = Field(default=True, description="Export bond skills")
    active_skills: bool = Field(default=True, description="Export active skills")
    passive_skills: bool = Field(default=True, description="Export passive skills")
    bound_items: bool = Field(default=True, description="Export bound items")


class Settings(BaseSettings):
    """Top-level settings: logging, bond rules and export sections.

    Attributes:
        app_name: Application name.
        app_version: Application version string.
        debug: Enable debug mode.
        log_level: Application logging level.
        log_json: Emit JSON log lines.
        bond: Bond sync settings.
        features: Export section toggles.
    """

    model_config = SettingsConfigDict(
        env_prefix="STATUS_SCREEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(
        default="Status Screen",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    log_json: bool = Field(
        default=False,
        description="Emit JSON log lines",
    )

    bond: BondSettings = Field(default_factory=BondSettings)
    features: FeatureSettings = Field(default_factory=FeatureSettings)

    @property
    def is_production(self) -> bool:
        """Whether debug mode is off."""
        return not self.debug


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings once and reuse them.

    Returns:
        The cached Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "BondSyncRule",
    "BondSettings",
    "FeatureSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
