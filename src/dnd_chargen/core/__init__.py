"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        DndChargenError: Base exception for all engine errors.
        ConfigurationError: Configuration-related errors.
        ContentError: Catalog construction errors.
        RuleEngineError: Base for rule contract failures.
        FormulaError, LevelOutOfRangeError, PointBuyError, DiceRollError.

    Configuration:
        Settings, EngineSettings: Settings classes.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up logging.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        clear_context: Clear logging context.
        character_context: Tag entries with a character name.
"""

from __future__ import annotations

from dnd_chargen.core.config import (
    EngineSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from dnd_chargen.core.exceptions import (
    ConfigurationError,
    ContentError,
    DiceRollError,
    DndChargenError,
    FormulaError,
    LevelOutOfRangeError,
    PointBuyError,
    RuleEngineError,
)
from dnd_chargen.core.logging import (
    bind_context,
    character_context,
    clear_context,
    configure_logging,
    get_logger,
)


__all__ = [
    # Base exception
    "DndChargenError",
    # Configuration exceptions
    "ConfigurationError",
    # Content exceptions
    "ContentError",
    # Rule engine exceptions
    "RuleEngineError",
    "FormulaError",
    "LevelOutOfRangeError",
    "PointBuyError",
    "DiceRollError",
    # Configuration
    "Settings",
    "EngineSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "character_context",
    "get_logger",
    "bind_context",
    "clear_context",
]
