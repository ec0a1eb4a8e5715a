"""Custom exception hierarchy for the D&D 5E character-creation engine.

Player mistakes are never raised: they are collected into validation
results. The exceptions here signal programmer or content errors, such as
a malformed prepared-spell formula in class data or a level below 1 passed
to the proficiency table. All of them inherit from DndChargenError so
callers can catch engine failures at a single boundary.

Example:
    >>> from dnd_chargen.core.exceptions import FormulaError
    >>> raise FormulaError("Unknown token", formula="WIS_MOD + XP")
"""

from __future__ import annotations

from typing import Any


class DndChargenError(Exception):
    """Base exception for all character-creation engine errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationError(DndChargenError):
    """Raised when engine settings are missing or invalid."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with the offending key.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


# =============================================================================
# Content Exceptions
# =============================================================================


class ContentError(DndChargenError):
    """Raised when reference content cannot be indexed.

    Content is assumed structurally valid once loaded, so this only fires
    while a catalog is being built (for example on duplicate identifiers).
    """

    def __init__(
        self,
        message: str,
        *,
        content_id: str | None = None,
        collection: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize content error with catalog context.

        Args:
            message: Human-readable error description.
            content_id: Identifier of the offending record.
            collection: Name of the catalog being built.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if content_id:
            combined_details["content_id"] = content_id
        if collection:
            combined_details["collection"] = collection
        super().__init__(message, details=combined_details)


# =============================================================================
# Rule Engine Exceptions
# =============================================================================


class RuleEngineError(DndChargenError):
    """Base exception for rule-engine contract failures."""


class FormulaError(RuleEngineError):
    """Raised when a prepared-spell formula cannot be resolved."""

    def __init__(
        self,
        message: str,
        *,
        formula: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize formula error with the source text.

        Args:
            message: Human-readable error description.
            formula: The formula text that failed to resolve.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if formula is not None:
            combined_details["formula"] = formula
        super().__init__(message, details=combined_details)


class LevelOutOfRangeError(RuleEngineError):
    """Raised when a level-indexed table is queried below level 1."""

    def __init__(
        self,
        message: str,
        *,
        level: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        combined_details = details or {}
        if level is not None:
            combined_details["level"] = level
        super().__init__(message, details=combined_details)


class PointBuyError(RuleEngineError):
    """Raised when a point-buy cost is requested for a score outside 8-15."""

    def __init__(
        self,
        message: str,
        *,
        score: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        combined_details = details or {}
        if score is not None:
            combined_details["score"] = score
        super().__init__(message, details=combined_details)


class DiceRollError(RuleEngineError):
    """Raised when a hit-die roll cannot be performed."""

    def __init__(
        self,
        message: str,
        *,
        expression: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize dice roll error with the expression context.

        Args:
            message: Human-readable error description.
            expression: The dice expression that failed.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if expression:
            combined_details["expression"] = expression
        super().__init__(message, details=combined_details)


__all__ = [
    "DndChargenError",
    "ConfigurationError",
    "ContentError",
    "RuleEngineError",
    "FormulaError",
    "LevelOutOfRangeError",
    "PointBuyError",
    "DiceRollError",
]
