"""Custom exception hierarchy for the SW5E character manager.

All exceptions inherit from Sw5eManagerError, enabling unified error
handling at the application boundary while preserving domain-specific
context in a ``details`` mapping.

Missing reference data (an unknown class, archetype or power name) is not
an exception in this package: it is reported through logging and dropped.
Exceptions are reserved for configuration mistakes and corrupt rule tables.

Example:
    >>> from sw5e_manager.core.exceptions import RuleTableError
    >>> raise RuleTableError("Missing level row", rule_name="Consular", level=21)
"""

from __future__ import annotations

from typing import Any


class Sw5eManagerError(Exception):
    """Base exception for all SW5E manager errors.

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
        """Return a detailed string representation of the exception.

        Returns:
            String representation suitable for debugging.
        """
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationError(Sw5eManagerError):
    """Raised when application configuration is invalid."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

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
# Reference Data Exceptions
# =============================================================================


class ReferenceDataError(Sw5eManagerError):
    """Base exception for problems with static rule data.

    Class, archetype and power tables are loaded elsewhere and trusted.
    Subclasses signal that the trusted data turned out to be corrupt.
    """


class RuleTableError(ReferenceDataError):
    """Raised when a level-indexed rule table lacks a required row or column.

    Class and archetype tables are expected to cover levels 1-20. A gap
    means the reference data is broken, not that the user did something
    wrong, so the calculation stops instead of guessing.
    """

    def __init__(
        self,
        message: str,
        *,
        rule_name: str | None = None,
        level: int | None = None,
        column: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize rule table error with table context.

        Args:
            message: Human-readable error description.
            rule_name: Name of the class or archetype owning the table.
            level: Level row that was requested.
            column: Column (field name) that was requested.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if rule_name:
            combined_details["rule_name"] = rule_name
        if level is not None:
            combined_details["level"] = level
        if column:
            combined_details["column"] = column
        super().__init__(message, details=combined_details)


__all__ = [
    "Sw5eManagerError",
    "ConfigurationError",
    "ReferenceDataError",
    "RuleTableError",
]
