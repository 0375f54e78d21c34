"""Exceptions for ruled-table."""

from typing import Any

# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class RuledTableError(Exception):
    """
    Base exception for all ruled-table errors.

    All exceptions raised by this library inherit from this class,
    allowing callers to catch all library-specific errors with a single
    except clause.
    """

    pass


# ---------------------------------------------------------------------------
# Category Exceptions
# ---------------------------------------------------------------------------


class ConfigurationError(RuledTableError):
    """
    Base exception for printer configuration errors.

    Raised synchronously by setters and builder methods, never at print time.
    """

    pass


# ---------------------------------------------------------------------------
# Configuration Exceptions
# ---------------------------------------------------------------------------


class ValidationError(ConfigurationError, ValueError):
    """
    Raised when a configuration value is rejected.

    Also a ``ValueError`` so callers validating plain input can catch it
    without importing this module.

    Attributes:
        field: Name of the configuration field
        value: The rejected value
        reason: Human-readable explanation
    """

    def __init__(self, field: str, value: Any, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field} {value!r}: {reason}")


# ---------------------------------------------------------------------------
# Extraction Exceptions
# ---------------------------------------------------------------------------


class ExtractionError(RuledTableError):
    """
    Raised when values cannot be pulled out of a record.

    The original exception is kept on ``cause`` and chained as ``__cause__``.
    """

    def __init__(self, record: Any, cause: BaseException | str) -> None:
        self.record = record
        self.cause = cause
        super().__init__(
            f"Cannot extract columns from {type(record).__name__} record: {cause}"
        )
