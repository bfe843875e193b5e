"""Custom exceptions for DynaQuery.

Errors raised by the store transport (botocore's ``ClientError`` and
friends) are never wrapped here: they reach the caller unchanged.
"""

from typing import Any, Dict


class DynaQueryError(Exception):
    """Base exception for all DynaQuery errors.

    Attributes:
        message: Error message
        details: Additional error context as key-value pairs
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        """Initialize exception with message and additional details.

        Args:
            message: Human-readable error message
            **kwargs: Additional context (e.g., operation, table_name, index_name)
        """
        self.message = message
        self.details: Dict[str, Any] = kwargs
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the complete error message with details."""
        if not self.details:
            return self.message

        details_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
        if self.message:
            return f"{self.message} ({details_str})"
        return details_str

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# Query exceptions
class UnsupportedOperationError(DynaQueryError, NotImplementedError):
    """Raised when an operation has no DynamoDB counterpart.

    Covers aggregates (sum, average, min, max, interval, range), offset,
    whole-query negation and conditions without an operator (negated
    set membership, negated range).

    Example:
        >>> raise UnsupportedOperationError("DynamoDB does not provide sum", operation="sum")
    """

    @property
    def operation(self) -> Any:
        return self.details.get("operation")


# Configuration exceptions
class ConfigurationError(DynaQueryError):
    """Raised when configuration is invalid or missing.

    Example:
        >>> raise ConfigurationError("Invalid configuration", setting="AWS_REGION", value="")
    """


class MissingConfigError(ConfigurationError):
    """Raised when required configuration values are not set.

    Example:
        >>> raise MissingConfigError("Configuration not set", config_key="AWS_REGION")
    """


# Schema exceptions
class SchemaError(DynaQueryError):
    """Base exception for table schema introspection errors."""


class TableNotFoundError(SchemaError):
    """Raised when the table cannot be described.

    Example:
        >>> raise TableNotFoundError("Table not found", table_name="articles")
    """


class IndexNotFoundError(SchemaError):
    """Raised when a query names an index the table does not have.

    Example:
        >>> raise IndexNotFoundError("Index not found", table_name="articles", index_name="by_author")
    """


class InvalidConditionError(DynaQueryError, ValueError):
    """Raised when a condition call carries no column/value pair.

    Example:
        >>> raise InvalidConditionError("A condition needs at least one column=value pair")
    """
