"""
Structured error types for fungi.

fungi treats expected failures as values (see ``fungi.either``). The
exceptions in this module cover the other case: a caller breaking a
precondition of a library function, such as asking ``take`` for a negative
number of draws. They carry enough metadata to be logged as structured
events or serialized inside an ``Err``.

Manifesto:
    - **One base class:** Every library-raised error is a FungiError
    - **Categorized:** ErrorCategory says what kind of mistake happened
    - **Stdlib-compatible:** ValidationError is also a ValueError, so
      existing ``except ValueError`` handlers keep working
    - **Serializable:** to_dict() feeds structlog and Err.to_dict()

Architecture:
    ::

        ┌──────────────────────────────────────────────┐
        │                 FungiError                    │
        │   (message, category, context, cause)         │
        ├──────────────────────────────────────────────┤
        │  ValidationError (VALIDATION, ValueError)     │
        │       │                                       │
        │  InvalidCountError                            │
        └──────────────────────────────────────────────┘

Examples:
    >>> from fungi.errors import InvalidCountError
    >>> err = InvalidCountError(-1)
    >>> err.category.value
    'VALIDATION'
    >>> isinstance(err, ValueError)
    True

Tags:
    errors, exceptions, validation, fungi

Doc-Types:
    - API Reference
    - Error Handling Guide
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """
    Standard categories for classifying errors.

    Attributes:
        VALIDATION: A caller passed an argument that breaks a precondition
        INTERNAL: Unexpected state inside the library
        UNKNOWN: Anything that is not a FungiError and has no better mapping
    """

    VALIDATION = "VALIDATION"
    INTERNAL = "INTERNAL"
    UNKNOWN = "UNKNOWN"


class FungiError(Exception):
    """
    Base exception for all errors raised by fungi.

    Subclasses set ``default_category``. Extra metadata goes into
    ``context`` either at construction time or through the fluent
    ``with_context()``.

    Examples:
        >>> error = FungiError("Something went wrong")
        >>> error.category
        <ErrorCategory.INTERNAL: 'INTERNAL'>

        >>> error = FungiError("bad input").with_context(argument="count")
        >>> error.context
        {'argument': 'count'}

        >>> FungiError("boom", category=ErrorCategory.VALIDATION).to_dict()["category"]
        'VALIDATION'
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = dict(context) if context else {}
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> FungiError:
        """Add context to this error (fluent API)."""
        self.context.update(kwargs)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        if self.context:
            result["context"] = dict(self.context)
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


class ValidationError(FungiError, ValueError):
    """An argument broke a documented precondition."""

    default_category = ErrorCategory.VALIDATION


class InvalidCountError(ValidationError):
    """``take`` was asked for a count that is not a non-negative int."""

    def __init__(self, count: Any, message: str | None = None):
        super().__init__(
            message or f"count must be a non-negative int, got {count!r}",
            context={"count": count},
        )
        self.count = count


def categorize_error(error: Exception) -> ErrorCategory:
    """Get the category of an error."""
    if isinstance(error, FungiError):
        return error.category
    if isinstance(error, (ValueError, TypeError)):
        return ErrorCategory.VALIDATION
    return ErrorCategory.UNKNOWN


__all__ = [
    "ErrorCategory",
    "FungiError",
    "ValidationError",
    "InvalidCountError",
    "categorize_error",
]
