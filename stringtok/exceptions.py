"""
stringtok Exceptions.

Exception Hierarchy:
    StringtokError (base)
    ├── InvalidInputError
    ├── MatcherConfigurationError
    └── InternalInvariantError

Usage:
    from stringtok.exceptions import InvalidInputError

    try:
        tokens = tokenize(text=payload)
    except InvalidInputError:
        # Caller passed something that is not text
"""

from typing import Optional

__all__ = [
    "StringtokError",
    "InvalidInputError",
    "MatcherConfigurationError",
    "InternalInvariantError",
]


class StringtokError(Exception):
    """
    Base exception for all stringtok errors.

    Carries an optional ``details`` dict so callers can inspect what was
    rejected without parsing the message.
    """

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message


class InvalidInputError(StringtokError):
    """Input text or a configuration value has the wrong type."""

    def __init__(self, message: str, field: Optional[str] = None, **kwargs):
        super().__init__(message, kwargs)
        self.field = field


class MatcherConfigurationError(StringtokError):
    """
    Matcher set cannot be used.

    Raised when a matcher is not a pattern, does not compile, or when an
    enabled token type has no matcher to produce it.
    """

    def __init__(self, message: str, matcher: Optional[str] = None, **kwargs):
        super().__init__(message, kwargs)
        self.matcher = matcher


class InternalInvariantError(StringtokError):
    """The scanner broke one of its own guarantees."""
    pass
