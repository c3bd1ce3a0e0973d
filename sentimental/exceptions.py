"""
Error hierarchy for the sentiment scorer.

Scoring never raises for unknown input; these are only raised while
registering patterns, loading dictionaries or reading configuration.
"""

from typing import Any, Optional


class SentimentalError(Exception):
    """Base exception for all scorer errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class InvalidPatternError(SentimentalError, ValueError):
    """A neutral pattern could not be compiled."""

    def __init__(self, pattern: Any, reason: str) -> None:
        super().__init__(f"invalid neutral pattern {pattern!r}: {reason}",
                         {"pattern": str(pattern)})
        self.pattern = pattern
        self.reason = reason


class LoadError(SentimentalError):
    """A dictionary source is missing or malformed."""

    def __init__(
        self,
        message: str,
        source: str = "",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, details)
        self.source = source

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["source"] = self.source
        return data


class ConfigError(SentimentalError, ValueError):
    """A configuration value is out of range or of the wrong type."""

    def __init__(self, key: str, value: Any, reason: str) -> None:
        super().__init__(f"bad config value for {key!r} ({value!r}): {reason}",
                         {"key": key, "value": repr(value)})
        self.key = key
        self.value = value
