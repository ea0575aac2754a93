"""
cachesync - Core Error Types

Defines the exception hierarchy for the synchronization layer.
All exceptions raised by cachesync itself inherit from CacheSyncError.

Errors raised by a cache implementation inside an event handler are NOT
wrapped: they propagate unchanged to whatever delivered the event.
"""

from typing import Any


class CacheSyncError(Exception):
    """Base exception for all cachesync errors."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for structured logging."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(CacheSyncError):
    """Raised when configuration is invalid or missing."""

    pass


class SynchronizerError(CacheSyncError):
    """Base exception for synchronizer lifecycle errors."""

    pass


class UnknownEntityKindError(SynchronizerError):
    """Raised when asked to build a synchronizer for an unsupported entity kind."""

    def __init__(self, kind: str, supported: list[str] | None = None):
        message = f"Unknown entity kind: {kind}"
        super().__init__(message, {"kind": kind, "supported": supported or []})
        self.kind = kind


class SynchronizerNotFoundError(SynchronizerError):
    """Raised when a named synchronizer is not registered."""

    def __init__(self, name: str):
        message = f"Synchronizer not found: {name}"
        super().__init__(message, {"name": name})
        self.name = name


class SynchronizerCloseError(SynchronizerError):
    """Raised after a bulk close when one or more synchronizers failed to close."""

    def __init__(self, failures: dict[str, BaseException]):
        names = ", ".join(sorted(failures))
        message = f"Failed to close {len(failures)} synchronizer(s): {names}"
        super().__init__(
            message,
            {"failures": {name: str(err) for name, err in failures.items()}},
        )
        self.failures = failures
