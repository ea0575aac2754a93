"""
cachesync - Configuration Schemas

Typed configuration models using Pydantic for validation.
All configuration is defined here and validated when loaded.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..entities import ChannelType


class Environment(str, Enum):
    """Runtime environment."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TEST = "test"


class LogLevel(str, Enum):
    """Log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class EntityKind(str, Enum):
    """Entity types a synchronizer can be built for."""

    USER = "user"
    CHANNEL = "channel"
    MEMBER = "member"
    GUILD = "guild"
    ROLE = "role"


def _parse_channel_type(value: Any) -> int:
    if isinstance(value, int):
        code = int(value)
    else:
        text = str(value).strip()
        if text.lstrip("-").isdigit():
            code = int(text)
        else:
            try:
                code = ChannelType[text.upper()].value
            except KeyError:
                raise ValueError(f"unknown channel type: {text!r}") from None
    if code < 0:
        raise ValueError(f"channel type codes must be non-negative, got {code}")
    return code


class ChannelSyncConfig(BaseModel):
    """Channel synchronizer configuration. Frozen: the filter never changes after load."""

    allowed_types: frozenset[int] | None = Field(
        default=None,
        description="Channel type codes to mirror (None = all types)",
    )

    model_config = ConfigDict(frozen=True)

    @field_validator("allowed_types", mode="before")
    @classmethod
    def normalize_allowed_types(cls, v: Any) -> frozenset[int] | None:
        """Accept a comma list, names or ints; normalize to a frozenset of codes."""
        if v is None:
            return None
        if isinstance(v, str):
            items = [part for part in (p.strip() for p in v.split(",")) if part]
            if not items:
                return None
        else:
            items = list(v)
        return frozenset(_parse_channel_type(item) for item in items)


class SyncConfig(BaseModel):
    """Root configuration for cachesync."""

    environment: Environment = Field(default=Environment.DEVELOPMENT, description="Runtime environment")
    log_level: LogLevel = Field(default=LogLevel.INFO, description="Logging level")

    enabled: list[EntityKind] = Field(
        default_factory=lambda: list(EntityKind),
        description="Entity kinds to build synchronizers for",
    )
    channel: ChannelSyncConfig = Field(default_factory=ChannelSyncConfig)

    @field_validator("enabled", mode="before")
    @classmethod
    def parse_enabled(cls, v: Any) -> Any:
        """Accept a comma-separated string of kinds; drop duplicates, keep order."""
        if isinstance(v, str):
            v = [part.strip().lower() for part in v.split(",") if part.strip()]
        seen: list[Any] = []
        for item in v:
            if item not in seen:
                seen.append(item)
        return seen

    model_config = ConfigDict(validate_assignment=True)
