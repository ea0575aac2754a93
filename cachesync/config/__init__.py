"""
cachesync - Configuration Module

Provides typed configuration loading and validation.
"""

from .loader import configure_logging, get_config, load_config, reload_config, reset_config
from .schemas import (
    ChannelSyncConfig,
    EntityKind,
    Environment,
    LogLevel,
    SyncConfig,
)

__all__ = [
    # Loader functions
    "load_config",
    "get_config",
    "reload_config",
    "reset_config",
    "configure_logging",
    # Main config
    "SyncConfig",
    # Enums
    "Environment",
    "LogLevel",
    "EntityKind",
    # Config sections
    "ChannelSyncConfig",
]
