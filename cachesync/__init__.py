"""
cachesync - Event-Driven Cache Synchronization

Keeps application-supplied caches consistent with the entity lifecycle events
of a realtime gateway client.

Usage:
    from cachesync import UserSynchronizer

    users = UserSynchronizer(user_cache, client)
    ...
    await users.close()
"""

__version__ = "1.0.0"

from .cache import CacheInterface, SupportsCache, close_cache
from .client import RealtimeClient
from .entities import ChannelType
from .errors import (
    CacheSyncError,
    ConfigurationError,
    SynchronizerCloseError,
    SynchronizerError,
    SynchronizerNotFoundError,
    UnknownEntityKindError,
)
from .events import GatewayEvent
from .factory import (
    close_all_synchronizers,
    create_synchronizer,
    create_synchronizers,
    get_synchronizer,
    list_synchronizers,
    reset_synchronizer_registry,
)
from .keys import ChannelFilter, entity_id, member_key
from .synchronizers import (
    ChannelSynchronizer,
    GuildSynchronizer,
    MemberSynchronizer,
    RoleSynchronizer,
    Synchronizer,
    UserSynchronizer,
)

__all__ = [
    # Cache contract
    "CacheInterface",
    "SupportsCache",
    "close_cache",
    # Client boundary
    "RealtimeClient",
    "GatewayEvent",
    # Synchronizers
    "Synchronizer",
    "UserSynchronizer",
    "ChannelSynchronizer",
    "MemberSynchronizer",
    "GuildSynchronizer",
    "RoleSynchronizer",
    # Keys
    "ChannelFilter",
    "ChannelType",
    "entity_id",
    "member_key",
    # Factory
    "create_synchronizer",
    "create_synchronizers",
    "get_synchronizer",
    "list_synchronizers",
    "close_all_synchronizers",
    "reset_synchronizer_registry",
    # Errors
    "CacheSyncError",
    "ConfigurationError",
    "SynchronizerError",
    "SynchronizerNotFoundError",
    "SynchronizerCloseError",
    "UnknownEntityKindError",
]
