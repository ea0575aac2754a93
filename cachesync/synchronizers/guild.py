"""
cachesync - Guild Synchronizer

Mirrors guild create/update/delete events into a cache keyed by guild id.
"""

import logging
from typing import Any, Generic, TypeVar

from ..cache.interface import SupportsCache, close_cache
from ..client import RealtimeClient
from ..events import GatewayEvent
from ..keys import entity_id
from .base import HandlerTable

logger = logging.getLogger(__name__)

V = TypeVar("V")


class GuildSynchronizer(Generic[V]):
    """Keeps a guild cache in sync with guild lifecycle events."""

    def __init__(self, cache: SupportsCache[V], client: RealtimeClient):
        self.cache = cache
        self.client = client
        self._handlers = HandlerTable(
            "GuildSynchronizer",
            [
                (GatewayEvent.GUILD_CREATE, self._on_guild_set),
                (GatewayEvent.GUILD_UPDATE, self._on_guild_set),
                (GatewayEvent.GUILD_DELETE, self._on_guild_delete),
            ],
        )
        self._handlers.attach(client)

    @property
    def closed(self) -> bool:
        return not self._handlers.attached

    def key_for(self, guild: Any) -> str:
        return entity_id(guild)

    def _on_guild_set(self, guild: V, *_: Any) -> Any:
        return self.cache.set(self.key_for(guild), guild)

    def _on_guild_delete(self, guild: V, *_: Any) -> Any:
        return self.cache.delete(self.key_for(guild))

    async def close(self) -> None:
        """Detach from the client, then close the cache."""
        if self.closed:
            logger.debug("GuildSynchronizer already closed")
            return
        self._handlers.detach(self.client)
        await close_cache(self.cache)
