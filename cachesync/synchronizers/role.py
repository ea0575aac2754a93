"""
cachesync - Role Synchronizer

Mirrors guild role events into a cache keyed by role id.
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


class RoleSynchronizer(Generic[V]):
    """
    Keeps a role cache in sync with guild role events.

    Role ids are globally unique, so the guild delivered with each event is
    not part of the key.
    """

    def __init__(self, cache: SupportsCache[V], client: RealtimeClient):
        self.cache = cache
        self.client = client
        self._handlers = HandlerTable(
            "RoleSynchronizer",
            [
                (GatewayEvent.GUILD_ROLE_CREATE, self._on_role_set),
                (GatewayEvent.GUILD_ROLE_UPDATE, self._on_role_set),
                (GatewayEvent.GUILD_ROLE_DELETE, self._on_role_delete),
            ],
        )
        self._handlers.attach(client)

    @property
    def closed(self) -> bool:
        return not self._handlers.attached

    def key_for(self, role: Any) -> str:
        return entity_id(role)

    def _on_role_set(self, _guild: Any, role: V, *_: Any) -> Any:
        return self.cache.set(self.key_for(role), role)

    def _on_role_delete(self, _guild: Any, role: V, *_: Any) -> Any:
        return self.cache.delete(self.key_for(role))

    async def close(self) -> None:
        """Detach from the client, then close the cache."""
        if self.closed:
            logger.debug("RoleSynchronizer already closed")
            return
        self._handlers.detach(self.client)
        await close_cache(self.cache)
