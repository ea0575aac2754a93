"""
cachesync - User Synchronizer

Mirrors user updates into a cache keyed by user id.
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


class UserSynchronizer(Generic[V]):
    """
    Keeps a user cache in sync with ``userUpdate`` events.

    Read entries back with ``cache.get(str(user.id))``.
    """

    def __init__(self, cache: SupportsCache[V], client: RealtimeClient):
        self.cache = cache
        self.client = client
        self._handlers = HandlerTable(
            "UserSynchronizer",
            [(GatewayEvent.USER_UPDATE, self._on_user_update)],
        )
        self._handlers.attach(client)

    @property
    def closed(self) -> bool:
        return not self._handlers.attached

    def key_for(self, user: Any) -> str:
        return entity_id(user)

    def _on_user_update(self, user: V, *_: Any) -> Any:
        return self.cache.set(self.key_for(user), user)

    async def close(self) -> None:
        """Detach from the client, then close the cache."""
        if self.closed:
            logger.debug("UserSynchronizer already closed")
            return
        self._handlers.detach(self.client)
        await close_cache(self.cache)
