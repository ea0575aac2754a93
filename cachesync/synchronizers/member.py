"""
cachesync - Member Synchronizer

Mirrors guild member events into a cache keyed by ``"<guild_id>:<member_id>"``.
"""

import logging
from collections.abc import Iterable
from functools import partial
from typing import Any, Generic, TypeVar

from ..cache.interface import SupportsCache, apply_in_order, close_cache
from ..client import RealtimeClient
from ..events import GatewayEvent
from ..keys import member_key
from .base import HandlerTable

logger = logging.getLogger(__name__)

V = TypeVar("V")


class MemberSynchronizer(Generic[V]):
    """
    Keeps a member cache in sync with guild member events.

    Members have no snowflake of their own within the cache namespace, so read
    entries back with::

        cache.get(f"{guild.id}:{member.id}")

    Chunk events are stored member by member, in the order delivered.
    """

    def __init__(self, cache: SupportsCache[V], client: RealtimeClient):
        self.cache = cache
        self.client = client
        self._handlers = HandlerTable(
            "MemberSynchronizer",
            [
                (GatewayEvent.GUILD_MEMBER_ADD, self._on_member_set),
                (GatewayEvent.GUILD_MEMBER_UPDATE, self._on_member_set),
                (GatewayEvent.GUILD_MEMBER_CHUNK, self._on_member_chunk),
                (GatewayEvent.GUILD_MEMBER_REMOVE, self._on_member_remove),
            ],
        )
        self._handlers.attach(client)

    @property
    def closed(self) -> bool:
        return not self._handlers.attached

    def key_for(self, guild: Any, member: Any) -> str:
        return member_key(guild, member)

    def _on_member_set(self, guild: Any, member: V, *_: Any) -> Any:
        return self.cache.set(self.key_for(guild, member), member)

    def _on_member_chunk(self, guild: Any, members: Iterable[V], *_: Any) -> Any:
        return apply_in_order(
            partial(self.cache.set, self.key_for(guild, member), member) for member in members
        )

    def _on_member_remove(self, guild: Any, member: V, *_: Any) -> Any:
        return self.cache.delete(self.key_for(guild, member))

    async def close(self) -> None:
        """Detach from the client, then close the cache."""
        if self.closed:
            logger.debug("MemberSynchronizer already closed")
            return
        self._handlers.detach(self.client)
        await close_cache(self.cache)
