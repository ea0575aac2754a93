"""
cachesync - Channel Synchronizer

Mirrors channel create/update/delete events into a cache keyed by channel id,
optionally restricted to a fixed set of channel types.
"""

import logging
from collections.abc import Iterable
from typing import Any, Generic, TypeVar

from ..cache.interface import SupportsCache, close_cache
from ..client import RealtimeClient
from ..events import GatewayEvent
from ..keys import ChannelFilter, entity_id
from .base import HandlerTable

logger = logging.getLogger(__name__)

V = TypeVar("V")


class ChannelSynchronizer(Generic[V]):
    """
    Keeps a channel cache in sync with channel lifecycle events.

    When ``allowed_types`` is given, events for channels whose ``type`` is not
    in the set are ignored entirely: they are neither stored nor removed. The
    filter is fixed at construction; to change it, close this synchronizer and
    create a new one. Entries cached before a type was excluded are left alone.
    """

    def __init__(
        self,
        cache: SupportsCache[V],
        client: RealtimeClient,
        allowed_types: Iterable[int] | ChannelFilter | None = None,
    ):
        self.cache = cache
        self.client = client
        self._filter = ChannelFilter.of(allowed_types)
        self._handlers = HandlerTable(
            "ChannelSynchronizer",
            [
                (GatewayEvent.CHANNEL_CREATE, self._on_channel_set),
                (GatewayEvent.CHANNEL_UPDATE, self._on_channel_set),
                (GatewayEvent.CHANNEL_DELETE, self._on_channel_delete),
            ],
        )
        self._handlers.attach(client)

    @property
    def allowed_types(self) -> frozenset[int] | None:
        return self._filter.allowed_types

    @property
    def channel_filter(self) -> ChannelFilter:
        return self._filter

    @property
    def closed(self) -> bool:
        return not self._handlers.attached

    def key_for(self, channel: Any) -> str:
        return entity_id(channel)

    def _on_channel_set(self, channel: V, *_: Any) -> Any:
        if not self._filter.allows(channel):
            return None
        return self.cache.set(self.key_for(channel), channel)

    def _on_channel_delete(self, channel: V, *_: Any) -> Any:
        if not self._filter.allows(channel):
            return None
        return self.cache.delete(self.key_for(channel))

    async def close(self) -> None:
        """Detach from the client, then close the cache."""
        if self.closed:
            logger.debug("ChannelSynchronizer already closed")
            return
        self._handlers.detach(self.client)
        await close_cache(self.cache)
