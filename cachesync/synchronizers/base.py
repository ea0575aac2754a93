"""
cachesync - Synchronizer Building Blocks

Shared pieces every synchronizer is composed from:

- Synchronizer: the protocol applications program against
- HandlerTable: the explicit event-name -> handler registration table a
  synchronizer owns; attach and detach walk the same tuple, so the exact
  callables handed to ``client.on`` are the ones handed to ``client.off``
"""

import logging
from collections.abc import Iterable
from typing import Any, Protocol, runtime_checkable

from ..cache.interface import SupportsCache
from ..client import Handler, RealtimeClient
from ..events import GatewayEvent

logger = logging.getLogger(__name__)


@runtime_checkable
class Synchronizer(Protocol):
    """Lifecycle surface shared by all synchronizers."""

    cache: SupportsCache[Any]
    client: RealtimeClient

    @property
    def closed(self) -> bool: ...

    async def close(self) -> None: ...


class HandlerTable:
    """
    Registration table of (event, handler) pairs owned by one synchronizer.

    Handlers are captured once at construction. Bound methods are created
    anew on every attribute access, so storing them here is what makes
    ``off`` receive the identical objects ``on`` did.
    """

    def __init__(self, owner: str, bindings: Iterable[tuple[GatewayEvent, Handler]]):
        self.owner = owner
        self._bindings: tuple[tuple[GatewayEvent, Handler], ...] = tuple(bindings)
        self._attached = False

    @property
    def attached(self) -> bool:
        return self._attached

    @property
    def events(self) -> list[str]:
        return [event.value for event, _ in self._bindings]

    def bindings(self) -> tuple[tuple[GatewayEvent, Handler], ...]:
        return self._bindings

    def attach(self, client: RealtimeClient) -> None:
        """
        Subscribe every handler on ``client``.

        If subscribing fails partway, the handlers already subscribed are
        removed again before the error propagates.
        """
        if self._attached:
            return

        done: list[tuple[GatewayEvent, Handler]] = []
        try:
            for event, handler in self._bindings:
                client.on(event.value, handler)
                done.append((event, handler))
        except BaseException:
            for event, handler in reversed(done):
                try:
                    client.off(event.value, handler)
                except Exception:
                    logger.warning(
                        "Failed to remove %s handler for %s while rolling back",
                        event.value,
                        self.owner,
                        extra={"synchronizer": self.owner, "event": event.value},
                        exc_info=True,
                    )
            raise

        self._attached = True
        logger.debug(
            "Attached %d handler(s) for %s",
            len(self._bindings),
            self.owner,
            extra={"synchronizer": self.owner, "events": self.events},
        )

    def detach(self, client: RealtimeClient) -> None:
        """Unsubscribe every handler from ``client`` using the stored references."""
        if not self._attached:
            return

        for event, handler in self._bindings:
            client.off(event.value, handler)

        self._attached = False
        logger.debug(
            "Detached %d handler(s) for %s",
            len(self._bindings),
            self.owner,
            extra={"synchronizer": self.owner, "events": self.events},
        )
