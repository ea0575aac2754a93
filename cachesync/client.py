"""
cachesync - Realtime Client Boundary

The only part of the realtime client the synchronizers touch: subscribing and
unsubscribing handlers by event name.
"""

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

Handler = Callable[..., Any]


@runtime_checkable
class RealtimeClient(Protocol):
    """
    An event emitter keyed by event name.

    ``off`` must remove the handler that is identical (or equal) to the one
    passed to ``on``; removing a handler that is not registered is a no-op.
    """

    def on(self, event: str, handler: Handler) -> Any: ...

    def off(self, event: str, handler: Handler) -> Any: ...
