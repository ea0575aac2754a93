"""
cachesync - Cache Interface

Defines the contract every cache handed to a synchronizer must satisfy.

Each operation may complete synchronously or return an awaitable. Synchronizer
handlers return the result of the cache operation, so a synchronous cache is
updated before the handler returns and an async one hands back an awaitable
for the emitter to await or schedule. Keys are always strings, values are
opaque entity payloads.
"""

import inspect
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable, Iterable, Iterator
from typing import Any, Generic, Protocol, TypeVar

V = TypeVar("V")
T = TypeVar("T")


class CacheInterface(ABC, Generic[V]):
    """
    Abstract base class for caches kept in sync by cachesync.

    Implementations may subclass this or simply provide the same methods
    (see SupportsCache). Any method may be ``async def``.
    """

    @abstractmethod
    def get(self, id: str) -> V | Awaitable[V]:
        """
        Retrieve the value stored under ``id``.

        Behavior for a missing id is implementation-defined; implementations
        must document it (e.g. return None, or raise KeyError).
        """

    @abstractmethod
    def set(self, id: str, value: V) -> Any:
        """
        Store ``value`` under ``id``, overwriting any existing entry.

        Must be safe to call repeatedly with the same id.
        """

    @abstractmethod
    def delete(self, id: str) -> Any:
        """
        Remove the entry under ``id``.

        Deleting an id that is not present is a no-op.
        """

    @abstractmethod
    def find(self, predicate: Callable[[V, str], bool]) -> V | None | Awaitable[V | None]:
        """
        Return the first stored value for which ``predicate(value, id)`` holds.

        Iteration order is implementation-defined. Not used by the
        synchronizers; provided for application code.
        """

    @abstractmethod
    def close(self) -> None | Awaitable[None]:
        """
        Release resources held by the cache (connections, handles).

        Idempotence is recommended but not required.
        """


class SupportsCache(Protocol[V]):
    """Structural form of CacheInterface for caches that don't subclass it."""

    def get(self, id: str) -> Any: ...

    def set(self, id: str, value: V) -> Any: ...

    def delete(self, id: str) -> Any: ...

    def find(self, predicate: Callable[[V, str], bool]) -> Any: ...

    def close(self) -> Any: ...


async def resolve(result: T | Awaitable[T]) -> T:
    """Await ``result`` if it is awaitable, otherwise return it unchanged."""
    if inspect.isawaitable(result):
        return await result
    return result  # type: ignore[return-value]


def apply_in_order(operations: Iterable[Callable[[], Any]]) -> Awaitable[None] | None:
    """
    Run cache operations one after another.

    Synchronous operations complete before this returns. As soon as one
    operation returns an awaitable, the rest are chained behind it and the
    chain is returned for the caller to await or schedule.
    """
    pending = iter(operations)
    for operation in pending:
        result = operation()
        if inspect.isawaitable(result):
            return _finish_in_order(result, pending)
    return None


async def _finish_in_order(first: Awaitable[Any], rest: Iterator[Callable[[], Any]]) -> None:
    await first
    for operation in rest:
        await resolve(operation())


async def close_cache(cache: SupportsCache[Any]) -> None:
    """Shared closing strategy for synchronizers: delegate to the cache."""
    await resolve(cache.close())
