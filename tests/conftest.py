"""
cachesync - Test Configuration and Shared Fixtures

Provides pytest configuration, in-memory test doubles for the cache and the
realtime client, and shared fixtures for unit and integration tests.
"""

import inspect
import os
from collections import defaultdict
from collections.abc import Callable, Generator
from types import SimpleNamespace
from typing import Any

import pytest

from cachesync.cache import CacheInterface

# Set test environment
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_LEVEL"] = "DEBUG"


class RecordingCache(CacheInterface[Any]):
    """
    Dict-backed async cache for tests.

    ``get`` returns None for a missing id. Every call is recorded so tests
    can assert on the exact operation sequence.
    """

    def __init__(self) -> None:
        self.data: dict[str, Any] = {}
        self.operations: list[tuple[str, str]] = []
        self.close_calls = 0

    async def get(self, id: str) -> Any:
        return self.data.get(id)

    async def set(self, id: str, value: Any) -> None:
        self.operations.append(("set", id))
        self.data[id] = value

    async def delete(self, id: str) -> None:
        self.operations.append(("delete", id))
        self.data.pop(id, None)

    async def find(self, predicate: Callable[[Any, str], bool]) -> Any:
        for key, value in self.data.items():
            if predicate(value, key):
                return value
        return None

    async def close(self) -> None:
        self.close_calls += 1


class SyncRecordingCache:
    """Synchronous cache that satisfies the contract structurally (no subclassing)."""

    def __init__(self) -> None:
        self.data: dict[str, Any] = {}
        self.close_calls = 0

    def get(self, id: str) -> Any:
        return self.data.get(id)

    def set(self, id: str, value: Any) -> None:
        self.data[id] = value

    def delete(self, id: str) -> None:
        self.data.pop(id, None)

    def find(self, predicate: Callable[[Any, str], bool]) -> Any:
        return next((v for k, v in self.data.items() if predicate(v, k)), None)

    def close(self) -> None:
        self.close_calls += 1


class CacheUnavailable(Exception):
    """Stand-in for a backend failure."""


class FailingCache(RecordingCache):
    """Cache whose writes and/or close always fail."""

    def __init__(self, fail_writes: bool = True, fail_close: bool = False) -> None:
        super().__init__()
        self.fail_writes = fail_writes
        self.fail_close = fail_close

    async def set(self, id: str, value: Any) -> None:
        if self.fail_writes:
            raise CacheUnavailable(f"cannot set {id}")
        await super().set(id, value)

    async def delete(self, id: str) -> None:
        if self.fail_writes:
            raise CacheUnavailable(f"cannot delete {id}")
        await super().delete(id)

    async def close(self) -> None:
        self.close_calls += 1
        if self.fail_close:
            raise CacheUnavailable("cannot close")


class FakeClient:
    """
    Minimal event emitter standing in for the realtime client.

    ``off`` removes by identity only, so a synchronizer that hands over a
    different callable than it registered leaves its listener behind.
    """

    def __init__(self) -> None:
        self._listeners: dict[str, list[Callable[..., Any]]] = defaultdict(list)

    def on(self, event: str, handler: Callable[..., Any]) -> None:
        self._listeners[event].append(handler)

    def off(self, event: str, handler: Callable[..., Any]) -> None:
        listeners = self._listeners.get(event, [])
        for index, registered in enumerate(listeners):
            if registered is handler:
                del listeners[index]
                return

    async def emit(self, event: str, *args: Any) -> None:
        """Deliver an event to each listener in turn, awaiting async handlers."""
        for handler in list(self._listeners.get(event, [])):
            result = handler(*args)
            if inspect.isawaitable(result):
                await result

    def dispatch(self, event: str, *args: Any) -> list[Any]:
        """Call each listener and return whatever it returned, awaiting nothing."""
        return [handler(*args) for handler in list(self._listeners.get(event, []))]

    def listener_count(self, event: str | None = None) -> int:
        if event is not None:
            return len(self._listeners.get(event, []))
        return sum(len(handlers) for handlers in self._listeners.values())

    def listeners(self, event: str) -> list[Callable[..., Any]]:
        return list(self._listeners.get(event, []))


def entity(**fields: Any) -> SimpleNamespace:
    """Attribute-style payload, like a library model object."""
    return SimpleNamespace(**fields)


@pytest.fixture
def cache() -> RecordingCache:
    return RecordingCache()


@pytest.fixture
def sync_cache() -> SyncRecordingCache:
    return SyncRecordingCache()


@pytest.fixture
def client() -> FakeClient:
    return FakeClient()


@pytest.fixture
def mock_env_sync(monkeypatch: pytest.MonkeyPatch) -> None:
    """Set environment variables for a restricted synchronizer setup."""
    monkeypatch.setenv("CACHESYNC_ENABLED", "user,channel,member")
    monkeypatch.setenv("CACHESYNC_CHANNEL_TYPES", "text,2")


@pytest.fixture(autouse=True)
def reset_cachesync_state(monkeypatch: pytest.MonkeyPatch, tmp_path: Any) -> Generator[None, None, None]:
    """Isolate each test from the registry, the config singleton and any local .env file."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("CACHESYNC_ENABLED", raising=False)
    monkeypatch.delenv("CACHESYNC_CHANNEL_TYPES", raising=False)

    from cachesync.config import reset_config
    from cachesync.factory import reset_synchronizer_registry

    reset_config()
    yield
    reset_synchronizer_registry()
    reset_config()
