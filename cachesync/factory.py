"""
cachesync - Synchronizer Factory

Builds synchronizers by entity kind and keeps a registry of named instances
so an application can close them all during shutdown.

Examples:
    from cachesync.factory import create_synchronizers, close_all_synchronizers

    # One cache per entity kind; each synchronizer closes its own cache
    create_synchronizers(lambda kind: make_cache(kind.value), client)
    ...
    await close_all_synchronizers()

    # Or a single synchronizer with an explicit channel filter
    from cachesync.config import ChannelSyncConfig, SyncConfig
    cfg = SyncConfig(channel=ChannelSyncConfig(allowed_types=[0]))
    create_synchronizer("channel", channel_cache, client, config=cfg)
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from .cache.interface import SupportsCache
from .client import RealtimeClient
from .config import EntityKind, SyncConfig, get_config
from .errors import (
    SynchronizerCloseError,
    SynchronizerNotFoundError,
    UnknownEntityKindError,
)
from .synchronizers import (
    ChannelSynchronizer,
    GuildSynchronizer,
    MemberSynchronizer,
    RoleSynchronizer,
    Synchronizer,
    UserSynchronizer,
)

logger = logging.getLogger(__name__)

CacheProvider = Callable[[EntityKind], SupportsCache[Any]]

# Global synchronizer registry
_synchronizer_instances: dict[str, Synchronizer] = {}


def _coerce_kind(kind: EntityKind | str) -> EntityKind:
    try:
        return EntityKind(kind)
    except ValueError:
        raise UnknownEntityKindError(str(kind), [k.value for k in EntityKind]) from None


def _build(
    kind: EntityKind,
    cache: SupportsCache[Any],
    client: RealtimeClient,
    config: SyncConfig,
) -> Synchronizer:
    if kind == EntityKind.USER:
        return UserSynchronizer(cache, client)
    if kind == EntityKind.CHANNEL:
        return ChannelSynchronizer(cache, client, config.channel.allowed_types)
    if kind == EntityKind.MEMBER:
        return MemberSynchronizer(cache, client)
    if kind == EntityKind.GUILD:
        return GuildSynchronizer(cache, client)
    if kind == EntityKind.ROLE:
        return RoleSynchronizer(cache, client)
    raise UnknownEntityKindError(kind.value, [k.value for k in EntityKind])


def create_synchronizer(
    kind: EntityKind | str,
    cache: SupportsCache[Any],
    client: RealtimeClient,
    config: SyncConfig | None = None,
    name: str | None = None,
) -> Synchronizer:
    """
    Create (and register) a synchronizer for one entity kind.

    Args:
        kind: Entity kind to synchronize
        cache: Cache the synchronizer writes to (and closes on close())
        client: Realtime client to listen on
        config: Configuration (uses global config if not provided)
        name: Registry name (defaults to the kind's value)

    Returns:
        The attached synchronizer; an existing one if ``name`` is registered

    Raises:
        UnknownEntityKindError: If ``kind`` is not a supported entity kind
    """
    entity_kind = _coerce_kind(kind)
    name = name or entity_kind.value

    if name in _synchronizer_instances:
        logger.debug("Returning existing synchronizer: %s", name)
        return _synchronizer_instances[name]

    if config is None:
        config = get_config()

    synchronizer = _build(entity_kind, cache, client, config)
    _synchronizer_instances[name] = synchronizer

    logger.info(
        "Synchronizer '%s' created for %s",
        name,
        entity_kind.value,
        extra={"synchronizer_name": name, "kind": entity_kind.value},
    )
    return synchronizer


def create_synchronizers(
    cache_provider: CacheProvider,
    client: RealtimeClient,
    config: SyncConfig | None = None,
) -> dict[str, Synchronizer]:
    """
    Create one synchronizer per enabled entity kind.

    ``cache_provider`` is called once per kind and must return a distinct
    cache each time, since every synchronizer closes its own cache. Kinds
    already registered are returned as-is and the provider is not called
    for them.
    """
    if config is None:
        config = get_config()

    created: dict[str, Synchronizer] = {}
    for kind in config.enabled:
        existing = _synchronizer_instances.get(kind.value)
        if existing is not None:
            logger.debug("Synchronizer '%s' already registered, not building a cache", kind.value)
            created[kind.value] = existing
            continue
        created[kind.value] = create_synchronizer(kind, cache_provider(kind), client, config=config)
    return created


def get_synchronizer(name: str) -> Synchronizer:
    """
    Get a registered synchronizer by name.

    Raises:
        SynchronizerNotFoundError: If no synchronizer is registered under ``name``
    """
    try:
        return _synchronizer_instances[name]
    except KeyError:
        raise SynchronizerNotFoundError(name) from None


async def close_all_synchronizers() -> None:
    """
    Close every registered synchronizer and clear the registry.

    All synchronizers are closed even if some fail; failures are logged and
    then raised together as SynchronizerCloseError.
    """
    if not _synchronizer_instances:
        logger.debug("No synchronizers to close")
        return

    logger.info("Closing %d synchronizer(s)...", len(_synchronizer_instances))

    failures: dict[str, BaseException] = {}
    for name, synchronizer in list(_synchronizer_instances.items()):
        try:
            await synchronizer.close()
            logger.info("Closed synchronizer: %s", name)
        except Exception as e:
            logger.error(
                "Error closing synchronizer '%s': %s",
                name,
                e,
                extra={"synchronizer_name": name, "error": str(e)},
                exc_info=True,
            )
            failures[name] = e

    _synchronizer_instances.clear()

    if failures:
        raise SynchronizerCloseError(failures)
    logger.info("All synchronizers closed")


def reset_synchronizer_registry() -> None:
    """
    Drop all registry references without closing the synchronizers.

    Warning: Only use this in testing contexts.
    """
    count = len(_synchronizer_instances)
    _synchronizer_instances.clear()
    logger.debug("Reset synchronizer registry, cleared %d reference(s)", count)


def list_synchronizers() -> list[str]:
    """List all registered synchronizer names."""
    return list(_synchronizer_instances.keys())
