"""
cachesync - Cache Key Derivation

Pure functions that turn event payloads into cache keys, plus the immutable
channel-type filter. Nothing here holds state.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any


def _field(entity: Any, name: str) -> Any:
    """Read a field from an attribute-style object or a mapping."""
    if isinstance(entity, Mapping):
        return entity[name]
    return getattr(entity, name)


def entity_id(entity: Any) -> str:
    """Cache key for an entity keyed by its own snowflake."""
    return str(_field(entity, "id"))


def member_key(guild: Any, member: Any) -> str:
    """
    Composite cache key for a guild member.

    Members are only unique within a guild, so the key is
    ``"<guild_id>:<member_id>"``.
    """
    return f"{entity_id(guild)}:{entity_id(member)}"


def channel_type(channel: Any) -> int:
    """Integer type code of a channel payload."""
    return int(_field(channel, "type"))


@dataclass(frozen=True)
class ChannelFilter:
    """
    Allowed channel types, fixed for the lifetime of a synchronizer.

    ``allowed_types=None`` accepts every channel. An empty set accepts none.
    """

    allowed_types: frozenset[int] | None = None

    @classmethod
    def of(cls, allowed_types: "Iterable[int] | ChannelFilter | None") -> "ChannelFilter":
        """Build a filter from an iterable of type codes (or pass one through)."""
        if isinstance(allowed_types, ChannelFilter):
            return allowed_types
        if allowed_types is None:
            return cls()
        if isinstance(allowed_types, (str, bytes)):
            raise TypeError(
                "allowed_types must be an iterable of int type codes, not a string; "
                "parse strings with ChannelSyncConfig"
            )
        return cls(frozenset(int(t) for t in allowed_types))

    @property
    def unrestricted(self) -> bool:
        return self.allowed_types is None

    def allows(self, channel: Any) -> bool:
        """Whether events for this channel should touch the cache."""
        if self.allowed_types is None:
            return True
        return channel_type(channel) in self.allowed_types
