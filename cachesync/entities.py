"""
cachesync - Entity Payload Shapes

Entities are opaque to this layer except for the fields used to derive cache
keys. These protocols describe the attribute-style payloads (e.g. library model
objects); raw gateway dicts carrying the same keys are accepted as well.
"""

from enum import IntEnum
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Snowflake(Protocol):
    """Anything carrying a platform-assigned unique id."""

    id: Any


@runtime_checkable
class ChannelPayload(Snowflake, Protocol):
    """A channel record: an id plus an integer type code."""

    type: int


class ChannelType(IntEnum):
    """Well-known channel type codes."""

    TEXT = 0
    DM = 1
    VOICE = 2
    GROUP_DM = 3
    CATEGORY = 4
    NEWS = 5
    NEWS_THREAD = 10
    PUBLIC_THREAD = 11
    PRIVATE_THREAD = 12
    STAGE_VOICE = 13
    DIRECTORY = 14
    FORUM = 15
    MEDIA = 16
