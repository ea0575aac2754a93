"""
cachesync - Synchronizers

One synchronizer per entity type. Each subscribes its handlers on
construction and unsubscribes exactly those handlers on close().
"""

from .base import HandlerTable, Synchronizer
from .channel import ChannelSynchronizer
from .guild import GuildSynchronizer
from .member import MemberSynchronizer
from .role import RoleSynchronizer
from .user import UserSynchronizer

__all__ = [
    "Synchronizer",
    "HandlerTable",
    "UserSynchronizer",
    "ChannelSynchronizer",
    "MemberSynchronizer",
    "GuildSynchronizer",
    "RoleSynchronizer",
]
