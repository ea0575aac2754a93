"""
cachesync - Gateway Event Names

Event-name tags consumed by the synchronizers, with their payload shapes.
"""

from enum import Enum


class GatewayEvent(str, Enum):
    """Named events emitted by the realtime client."""

    # (user)
    USER_UPDATE = "userUpdate"

    # (channel)
    CHANNEL_CREATE = "channelCreate"
    CHANNEL_UPDATE = "channelUpdate"
    CHANNEL_DELETE = "channelDelete"

    # (guild, member) / (guild, members)
    GUILD_MEMBER_ADD = "guildMemberAdd"
    GUILD_MEMBER_UPDATE = "guildMemberUpdate"
    GUILD_MEMBER_CHUNK = "guildMemberChunk"
    GUILD_MEMBER_REMOVE = "guildMemberRemove"

    # (guild)
    GUILD_CREATE = "guildCreate"
    GUILD_UPDATE = "guildUpdate"
    GUILD_DELETE = "guildDelete"

    # (guild, role)
    GUILD_ROLE_CREATE = "guildRoleCreate"
    GUILD_ROLE_UPDATE = "guildRoleUpdate"
    GUILD_ROLE_DELETE = "guildRoleDelete"
