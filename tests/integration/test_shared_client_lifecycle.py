"""
cachesync - Shared Client Lifecycle Tests

Several synchronizers attached to one client: a realistic gateway session
from guild availability through member chunking to shutdown.
"""

import pytest

from cachesync.synchronizers import (
    ChannelSynchronizer,
    GuildSynchronizer,
    MemberSynchronizer,
    RoleSynchronizer,
    UserSynchronizer,
)
from conftest import FakeClient, RecordingCache, SyncRecordingCache, entity


class TestSharedClientLifecycle:
    """End-to-end behavior across synchronizers sharing a client."""

    async def test_gateway_session(self, client: FakeClient) -> None:
        users, channels, members = RecordingCache(), RecordingCache(), RecordingCache()
        guilds, roles = SyncRecordingCache(), SyncRecordingCache()

        synchronizers = [
            UserSynchronizer(users, client),
            ChannelSynchronizer(channels, client, allowed_types={0}),
            MemberSynchronizer(members, client),
            GuildSynchronizer(guilds, client),
            RoleSynchronizer(roles, client),
        ]

        guild = entity(id="g1", name="Makers")
        admin = entity(id="r1", name="admin")
        general = entity(id="c1", type=0)
        voice = entity(id="c2", type=2)
        alice = entity(id="u1", name="alice")
        bob = entity(id="u2", name="bob")

        await client.emit("guildCreate", guild)
        await client.emit("guildRoleCreate", guild, admin)
        await client.emit("channelCreate", general)
        await client.emit("channelCreate", voice)
        await client.emit("guildMemberChunk", guild, [alice, bob])
        await client.emit("userUpdate", alice)
        await client.emit("guildMemberRemove", guild, bob)

        assert guilds.get("g1") is guild
        assert roles.get("r1") is admin
        assert await channels.get("c1") is general
        assert await channels.get("c2") is None
        assert await members.get("g1:u1") is alice
        assert await members.get("g1:u2") is None
        assert await users.get("u1") is alice

        for sync in synchronizers:
            await sync.close()

        assert client.listener_count() == 0
        assert [c.close_calls for c in (users, channels, members, guilds, roles)] == [1, 1, 1, 1, 1]

        await client.emit("guildDelete", guild)
        await client.emit("userUpdate", bob)
        assert guilds.get("g1") is guild
        assert await users.get("u2") is None

    async def test_closing_one_instance_leaves_its_twin(self, client: FakeClient) -> None:
        first_cache, second_cache = RecordingCache(), RecordingCache()
        first = MemberSynchronizer(first_cache, client)
        MemberSynchronizer(second_cache, client)

        await first.close()
        await client.emit("guildMemberAdd", entity(id="g"), entity(id="m"))

        assert first_cache.data == {}
        assert "g:m" in second_cache.data
        assert client.listener_count() == 4

    @pytest.mark.parametrize("cycles", [1, 3])
    async def test_repeated_attach_detach_cycles(self, client: FakeClient, cycles: int) -> None:
        for _ in range(cycles):
            sync = ChannelSynchronizer(RecordingCache(), client)
            assert client.listener_count() == 3
            await sync.close()

        assert client.listener_count() == 0

    async def test_find_is_available_to_application(self, client: FakeClient) -> None:
        cache = RecordingCache()
        GuildSynchronizer(cache, client)
        await client.emit("guildCreate", entity(id="g1", name="alpha"))
        await client.emit("guildCreate", entity(id="g2", name="beta"))

        found = await cache.find(lambda guild, _id: guild.name == "beta")

        assert found.id == "g2"
