"""Group Service — create, list and idempotent join."""

import pytest

from groupchat.core.domain_types import GroupId
from groupchat.core.enforce_membership import GROUP_NOT_FOUND, INVALID_GROUP_NAME
from groupchat.core.errors import BadRequestError, NotFoundError


@pytest.mark.parametrize("name", [None, "", "   ", 42, ["Room"]])
async def test_create_group_rejects_invalid_name(group_service, store, name):
    alice = await store.create_user("alice")
    with pytest.raises(BadRequestError) as exc_info:
        await group_service.create_group(alice, name)
    assert exc_info.value.message == INVALID_GROUP_NAME
    assert await store.list_groups() == []


async def test_create_group_records_creator_without_joining(group_service, store):
    alice = await store.create_user("alice")
    group = await group_service.create_group(alice, "Test Group")
    assert group.name == "Test Group"
    assert group.created_by == alice
    assert await store.is_member(alice, group.id) is False


async def test_list_groups_passes_through(group_service, store):
    alice = await store.create_user("alice")
    bob = await store.create_user("bob")
    await group_service.create_group(alice, "A")
    await group_service.create_group(bob, "B")
    groups = await group_service.list_groups()
    assert [(g.name, g.created_by) for g in groups] == [("A", alice), ("B", bob)]


async def test_join_group_is_idempotent(group_service, store):
    alice = await store.create_user("alice")
    group = await group_service.create_group(alice, "Room")
    await group_service.join_group(alice, group.id)
    await group_service.join_group(alice, group.id)
    assert await store.is_member(alice, group.id) is True


async def test_join_unknown_group_raises_not_found(group_service, store):
    alice = await store.create_user("alice")
    with pytest.raises(NotFoundError) as exc_info:
        await group_service.join_group(alice, GroupId(9))
    assert exc_info.value.message == GROUP_NOT_FOUND
