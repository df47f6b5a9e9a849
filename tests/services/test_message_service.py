"""Message Service — check ordering, persistence and listing.

Tests cover:
    - unknown group → NotFound regardless of membership or content
    - non-member → Forbidden even with valid content
    - member with blank text → BadRequest
    - successful send returns the stored record
    - listing needs group existence only
"""

import pytest

from groupchat.core.domain_types import GroupId
from groupchat.core.enforce_membership import INVALID_MESSAGE, NOT_A_MEMBER
from groupchat.core.errors import BadRequestError, ForbiddenError, NotFoundError


@pytest.fixture
async def room(store):
    alice = await store.create_user("alice")
    bob = await store.create_user("bob")
    group_id = await store.create_group("Room", alice)
    await store.join_group(alice, group_id)
    return {"alice": alice, "bob": bob, "group_id": group_id}


@pytest.mark.parametrize("text", ["Hello", "", "   ", None])
async def test_unknown_group_is_not_found_whatever_the_content(message_service, room, text):
    with pytest.raises(NotFoundError):
        await message_service.send_message(room["alice"], GroupId(999), text)


async def test_non_member_forbidden_with_valid_content(message_service, room):
    with pytest.raises(ForbiddenError) as exc_info:
        await message_service.send_message(room["bob"], room["group_id"], "Hi")
    assert exc_info.value.message == NOT_A_MEMBER


async def test_non_member_forbidden_before_content_check(message_service, room):
    with pytest.raises(ForbiddenError):
        await message_service.send_message(room["bob"], room["group_id"], "")


@pytest.mark.parametrize("text", ["", "   \n", None, 5])
async def test_member_blank_message_is_bad_request(message_service, store, room, text):
    with pytest.raises(BadRequestError) as exc_info:
        await message_service.send_message(room["alice"], room["group_id"], text)
    assert exc_info.value.message == INVALID_MESSAGE
    assert await store.list_messages_by_group(room["group_id"]) == []


async def test_send_returns_stored_record(message_service, room):
    message = await message_service.send_message(
        room["alice"], room["group_id"], "Hello World",
    )
    assert message.message == "Hello World"
    assert message.group_id == room["group_id"]
    assert message.user_id == room["alice"]
    assert message.id > 0


async def test_list_messages_in_send_order(message_service, store, room):
    await store.join_group(room["bob"], room["group_id"])
    await message_service.send_message(room["alice"], room["group_id"], "first")
    await message_service.send_message(room["bob"], room["group_id"], "second")
    await message_service.send_message(room["alice"], room["group_id"], "third")

    messages = await message_service.list_messages(room["group_id"])
    assert [m.message for m in messages] == ["first", "second", "third"]


async def test_list_messages_not_gated_by_membership(message_service, room):
    await message_service.send_message(room["alice"], room["group_id"], "visible")
    # bob is not a member; reading only requires the group to exist
    messages = await message_service.list_messages(room["group_id"])
    assert len(messages) == 1


async def test_list_messages_unknown_group(message_service):
    with pytest.raises(NotFoundError):
        await message_service.list_messages(GroupId(3))
