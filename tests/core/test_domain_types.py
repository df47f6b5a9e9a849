"""Domain Types — identity wrappers, frozen records and group id parsing."""

import dataclasses
from datetime import datetime, timezone

import pytest

from groupchat.core.domain_types import (
    MAX_ROW_ID, Group, GroupId, Message, MessageId, UserId, parse_group_id,
)


def test_identity_types_wrap_int():
    assert UserId(1) == 1
    assert GroupId(2) == 2
    assert MessageId(3) == 3


def test_records_are_frozen():
    group = Group(id=GroupId(1), name="Room", created_by=UserId(1))
    with pytest.raises(dataclasses.FrozenInstanceError):
        group.name = "Renamed"
    message = Message(
        id=MessageId(1), group_id=GroupId(1), user_id=UserId(1),
        message="hi", timestamp=datetime.now(timezone.utc),
    )
    with pytest.raises(dataclasses.FrozenInstanceError):
        message.message = "edited"


@pytest.mark.parametrize("raw,expected", [
    ("1", 1), ("42", 42), (" 7 ", 7), (str(MAX_ROW_ID), MAX_ROW_ID),
])
def test_parse_group_id_valid(raw, expected):
    assert parse_group_id(raw) == expected


@pytest.mark.parametrize("raw", [
    "", "0", "-1", "abc", "1.0", "1e3", "²", str(MAX_ROW_ID + 1),
])
def test_parse_group_id_invalid(raw):
    assert parse_group_id(raw) is None
