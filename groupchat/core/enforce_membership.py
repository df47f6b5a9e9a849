"""Membership & Input Enforcement — pure precondition checks for group-scoped actions.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Return an error on violation, None on success

Design Decisions:
    - Pure functions take facts already fetched by the shell (exists, is_member)
      so each rule is testable without a database
    - Return errors (not raise): the shell raises, the API layer maps the kind
"""

from typing import Any

from groupchat.core.errors import (
    BadRequestError, ForbiddenError, GroupChatError, NotFoundError,
)

GROUP_NOT_FOUND = "Group not found"
NOT_A_MEMBER = "User must join the group to send messages"
MISSING_IDENTITY = "Username header (X-Username) is missing"
INVALID_GROUP_NAME = "Group name is required and must be a non-empty string"
INVALID_MESSAGE = "Message is required and must be a non-empty string"


def is_non_blank_string(value: Any) -> bool:
    """True for a str with at least one non-whitespace character."""
    return isinstance(value, str) and value.strip() != ""


def check_identity(username: str | None) -> GroupChatError | None:
    """Identity header must be present and non-blank."""
    if not is_non_blank_string(username):
        return BadRequestError(MISSING_IDENTITY)
    return None


def check_group_exists(exists: bool) -> GroupChatError | None:
    """Group-scoped actions require the group to exist."""
    if not exists:
        return NotFoundError(GROUP_NOT_FOUND)
    return None


def check_membership(is_member: bool) -> GroupChatError | None:
    """Posting requires a confirmed membership."""
    if not is_member:
        return ForbiddenError(NOT_A_MEMBER)
    return None


def check_group_name(name: Any) -> GroupChatError | None:
    if not is_non_blank_string(name):
        return BadRequestError(INVALID_GROUP_NAME)
    return None


def check_message_text(text: Any) -> GroupChatError | None:
    if not is_non_blank_string(text):
        return BadRequestError(INVALID_MESSAGE)
    return None
