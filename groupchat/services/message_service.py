"""Message Service — post and list group messages.

Invariants:
    - send_message checks, in order: group exists (404) → caller is member (403)
      → text non-blank (400); callers rely on this order
    - The membership check completes before the insert is issued
    - list_messages is gated on group existence only, not membership
    - Messages come back ordered by (timestamp, id)

Design Decisions:
    - send_message re-fetches the row after insert: the response carries the
      store-assigned id and timestamp, not values echoed from the request
"""

import logging

from groupchat.core.domain_types import GroupId, Message, UserId
from groupchat.core.enforce_membership import check_message_text
from groupchat.core.errors import StoreError
from groupchat.core.repository_protocols import ChatStore
from groupchat.services.membership_guard import MembershipGuard

logger = logging.getLogger(__name__)


class MessageService:
    """Membership-gated messaging."""

    def __init__(self, store: ChatStore, guard: MembershipGuard):
        self._store = store
        self._guard = guard

    async def send_message(
        self, caller_id: UserId, group_id: GroupId | None, text: object,
    ) -> Message:
        group_id = await self._guard.require_group(group_id)
        await self._guard.require_member(caller_id, group_id)
        error = check_message_text(text)
        if error:
            raise error

        message_id = await self._store.create_message(group_id, caller_id, text)
        message = await self._store.get_message(message_id)
        if message is None:
            raise StoreError(f"message {message_id} missing after insert", "read")
        logger.info(
            f"Message {message_id} posted",
            extra={"user_id": caller_id, "group_id": group_id},
        )
        return message

    async def list_messages(self, group_id: GroupId | None) -> list[Message]:
        group_id = await self._guard.require_group(group_id)
        return await self._store.list_messages_by_group(group_id)
