"""Group Service — list, create and join groups.

Invariants:
    - create_group records the caller as created_by but does NOT join them
    - join_group is idempotent: repeated joins leave exactly one membership
    - join_group reports NotFound for a missing group before touching memberships
"""

import logging

from groupchat.core.domain_types import Group, GroupId, UserId
from groupchat.core.enforce_membership import check_group_name
from groupchat.core.repository_protocols import ChatStore
from groupchat.services.membership_guard import MembershipGuard

logger = logging.getLogger(__name__)


class GroupService:
    """Group lifecycle operations."""

    def __init__(self, store: ChatStore, guard: MembershipGuard):
        self._store = store
        self._guard = guard

    async def list_groups(self) -> list[Group]:
        return await self._store.list_groups()

    async def create_group(self, caller_id: UserId, name: object) -> Group:
        """Create a group named `name`. The name is stored as supplied."""
        error = check_group_name(name)
        if error:
            raise error
        group_id = await self._store.create_group(name, caller_id)
        logger.info(
            f"Group {group_id} created",
            extra={"user_id": caller_id, "group_id": group_id},
        )
        return Group(id=group_id, name=name, created_by=caller_id)

    async def join_group(self, caller_id: UserId, group_id: GroupId | None) -> None:
        group_id = await self._guard.require_group(group_id)
        await self._store.join_group(caller_id, group_id)
        logger.info(
            f"User {caller_id} joined group {group_id}",
            extra={"user_id": caller_id, "group_id": group_id},
        )
