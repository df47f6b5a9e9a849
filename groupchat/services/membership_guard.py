"""Membership Guard — existence and membership preconditions backed by the store.

Invariants:
    - require_group before require_member for every group-scoped action
    - Stateless: every check reads the store, nothing is cached
"""

from groupchat.core.domain_types import GroupId, UserId
from groupchat.core.enforce_membership import check_group_exists, check_membership
from groupchat.core.repository_protocols import ChatStore


class MembershipGuard:
    def __init__(self, store: ChatStore):
        self._store = store

    async def require_group(self, group_id: GroupId | None) -> GroupId:
        """Raise NotFoundError unless the group exists. Returns the id for chaining."""
        exists = group_id is not None and await self._store.group_exists(group_id)
        error = check_group_exists(exists)
        if error:
            raise error
        return group_id

    async def require_member(self, user_id: UserId, group_id: GroupId) -> None:
        """Raise ForbiddenError unless user_id is a member of group_id."""
        error = check_membership(await self._store.is_member(user_id, group_id))
        if error:
            raise error
