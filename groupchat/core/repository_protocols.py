"""Boundary Protocols — contracts between core/services and the persistence shell.

Invariants:
    - Services NEVER import the SQL store — they receive a ChatStore by injection
    - All IO operations accessed through Protocol types
    - Every ChatStore method is one atomic unit; failures raise StoreError

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in Protocol: implementations do IO; the pure checks in
      enforce_membership stay synchronous and the services orchestrate
"""

from typing import Protocol

from groupchat.core.domain_types import (
    Group, GroupId, Message, MessageId, UserId,
)


class ChatStore(Protocol):
    """Contract for users, groups, memberships and messages — implemented by shell."""
    async def find_user_by_username(self, username: str) -> UserId | None: ...
    async def create_user(self, username: str) -> UserId: ...
    async def get_or_create_user(self, username: str) -> UserId: ...
    async def list_groups(self) -> list[Group]: ...
    async def create_group(self, name: str, creator_id: UserId) -> GroupId: ...
    async def group_exists(self, group_id: GroupId) -> bool: ...
    async def join_group(self, user_id: UserId, group_id: GroupId) -> None: ...
    async def is_member(self, user_id: UserId, group_id: GroupId) -> bool: ...
    async def create_message(
        self, group_id: GroupId, user_id: UserId, text: str,
    ) -> MessageId: ...
    async def get_message(self, message_id: MessageId) -> Message | None: ...
    async def list_messages_by_group(self, group_id: GroupId) -> list[Message]: ...


class IdentityResolver(Protocol):
    """Maps a claimed identity to a durable user id.

    The header-trusting implementation lives in services/identity_resolver.py;
    a credential-verifying one can replace it without touching the services.
    """
    async def resolve(self, supplied_username: str | None) -> UserId: ...
