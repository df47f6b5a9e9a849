"""SQL Chat Store — SQLAlchemy implementation of the ChatStore contract.

Invariants:
    - Sole owner of persisted users, groups, memberships and messages
    - Each public method opens its own session: one operation, one transaction
    - Returns domain records (core/domain_types.py), never ORM instances
    - Message timestamps come back timezone-aware in UTC on every backend
    - Persistence failures surface as StoreError via DatabaseSessionManager

Design Decisions:
    - Uniqueness conflicts on users and memberships are resolved here, not by callers:
      get_or_create_user re-reads after a lost insert race, join_group treats a
      duplicate pair as already joined
    - Conflict detection catches IntegrityError inside the session so the manager
      does not convert an expected conflict into a StoreError
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError

from groupchat.core.domain_types import (
    Group, GroupId, Message, MessageId, UserId,
)
from groupchat.core.errors import StoreError
from groupchat.infrastructure.database import DatabaseSessionManager
from groupchat.models.group import Group as GroupModel
from groupchat.models.group_member import GroupMember as GroupMemberModel
from groupchat.models.message import Message as MessageModel
from groupchat.models.user import User as UserModel

logger = logging.getLogger(__name__)


def _to_group(row: GroupModel) -> Group:
    return Group(
        id=GroupId(row.id), name=row.name, created_by=UserId(row.created_by),
    )


def _as_utc(value: datetime) -> datetime:
    # SQLite drops the offset on read; stored values are always UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _to_message(row: MessageModel) -> Message:
    return Message(
        id=MessageId(row.id),
        group_id=GroupId(row.group_id),
        user_id=UserId(row.user_id),
        message=row.message,
        timestamp=_as_utc(row.timestamp),
    )


class SqlChatStore:
    """ChatStore backed by a relational database through async SQLAlchemy."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    # ─── Users ──────────────────────────────────────────────────

    async def find_user_by_username(self, username: str) -> UserId | None:
        async with self._db.session() as db:
            result = await db.execute(
                select(UserModel.id).where(UserModel.username == username),
            )
            user_id = result.scalar_one_or_none()
        return UserId(user_id) if user_id is not None else None

    async def create_user(self, username: str) -> UserId:
        async with self._db.session() as db:
            user = UserModel(username=username)
            db.add(user)
            await db.commit()
            return UserId(user.id)

    async def _insert_user(self, username: str) -> UserId | IntegrityError:
        """Insert a user, handing back the IntegrityError instead of raising it."""
        async with self._db.session() as db:
            user = UserModel(username=username)
            db.add(user)
            try:
                await db.commit()
            except IntegrityError as e:
                await db.rollback()
                return e
            return UserId(user.id)

    async def get_or_create_user(self, username: str) -> UserId:
        """Lookup-or-create. A concurrent creator may win the insert; we re-read."""
        user_id = await self.find_user_by_username(username)
        if user_id is not None:
            return user_id
        inserted = await self._insert_user(username)
        if not isinstance(inserted, IntegrityError):
            logger.info("Created user", extra={"user_id": inserted})
            return inserted
        logger.info(f"Username conflict for {username!r}, re-reading")
        user_id = await self.find_user_by_username(username)
        if user_id is None:
            # Users are never deleted, so the constraint was not the username key.
            raise StoreError("Integrity constraint violated", "commit") from inserted
        return user_id

    # ─── Groups ─────────────────────────────────────────────────

    async def list_groups(self) -> list[Group]:
        async with self._db.session() as db:
            result = await db.execute(select(GroupModel).order_by(GroupModel.id))
            return [_to_group(row) for row in result.scalars().all()]

    async def create_group(self, name: str, creator_id: UserId) -> GroupId:
        async with self._db.session() as db:
            group = GroupModel(name=name, created_by=creator_id)
            db.add(group)
            await db.commit()
            return GroupId(group.id)

    async def group_exists(self, group_id: GroupId) -> bool:
        async with self._db.session() as db:
            result = await db.execute(
                select(exists().where(GroupModel.id == group_id)),
            )
            return bool(result.scalar())

    # ─── Memberships ────────────────────────────────────────────

    async def join_group(self, user_id: UserId, group_id: GroupId) -> None:
        """Insert-or-ignore on the unique (group, user) pair."""
        if await self.is_member(user_id, group_id):
            return
        async with self._db.session() as db:
            db.add(GroupMemberModel(group_id=group_id, user_id=user_id))
            try:
                await db.commit()
                return
            except IntegrityError as e:
                await db.rollback()
                conflict = e
        if not await self.is_member(user_id, group_id):
            # Not a duplicate pair: a foreign key or other constraint failed.
            raise StoreError("Integrity constraint violated", "commit") from conflict

    async def is_member(self, user_id: UserId, group_id: GroupId) -> bool:
        async with self._db.session() as db:
            result = await db.execute(
                select(exists().where(
                    GroupMemberModel.group_id == group_id,
                    GroupMemberModel.user_id == user_id,
                )),
            )
            return bool(result.scalar())

    # ─── Messages ───────────────────────────────────────────────

    async def create_message(
        self, group_id: GroupId, user_id: UserId, text: str,
    ) -> MessageId:
        async with self._db.session() as db:
            message = MessageModel(group_id=group_id, user_id=user_id, message=text)
            db.add(message)
            await db.commit()
            return MessageId(message.id)

    async def get_message(self, message_id: MessageId) -> Message | None:
        async with self._db.session() as db:
            row = await db.get(MessageModel, message_id)
            return _to_message(row) if row is not None else None

    async def list_messages_by_group(self, group_id: GroupId) -> list[Message]:
        async with self._db.session() as db:
            result = await db.execute(
                select(MessageModel)
                .where(MessageModel.group_id == group_id)
                .order_by(MessageModel.timestamp, MessageModel.id),
            )
            return [_to_message(row) for row in result.scalars().all()]
