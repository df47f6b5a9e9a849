"""Message ORM — an immutable post in a group.

Invariants:
    - group_id / user_id reference existing rows (FKs)
    - timestamp set at insert; reads order by (timestamp, id)

Design Decisions:
    - Python-side default with microsecond precision (SQLite CURRENT_TIMESTAMP
      has second resolution)
    - Index on (group_id, timestamp): the only read path lists one group in order
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from groupchat.db.base import Base


class Message(Base):
    __tablename__ = "messages"
    __table_args__ = (
        Index("ix_messages_group_id_timestamp", "group_id", "timestamp"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    group_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("groups.id"), nullable=False,
    )
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False,
    )
    message: Mapped[str] = mapped_column(Text, nullable=False)
    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
