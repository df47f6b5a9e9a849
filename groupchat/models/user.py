"""User ORM — one row per distinct username, created on first sight.

Invariants:
    - username is unique and non-nullable: the constraint arbitrates creation races
    - Rows are never updated or deleted
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from groupchat.db.base import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True,
    )
