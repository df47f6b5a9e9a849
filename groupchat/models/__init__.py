"""ORM Models — SQLAlchemy declarative models for users, groups, memberships, messages.

Invariants:
    - All models inherit from Base (db/base.py)
    - Only infrastructure/sql_store.py queries these models

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all
"""

from groupchat.models.user import User  # noqa: F401
from groupchat.models.group import Group  # noqa: F401
from groupchat.models.group_member import GroupMember  # noqa: F401
from groupchat.models.message import Message  # noqa: F401
