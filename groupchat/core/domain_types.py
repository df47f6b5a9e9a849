"""Domain Types — identity types and immutable records shared across layers.

Invariants:
    - UserId, GroupId, MessageId wrap ints — never use bare int ids in services
    - Records are frozen: rows are immutable once created

Design Decisions:
    - NewType over wrapper classes: zero runtime cost, full type-checker support
    - Frozen dataclasses for records: the store hands out values, not ORM objects,
      so nothing outside the store can mutate persisted state
"""

from dataclasses import dataclass
from datetime import datetime
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
GroupId = NewType("GroupId", int)
MessageId = NewType("MessageId", int)

MAX_ROW_ID = 2**31 - 1  # Integer columns are int4 on PostgreSQL


# ─── Records ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class Group:
    """A named chat room. created_by is not implicitly a member."""
    id: GroupId
    name: str
    created_by: UserId


@dataclass(frozen=True)
class Message:
    """A posted message. Ordered per group by (timestamp, id)."""
    id: MessageId
    group_id: GroupId
    user_id: UserId
    message: str
    timestamp: datetime


# ─── Parsing ─────────────────────────────────────────────────────

def parse_group_id(raw: str) -> GroupId | None:
    """Parse a path segment into a GroupId. None when it cannot name a group."""
    raw = raw.strip()
    if not (raw.isascii() and raw.isdigit()):
        return None
    value = int(raw)
    if value <= 0 or value > MAX_ROW_ID:
        return None
    return GroupId(value)
