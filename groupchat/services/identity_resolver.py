"""Identity Resolver — maps the X-Username header to a durable user id.

Invariants:
    - Blank or missing usernames are rejected before any store access
    - The username is stripped of surrounding whitespace before lookup
    - At most one user row is created per distinct username (store arbitrates)

Design Decisions:
    - Header-as-identity is NOT authentication; it is isolated behind the
      IdentityResolver protocol so a verifying resolver can replace it
"""

import logging

from groupchat.core.domain_types import UserId
from groupchat.core.enforce_membership import check_identity
from groupchat.core.repository_protocols import ChatStore

logger = logging.getLogger(__name__)


class HeaderIdentityResolver:
    """Trusts the supplied username as-is and auto-provisions unknown users."""

    def __init__(self, store: ChatStore):
        self._store = store

    async def resolve(self, supplied_username: str | None) -> UserId:
        error = check_identity(supplied_username)
        if error:
            raise error
        username = supplied_username.strip()
        user_id = await self._store.get_or_create_user(username)
        logger.debug(f"Resolved identity {username!r}", extra={"user_id": user_id})
        return user_id
