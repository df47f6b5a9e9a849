"""Request Dependencies — explicit wiring of store, guard and services per app.

Invariants:
    - Components are built once per app by build_services and stored on app.state
    - No module-level singletons: every dependency is read from the request's app
    - get_current_user_id runs before any group-scoped handler body, so a missing
      identity is reported before group existence or membership

Design Decisions:
    - Constructor injection (store → guard → services) over a service locator:
      tests build an AppServices around their own DatabaseSessionManager
"""

from dataclasses import dataclass

from fastapi import Depends, Header, Request

from groupchat.config import Settings
from groupchat.core.domain_types import UserId
from groupchat.core.repository_protocols import ChatStore, IdentityResolver
from groupchat.infrastructure.database import DatabaseSessionManager
from groupchat.infrastructure.sql_store import SqlChatStore
from groupchat.services.group_service import GroupService
from groupchat.services.identity_resolver import HeaderIdentityResolver
from groupchat.services.membership_guard import MembershipGuard
from groupchat.services.message_service import MessageService

IDENTITY_HEADER = "X-Username"


@dataclass
class AppServices:
    """Everything a request handler may touch, wired once per application."""
    settings: Settings
    db: DatabaseSessionManager
    store: ChatStore
    identity: IdentityResolver
    guard: MembershipGuard
    groups: GroupService
    messages: MessageService


def build_services(settings: Settings, db: DatabaseSessionManager) -> AppServices:
    store = SqlChatStore(db)
    guard = MembershipGuard(store)
    return AppServices(
        settings=settings,
        db=db,
        store=store,
        identity=HeaderIdentityResolver(store),
        guard=guard,
        groups=GroupService(store, guard),
        messages=MessageService(store, guard),
    )


def get_services(request: Request) -> AppServices:
    return request.app.state.services


async def get_current_user_id(
    username: str | None = Header(None, alias=IDENTITY_HEADER),
    services: AppServices = Depends(get_services),
) -> UserId:
    """Resolve the caller from the identity header, creating the user if new."""
    return await services.identity.resolve(username)
