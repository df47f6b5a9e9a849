"""Service test fixtures — store, guard, resolver and services over the test DB.

Design Decisions:
    - Services are built by hand around the same SqlChatStore the app uses,
      so service tests exercise real SQL without going through HTTP
"""

import pytest

from groupchat.infrastructure.sql_store import SqlChatStore
from groupchat.services.group_service import GroupService
from groupchat.services.identity_resolver import HeaderIdentityResolver
from groupchat.services.membership_guard import MembershipGuard
from groupchat.services.message_service import MessageService


@pytest.fixture
def store(db_manager):
    return SqlChatStore(db_manager)


@pytest.fixture
def guard(store):
    return MembershipGuard(store)


@pytest.fixture
def resolver(store):
    return HeaderIdentityResolver(store)


@pytest.fixture
def group_service(store, guard):
    return GroupService(store, guard)


@pytest.fixture
def message_service(store, guard):
    return MessageService(store, guard)
