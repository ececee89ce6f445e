"""Service test fixtures: services wired to SQL repositories on the test DB.

Invariants:
    - Token expiry is driven by a FixedClock, never the wall clock
    - alice and bob are real rows so foreign keys hold
"""

from datetime import datetime, timedelta, timezone

import pytest

from tasklist.core.entities import User
from tasklist.infrastructure.sql_repositories import (
    SqlUserRepository, SqlListRepository, SqlItemRepository,
)
from tasklist.services.auth_service import AuthService
from tasklist.services.password_hasher import SaltedPasswordHasher
from tasklist.services.todo_item_service import TodoItemService
from tasklist.services.todo_list_service import TodoListService
from tasklist.services.token_service import TokenService

SIGNING_KEY = "unit-test-signing-key-with-enough-bytes"
TTL = timedelta(hours=12)


class FixedClock:
    """Callable clock that only moves when told to."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FixedClock(datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def token_service(clock):
    return TokenService(SIGNING_KEY, ttl=TTL, clock=clock)


@pytest.fixture
def hasher():
    return SaltedPasswordHasher("unit-test-salt", iterations=1000)


@pytest.fixture
def auth_service(test_db, hasher, token_service):
    return AuthService(SqlUserRepository(test_db), hasher, token_service)


@pytest.fixture
def list_service(test_db):
    return TodoListService(SqlListRepository(test_db))


@pytest.fixture
def item_service(test_db, list_service):
    return TodoItemService(SqlItemRepository(test_db), list_service)


@pytest.fixture
async def alice(test_db, hasher):
    return await SqlUserRepository(test_db).create(
        User(username="alice", password_hash=hasher.hash("secret1")),
    )


@pytest.fixture
async def bob(test_db, hasher):
    return await SqlUserRepository(test_db).create(
        User(username="bob", password_hash=hasher.hash("hunter2")),
    )
