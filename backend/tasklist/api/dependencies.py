"""API Dependencies: service wiring and the Request Identity Extractor.

Invariants:
    - TokenService and PasswordHasher are built once per process from settings
    - Services are built per request around the request's DB session
    - get_current_user_id is the only way routes obtain a user id
    - A missing or non-bearer Authorization header is an InvalidTokenError

Design Decisions:
    - Plain constructor injection through FastAPI Depends; tests swap
      implementations with app.dependency_overrides
"""

from datetime import timedelta
from functools import lru_cache

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from tasklist.config import get_settings
from tasklist.core.domain_types import UserId
from tasklist.core.errors import InvalidTokenError
from tasklist.infrastructure.database import get_db
from tasklist.infrastructure.sql_repositories import (
    SqlUserRepository, SqlListRepository, SqlItemRepository,
)
from tasklist.services.auth_service import AuthService
from tasklist.services.password_hasher import PasswordHasher, SaltedPasswordHasher
from tasklist.services.todo_item_service import TodoItemService
from tasklist.services.todo_list_service import TodoListService
from tasklist.services.token_service import TokenService

bearer_scheme = HTTPBearer(auto_error=False)


@lru_cache
def get_token_service() -> TokenService:
    """Process-wide TokenService. Raises ConfigurationError on a bad signing setup."""
    settings = get_settings()
    return TokenService(
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
        ttl=timedelta(hours=settings.token_ttl_hours),
    )


@lru_cache
def get_password_hasher() -> PasswordHasher:
    settings = get_settings()
    return SaltedPasswordHasher(
        settings.password_salt, iterations=settings.password_hash_iterations,
    )


def get_auth_service(
    db: AsyncSession = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenService = Depends(get_token_service),
) -> AuthService:
    return AuthService(SqlUserRepository(db), hasher, tokens)


def get_list_service(db: AsyncSession = Depends(get_db)) -> TodoListService:
    return TodoListService(SqlListRepository(db))


def get_item_service(
    db: AsyncSession = Depends(get_db),
    lists: TodoListService = Depends(get_list_service),
) -> TodoItemService:
    return TodoItemService(SqlItemRepository(db), lists)


async def get_current_user_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    auth: AuthService = Depends(get_auth_service),
) -> UserId:
    """Resolve the bearer token on the request to a user id."""
    if credentials is None or not credentials.credentials:
        raise InvalidTokenError("Missing bearer token")
    return await auth.authenticate(credentials.credentials)
