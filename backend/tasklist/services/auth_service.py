"""Authorization Service: register, login and authenticate.

Invariants:
    - The only component that handles raw passwords; they are hashed before storage
      and never logged
    - Unknown username and wrong password raise the same InvalidCredentialsError
    - authenticate() delegates to TokenService.validate (no storage lookup)
"""

import logging

from tasklist.core.domain_types import UserId
from tasklist.core.entities import User
from tasklist.core.errors import InvalidCredentialsError
from tasklist.core.repository_protocols import UserRepository
from tasklist.core.validate_input import check_credentials
from tasklist.services.password_hasher import PasswordHasher
from tasklist.services.token_service import TokenService

logger = logging.getLogger(__name__)


class AuthService:
    """Composes Credential Store + Password Hasher + Token Service."""

    def __init__(
        self,
        users: UserRepository,
        hasher: PasswordHasher,
        tokens: TokenService,
    ):
        self.users = users
        self.hasher = hasher
        self.tokens = tokens

    async def register(self, username: str, password: str, name: str = "") -> UserId:
        """Create a user. Raises DuplicateUsernameError if the username is taken."""
        check_credentials(username, password)
        user = User(
            username=username.strip(),
            password_hash=self.hasher.hash(password),
            name=name,
        )
        user_id = await self.users.create(user)
        logger.info("User registered", extra={"user_id": user_id})
        return user_id

    async def login(self, username: str, password: str) -> str:
        """Exchange credentials for a session token."""
        user = await self.users.find_by_username(username.strip())
        if user is None or not self.hasher.verify(password, user.password_hash):
            logger.warning("Login failed")
            raise InvalidCredentialsError()
        return self.tokens.issue(user.id)

    async def authenticate(self, token: str) -> UserId:
        return self.tokens.validate(token)
