"""Token Service: issues and validates signed, time-bound session tokens.

Invariants:
    - Token lifecycle: ISSUED -> VALID -> EXPIRED (terminal); no revocation
    - exp = iat + TTL; a token is valid for clock times in [iat, exp)
    - validate() never touches storage: the token is the source of truth
    - Signature checked before expiry: a forged expired token is INVALID, not EXPIRED
    - Every segment must be canonical base64url, so any altered character fails
    - Signing key misconfiguration raises ConfigurationError at construction (startup)

Design Decisions:
    - JWT via PyJWT with HMAC algorithms only; claims: sub, iat, exp, type
    - Expiry checked against an injectable clock instead of PyJWT's wall clock
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable

import jwt
from jwt.utils import base64url_decode, base64url_encode

from tasklist.core.domain_types import UserId, TokenType
from tasklist.core.errors import (
    ConfigurationError, ExpiredTokenError, InvalidTokenError,
)

logger = logging.getLogger(__name__)

HMAC_ALGORITHMS = ("HS256", "HS384", "HS512")
MIN_SECRET_BYTES = 32
REQUIRED_CLAIMS = ["sub", "iat", "exp", "type"]


def utc_now() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(timezone.utc)


class TokenService:
    """Stateless signer/verifier for session tokens."""

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        ttl: timedelta = timedelta(hours=12),
        clock: Callable[[], datetime] = utc_now,
    ):
        if algorithm not in HMAC_ALGORITHMS:
            raise ConfigurationError(
                f"Unsupported token algorithm '{algorithm}'", "jwt_algorithm",
            )
        if len(secret_key.encode("utf-8")) < MIN_SECRET_BYTES:
            raise ConfigurationError(
                f"Token signing key must be at least {MIN_SECRET_BYTES} bytes",
                "jwt_secret_key",
            )
        if ttl <= timedelta(0):
            raise ConfigurationError("Token TTL must be positive", "token_ttl_hours")
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._ttl = ttl
        self._clock = clock

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def issue(self, user_id: UserId) -> str:
        """Mint a signed token for user_id expiring TTL from now."""
        now = self._clock()
        payload = {
            "sub": str(user_id),
            "iat": now.timestamp(),
            "exp": (now + self._ttl).timestamp(),
            "type": TokenType.ACCESS.value,
        }
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def validate(self, token: str) -> UserId:
        """
        Verify a token and return the user id it was issued for.

        Raises:
            InvalidTokenError: bad signature, malformed structure or claims
            ExpiredTokenError: signature valid but clock >= exp
        """
        _check_canonical(token)
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={
                    "verify_exp": False,
                    "verify_iat": False,
                    "require": REQUIRED_CLAIMS,
                },
            )
        except jwt.InvalidTokenError as e:
            logger.debug(f"Token rejected: {e}")
            raise InvalidTokenError(f"Invalid token: {e}")

        if payload["type"] != TokenType.ACCESS.value:
            raise InvalidTokenError(f"Expected access token, got {payload['type']!r}")

        expires_at = payload["exp"]
        if isinstance(expires_at, bool) or not isinstance(expires_at, (int, float)):
            raise InvalidTokenError("Invalid token: exp must be a number")
        if self._clock().timestamp() >= expires_at:
            raise ExpiredTokenError()

        try:
            return UserId(int(payload["sub"]))
        except (TypeError, ValueError):
            raise InvalidTokenError("Invalid token: sub is not a user id")


def _check_canonical(token: str) -> None:
    """Reject tokens whose segments would not re-encode to the same text."""
    if not isinstance(token, str) or not token.isascii():
        raise InvalidTokenError("Invalid token: malformed")
    segments = token.split(".")
    if len(segments) != 3:
        raise InvalidTokenError("Invalid token: expected 3 segments")
    for segment in segments:
        raw = segment.encode("ascii")
        try:
            decoded = base64url_decode(raw)
        except ValueError:
            raise InvalidTokenError("Invalid token: bad encoding")
        if base64url_encode(decoded) != raw:
            raise InvalidTokenError("Invalid token: non-canonical encoding")
