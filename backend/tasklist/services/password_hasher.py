"""Password Hasher: deterministic, salted one-way digest of plaintext passwords.

Invariants:
    - hash() is deterministic: same plaintext + same salt -> same digest
    - Digest is fixed-length hex; plaintext is never stored or logged
    - verify() compares in constant time
    - Salt is injected from configuration, never hard-coded
"""

import hashlib
import secrets
from typing import Protocol

from tasklist.core.errors import ConfigurationError


class PasswordHasher(Protocol):
    def hash(self, plaintext: str) -> str: ...
    def verify(self, plaintext: str, password_hash: str) -> bool: ...


class SaltedPasswordHasher:
    """PBKDF2-SHA256 over a process-wide salt."""

    def __init__(self, salt: str, iterations: int = 100_000):
        if not salt:
            raise ConfigurationError("Password salt must not be empty", "password_salt")
        if iterations < 1:
            raise ConfigurationError(
                "Password hash iterations must be positive", "password_hash_iterations",
            )
        self._salt = salt.encode("utf-8")
        self._iterations = iterations

    def hash(self, plaintext: str) -> str:
        hash_bytes = hashlib.pbkdf2_hmac(
            "sha256",
            plaintext.encode("utf-8"),
            self._salt,
            iterations=self._iterations,
        )
        return hash_bytes.hex()

    def verify(self, plaintext: str, password_hash: str) -> bool:
        """Verify a password against its stored hash."""
        return secrets.compare_digest(self.hash(plaintext), password_hash)
