"""Domain Types: identity types that replace bare ints across the codebase.

Invariants:
    - UserId, ListId, ItemId wrap store-assigned integers
    - The token type claim is an Enum (no raw string matching)
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
ListId = NewType("ListId", int)
ItemId = NewType("ItemId", int)


# ─── Enums ───────────────────────────────────────────────────────

class TokenType(str, Enum):
    """Value of the `type` claim. Only access tokens exist (no refresh rotation)."""
    ACCESS = "access"
