"""Input Validation: pure checks run before any storage access.

Invariants:
    - All functions are PURE: no IO, no async, no DB
    - Raise InputValidationError on violation, return None on success
    - A patch with no fields set is rejected
    - A present title/description must contain non-whitespace text
"""

from tasklist.core.entities import ListPatch, ItemPatch
from tasklist.core.errors import InputValidationError


def check_credentials(username: str, password: str) -> None:
    """Reject blank usernames and empty passwords before hashing."""
    if not username or not username.strip():
        raise InputValidationError("username cannot be empty", field="username")
    if not password:
        raise InputValidationError("password cannot be empty", field="password")


def check_list_patch(patch: ListPatch) -> None:
    _check_not_empty(patch.changes())
    _check_text_fields(patch.title, patch.description)


def check_item_patch(patch: ItemPatch) -> None:
    _check_not_empty(patch.changes())
    _check_text_fields(patch.title, patch.description)


def _check_not_empty(changes: dict) -> None:
    if not changes:
        raise InputValidationError("update has no values")


def _check_text_fields(title: str | None, description: str | None) -> None:
    if title is not None and not title.strip():
        raise InputValidationError("title cannot be empty", field="title")
    if description is not None and not description.strip():
        raise InputValidationError("description cannot be empty", field="description")
