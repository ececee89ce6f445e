"""Domain Entities: patch semantics and identity types."""

from tasklist.core.domain_types import UserId, ListId, ItemId, TokenType
from tasklist.core.entities import ListPatch, ItemPatch, TodoItem


def test_patch_changes_skip_unset_fields():
    assert ListPatch().changes() == {}
    assert ListPatch(title="Food").changes() == {"title": "Food"}


def test_item_patch_keeps_false_done():
    assert ItemPatch(done=False).changes() == {"done": False}


def test_item_defaults():
    item = TodoItem(title="Milk")
    assert item.done is False
    assert item.description == ""
    assert item.list_id is None


def test_identity_types_wrap_int():
    assert UserId(1) == ListId(1) == ItemId(1) == 1


def test_token_type_serializes_to_string():
    assert TokenType.ACCESS.value == "access"
    assert TokenType("access") is TokenType.ACCESS


def test_access_is_the_only_token_type():
    assert list(TokenType) == [TokenType.ACCESS]
