"""Tests for patch normalization and partial-update merging.

Covers: dict, dataclass and pydantic records; Mapping and pydantic
patches; unknown fields; unsupported record types; no mutation of the
original record.
"""
from __future__ import annotations

import pytest

from recordstore_lite.domain.records import Todo, TodoPatch, User, UserPatch
from recordstore_lite.store.merge import apply_patch, patch_fields


# --- patch_fields ---

def test_mapping_patch_keeps_every_key_including_none():
    assert patch_fields({"name": "B", "email": None}) == {"name": "B", "email": None}


def test_pydantic_patch_only_explicitly_set_fields():
    assert patch_fields(UserPatch(name="B")) == {"name": "B"}
    assert patch_fields(UserPatch()) == {}


def test_pydantic_patch_explicit_none_is_not_supplied():
    """JSON null on a patch field means "leave it alone", same as absent."""
    assert patch_fields(UserPatch(email=None)) == {}
    assert patch_fields(
        UserPatch.model_validate({"name": None, "email": "b@x.com"})
    ) == {"email": "b@x.com"}


def test_patch_fields_rejects_other_types():
    with pytest.raises(TypeError):
        patch_fields([("name", "B")])  # type: ignore[arg-type]


# --- apply_patch ---

def test_dict_record_partial_merge():
    record = {"name": "A", "email": "a@x.com"}
    merged = apply_patch(record, {"name": "B"})
    assert merged == {"name": "B", "email": "a@x.com"}
    # Old record untouched
    assert record == {"name": "A", "email": "a@x.com"}


def test_dict_record_accepts_new_keys():
    """Dict records have no schema, so a new key is just added."""
    assert apply_patch({"a": 1}, {"b": 2}) == {"a": 1, "b": 2}


def test_empty_patch_returns_same_record():
    record = {"name": "A"}
    assert apply_patch(record, {}) is record


def test_pydantic_record_partial_merge():
    user = User(name="A", email="a@x.com")
    merged = apply_patch(user, patch_fields(UserPatch(name="B")))
    assert merged == User(name="B", email="a@x.com")
    assert user.name == "A"


def test_pydantic_record_wrong_type_rejected():
    user = User(name="A", email="a@x.com")
    with pytest.raises(ValueError):
        apply_patch(user, {"email": 123})
    with pytest.raises(ValueError):
        apply_patch(user, {"name": None})


def test_pydantic_record_unknown_field():
    with pytest.raises(ValueError, match="phone"):
        apply_patch(User(name="A", email="a@x.com"), {"phone": "123"})


def test_todo_done_flag_merge():
    todo = Todo(title="t", description="d")
    merged = apply_patch(todo, patch_fields(TodoPatch(done=True)))
    assert merged.done is True
    assert merged.title == "t"
    assert merged.description == "d"


def test_dataclass_record_partial_merge(contact):
    merged = apply_patch(contact, {"email": "b@x.com"})
    assert merged.name == "A"
    assert merged.email == "b@x.com"
    assert contact.email == "a@x.com"


def test_dataclass_record_unknown_field(contact):
    with pytest.raises(ValueError, match="phone"):
        apply_patch(contact, {"phone": "123"})


def test_dataclass_non_init_field_rejected(contact):
    with pytest.raises(ValueError, match="revision"):
        apply_patch(contact, {"revision": 3})


def test_unsupported_record_type():
    with pytest.raises(TypeError):
        apply_patch("just a string", {"name": "B"})
