"""Tests for the example user/todo payload models."""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from recordstore_lite.domain.records import (
    Todo,
    TodoPatch,
    User,
    UserPatch,
)


def test_user_is_frozen():
    user = User(name="jdoe", email="j@x.com")
    with pytest.raises(ValidationError):
        user.name = "other"  # type: ignore[misc]


def test_user_requires_both_fields():
    with pytest.raises(ValidationError):
        User(name="jdoe")  # type: ignore[call-arg]


def test_todo_defaults():
    todo = Todo(title="Learn")
    assert todo.description == ""
    assert todo.done is False


def test_patch_rejects_unknown_fields():
    with pytest.raises(ValidationError):
        UserPatch(phone="123")  # type: ignore[call-arg]
    with pytest.raises(ValidationError):
        TodoPatch(priority=1)  # type: ignore[call-arg]


def test_patch_tracks_set_fields():
    patch = UserPatch(email="j2@x.com")
    assert patch.model_fields_set == {"email"}

