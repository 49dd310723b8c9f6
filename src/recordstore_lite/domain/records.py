"""Example record payloads: users and todos.

The store never looks inside a record. These models exist for the
repositories in recordstore_lite.repositories and for the demo CLI,
and they show the two halves of the partial-update contract:

  - User / Todo are the full records. frozen=True so a record handed
    out by get() can't be changed behind the store's back.
  - UserPatch / TodoPatch have every field optional. Only fields the
    caller actually set count as supplied; pydantic tracks that in
    model_fields_set, and merge.patch_fields() reads it through
    model_dump(exclude_unset=True, exclude_none=True).

So UserPatch(email="j2@x.com") changes the email and leaves the name
alone. An explicit None (e.g. JSON null) also leaves the field alone:
patch_fields() drops None with exclude_none=True. None of these
fields is nullable, so there is no "clear" to express.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from recordstore_lite.domain.types import RecordId


class User(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    email: str


class UserPatch(BaseModel):
    """Partial user update. Unset fields are left unchanged."""
    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    email: str | None = None


class UserView(BaseModel):
    """A stored user together with its id."""
    model_config = ConfigDict(frozen=True)

    id: RecordId
    name: str
    email: str


class Todo(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    description: str = ""
    done: bool = False


class TodoPatch(BaseModel):
    """Partial todo update. Unset fields are left unchanged."""
    model_config = ConfigDict(extra="forbid")

    title: str | None = None
    description: str | None = None
    done: bool | None = None


class TodoView(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: RecordId
    title: str
    description: str
    done: bool
