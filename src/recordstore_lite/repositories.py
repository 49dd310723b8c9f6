"""Typed repositories over an async record store.

The store deals in bare (id, record) pairs. Code that serves users or
todos usually wants the id folded into the object it hands back, and
wants update calls in its own vocabulary. These two classes do that
translation and nothing else: every call is exactly one store call, so
atomicity and NotFound behaviour are the store's.

    users = UserRepository()
    uid = await users.create_user(User(name="jdoe", email="j@x.com"))
    await users.update_user(uid, UserPatch(email="j2@x.com"))
    view = await users.get_user(uid)    # UserView(id=1, name="jdoe", ...)

Both accept any AsyncRecordStoreBase, so a durable backend can replace
the in-memory default without touching callers.
"""
from __future__ import annotations

from recordstore_lite.domain.records import (
    Todo,
    TodoPatch,
    TodoView,
    User,
    UserPatch,
    UserView,
)
from recordstore_lite.domain.results import NotFound, Ok
from recordstore_lite.domain.types import RecordId
from recordstore_lite.store.async_store import AsyncRecordStore
from recordstore_lite.store.base import AsyncRecordStoreBase


class UserRepository:
    """Users keyed by store-assigned ids.

    Args:
        store: backing store. Defaults to a fresh AsyncRecordStore.
    """

    def __init__(self, store: AsyncRecordStoreBase[User] | None = None) -> None:
        self._store: AsyncRecordStoreBase[User] = (
            store if store is not None else AsyncRecordStore()
        )

    @property
    def store(self) -> AsyncRecordStoreBase[User]:
        return self._store

    async def list_users(self) -> list[UserView]:
        return [_user_view(uid, user) for uid, user in await self._store.list()]

    async def get_user(self, user_id: RecordId) -> UserView | NotFound:
        result = await self._store.get(user_id)
        if isinstance(result, NotFound):
            return result
        return _user_view(user_id, result)

    async def create_user(self, user: User) -> RecordId:
        return await self._store.create(user)

    async def update_user(self, user_id: RecordId, patch: UserPatch) -> Ok | NotFound:
        return await self._store.update(user_id, patch)

    async def delete_user(self, user_id: RecordId) -> Ok | NotFound:
        return await self._store.delete(user_id)


class TodoRepository:
    """Todos keyed by store-assigned ids. New todos start not done."""

    def __init__(self, store: AsyncRecordStoreBase[Todo] | None = None) -> None:
        self._store: AsyncRecordStoreBase[Todo] = (
            store if store is not None else AsyncRecordStore()
        )

    async def get_all(self) -> list[TodoView]:
        return [_todo_view(tid, todo) for tid, todo in await self._store.list()]

    async def create(self, title: str, description: str) -> TodoView:
        todo = Todo(title=title, description=description, done=False)
        todo_id = await self._store.create(todo)
        return _todo_view(todo_id, todo)

    async def get(self, todo_id: RecordId) -> TodoView | NotFound:
        result = await self._store.get(todo_id)
        if isinstance(result, NotFound):
            return result
        return _todo_view(todo_id, result)

    async def update(
        self,
        todo_id: RecordId,
        title: str | None = None,
        description: str | None = None,
        done: bool | None = None,
    ) -> Ok | NotFound:
        """Change the given fields. None means "leave as is" here.

        A todo has no nullable fields, so None is never a value anyone
        wants to write. Pass a TodoPatch to the store directly if that
        ever changes.
        """
        supplied = {
            name: value
            for name, value in (
                ("title", title), ("description", description), ("done", done),
            )
            if value is not None
        }
        return await self._store.update(todo_id, TodoPatch(**supplied))

    async def delete(self, todo_id: RecordId) -> Ok | NotFound:
        return await self._store.delete(todo_id)


def _user_view(user_id: RecordId, user: User) -> UserView:
    return UserView(id=user_id, name=user.name, email=user.email)


def _todo_view(todo_id: RecordId, todo: Todo) -> TodoView:
    return TodoView(
        id=todo_id, title=todo.title, description=todo.description, done=todo.done,
    )
