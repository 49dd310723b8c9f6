"""Domain types for recordstore-lite.

Re-exports the public types for convenient access:
    from recordstore_lite.domain import NotFound, Ok, RecordId, User
"""
from recordstore_lite.domain.records import (
    Todo,
    TodoPatch,
    TodoView,
    User,
    UserPatch,
    UserView,
)
from recordstore_lite.domain.results import (
    NotFound,
    Ok,
    RecordNotFoundError,
    Result,
    unwrap,
)
from recordstore_lite.domain.types import Patch, RecordId

__all__ = [
    "Todo",
    "TodoPatch",
    "TodoView",
    "User",
    "UserPatch",
    "UserView",
    "NotFound",
    "Ok",
    "RecordNotFoundError",
    "Result",
    "unwrap",
    "Patch",
    "RecordId",
]
