"""Partial-update merge: apply only the supplied fields to a record.

What counts as "supplied":
  - Mapping patch: every key in the mapping is supplied, even if its
    value is None.
  - pydantic patch: only fields the caller explicitly set to a
    non-None value (model_dump(exclude_unset=True, exclude_none=True)).

The merge never mutates the old record. It returns a new one, so a
record a reader already got from the store stays a stable snapshot:

    {**record, **fields}                 for dict-like records
    Model.model_validate({...})          for pydantic models (revalidated)
    dataclasses.replace(record, ...)     for dataclasses

Unknown field names are rejected with ValueError before anything is
built, so the store can call this inside its lock and either swap in
the result or leave the entry untouched.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from pydantic import BaseModel

R = TypeVar("R")


def patch_fields(patch: Mapping[str, Any] | BaseModel) -> dict[str, Any]:
    """Normalize a patch into a dict of supplied field -> value."""
    if isinstance(patch, BaseModel):
        # None on a pydantic patch means "not supplied", same as unset.
        return patch.model_dump(exclude_unset=True, exclude_none=True)
    if isinstance(patch, Mapping):
        return dict(patch)
    raise TypeError(
        f"patch must be a Mapping or a pydantic model, got {type(patch).__name__}"
    )


def apply_patch(record: R, fields: Mapping[str, Any]) -> R:
    """Return a copy of `record` with `fields` overwritten.

    Raises ValueError for a field the record type doesn't have or a
    value pydantic rejects (ValidationError is a ValueError), and
    TypeError for a record type we don't know how to copy.
    """
    if not fields:
        return record

    if isinstance(record, BaseModel):
        _check_known(type(record).__name__, type(record).model_fields, fields)
        # Rebuild through validation so a bad value can't reach the store.
        return type(record).model_validate({**record.model_dump(), **fields})

    if dataclasses.is_dataclass(record) and not isinstance(record, type):
        known = {f.name for f in dataclasses.fields(record) if f.init}
        _check_known(type(record).__name__, known, fields)
        return dataclasses.replace(record, **fields)

    if isinstance(record, Mapping):
        return {**record, **fields}  # type: ignore[return-value]

    raise TypeError(
        f"don't know how to merge a patch into {type(record).__name__}; "
        "store dicts, dataclasses or pydantic models"
    )


def _check_known(
    type_name: str, known: Iterable[str], fields: Mapping[str, Any]
) -> None:
    unknown = sorted(set(fields) - set(known))
    if unknown:
        raise ValueError(f"{type_name} has no field(s): {', '.join(unknown)}")
