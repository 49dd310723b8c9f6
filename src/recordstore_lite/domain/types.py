"""Shared type aliases used across the store."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeAlias

RecordId: TypeAlias = int  # issued by the store, starts at 1, never reused
Patch: TypeAlias = Mapping[str, Any]
