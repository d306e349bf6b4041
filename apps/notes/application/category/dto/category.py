"""Category DTOs."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, slots=True)
class CreateCategoryInput:
    name: str


@dataclass(frozen=True, slots=True)
class UpdateCategoryInput:
    category_id: UUID
    name: str
