"""Note DTOs."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, slots=True)
class CreateNoteInput:
    category_id: UUID
    title: str
    content: str = ""


@dataclass(frozen=True, slots=True)
class UpdateNoteInput:
    note_id: UUID
    category_id: UUID
    title: str
    content: str = ""
