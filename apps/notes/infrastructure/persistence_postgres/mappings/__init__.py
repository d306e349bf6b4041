"""ORM Mappings."""

from apps.notes.infrastructure.persistence_postgres.mappings.category import (
    categories_table,
    start_category_mapper,
)
from apps.notes.infrastructure.persistence_postgres.mappings.note import (
    notes_table,
    start_note_mapper,
)


def start_mappers() -> None:
    """모든 매퍼 시작."""
    start_category_mapper()
    start_note_mapper()


__all__ = ["categories_table", "notes_table", "start_mappers"]
