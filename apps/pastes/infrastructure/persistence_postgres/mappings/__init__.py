"""ORM Mappings."""

from apps.pastes.infrastructure.persistence_postgres.mappings.paste import (
    pastes_table,
    start_paste_mapper,
)


def start_mappers() -> None:
    """모든 매퍼 시작."""
    start_paste_mapper()


__all__ = ["pastes_table", "start_mappers", "start_paste_mapper"]
