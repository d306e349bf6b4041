"""Path/body 식별자 파싱."""

from uuid import UUID

from apps.notes.application.common.exceptions import InvalidInputError


def parse_id(raw: str, error_message: str) -> UUID:
    try:
        return UUID(raw)
    except ValueError as e:
        raise InvalidInputError(error_message) from e
