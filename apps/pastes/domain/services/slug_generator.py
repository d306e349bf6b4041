"""Slug generator - URL-safe random identifiers for pastes."""

from __future__ import annotations

import base64
import secrets

DEFAULT_SLUG_LENGTH = 8


class SlugGenerator:
    """CSPRNG 기반 slug 생성기.

    length 바이트의 난수를 URL-safe base64로 인코딩한 뒤 앞 length자를 사용합니다.
    """

    def __init__(self, length: int = DEFAULT_SLUG_LENGTH) -> None:
        if length <= 0:
            raise ValueError("slug length must be positive")
        self._length = length

    def generate(self) -> str:
        raw = secrets.token_bytes(self._length)
        return base64.urlsafe_b64encode(raw).decode("ascii")[: self._length]
