"""User code helpers.

디바이스 인가 플로우에서 CLI가 표시하고 사용자가 브라우저에 입력하는 코드입니다.
표시 형식은 ``ABCD-1234`` (유효 문자 8자, 4자 뒤 하이픈).

device.html 인라인 스크립트의 입력 포맷/정규화 로직과 동일한 규칙을 따릅니다.
"""

from __future__ import annotations

import re

USER_CODE_LENGTH = 8
USER_CODE_GROUP_SIZE = 4
USER_CODE_SEPARATOR = "-"

_NON_ALNUM = re.compile(r"[^A-Z0-9]")


def normalize_user_code(raw: str) -> str:
    """승인 API로 전송할 형태로 정규화 (trim, 하이픈 제거, 대문자).

    예시:
        "abcd-1234" → "ABCD1234"
    """
    return raw.strip().replace(USER_CODE_SEPARATOR, "").upper()


def format_user_code_input(raw: str) -> str:
    """입력 필드 표시용 포맷.

    대문자 변환 후 영숫자 외 문자를 제거하고, 4자를 넘으면 하이픈을 삽입합니다.
    유효 문자는 최대 8자까지만 유지합니다.

    예시:
        "abcd1234" → "ABCD-1234"
        "ab"       → "AB"
    """
    value = _NON_ALNUM.sub("", raw.upper())
    if len(value) > USER_CODE_GROUP_SIZE:
        value = (
            value[:USER_CODE_GROUP_SIZE]
            + USER_CODE_SEPARATOR
            + value[USER_CODE_GROUP_SIZE:USER_CODE_LENGTH]
        )
    return value
