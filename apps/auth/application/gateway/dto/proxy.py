"""Auth Proxy DTOs."""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class AuthRequest:
    """인증 핸들러로 전달되는 요청.

    Attributes:
        method: HTTP 메서드 (GET, POST)
        path: 요청 경로 (예: /api/auth/device/approve)
        query: 원본 쿼리 문자열 (``?`` 제외)
        headers: 헤더 목록 (중복 키 허용)
        body: 원본 바디
        client_host: 클라이언트 IP
    """

    method: str
    path: str
    query: str = ""
    headers: tuple[tuple[str, str], ...] = ()
    body: bytes = b""
    client_host: str | None = None


@dataclass(frozen=True, slots=True)
class AuthResponse:
    """인증 핸들러 응답.

    Set-Cookie처럼 같은 키가 여러 번 올 수 있으므로 헤더는 목록으로 유지합니다.
    """

    status_code: int
    headers: tuple[tuple[str, str], ...] = field(default_factory=tuple)
    body: bytes = b""
