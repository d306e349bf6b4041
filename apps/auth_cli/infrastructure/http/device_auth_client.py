"""HTTPX Device Auth Client.

DeviceAuthGateway 포트의 httpx 구현체입니다.
인증 서버의 RFC 8628 엔드포인트를 호출합니다.

- POST {hostname}/api/auth/device/code
- POST {hostname}/api/auth/device/token
- GET  {hostname}/api/auth/get-session
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable

import httpx

from apps.auth_cli.application.dto import DeviceAuthorization, SessionUser, TokenSet
from apps.auth_cli.application.exceptions import CliError, DeviceFlowError

logger = logging.getLogger(__name__)

DEVICE_CODE_GRANT_TYPE = "urn:ietf:params:oauth:grant-type:device_code"
SLOW_DOWN_INCREMENT = 5

DEVICE_CODE_PATH = "/api/auth/device/code"
DEVICE_TOKEN_PATH = "/api/auth/device/token"
SESSION_PATH = "/api/auth/get-session"


class HttpxDeviceAuthClient:
    """디바이스 인가 플로우 HTTP 클라이언트.

    sleep/clock은 폴링 테스트를 위해 주입할 수 있습니다.
    """

    def __init__(
        self,
        client: httpx.Client,
        hostname: str,
        client_id: str,
        scope: str,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._client = client
        self._hostname = hostname
        self._client_id = client_id
        self._scope = scope
        self._sleep = sleep
        self._clock = clock

    def _post(self, path: str, payload: dict[str, str]) -> httpx.Response:
        try:
            return self._client.post(f"{self._hostname}{path}", json=payload)
        except httpx.HTTPError as e:
            raise CliError(f"request to {self._hostname} failed: {e}") from e

    def request_device_code(self) -> DeviceAuthorization:
        response = self._post(
            DEVICE_CODE_PATH,
            {"client_id": self._client_id, "scope": self._scope},
        )
        if response.status_code != 200:
            raise CliError(f"unexpected status {response.status_code}: {response.text}")

        data = _json_body(response)
        try:
            return DeviceAuthorization.from_response(data)
        except KeyError as e:
            raise CliError(f"device code response missing {e.args[0]}") from e

    def poll_for_token(self, device_code: str, interval: int, timeout: float) -> TokenSet:
        """승인될 때까지 interval 간격으로 토큰을 요청합니다.

        첫 요청도 interval만큼 기다린 뒤 보냅니다.

        Raises:
            DeviceFlowError: access_denied, expired_token, 기타 OAuth 에러, 타임아웃
        """
        deadline = self._clock() + timeout
        wait = max(interval, 1)

        while self._clock() + wait <= deadline:
            self._sleep(wait)
            try:
                return self._request_token(device_code)
            except DeviceFlowError as e:
                if e.code == "authorization_pending":
                    continue
                if e.code == "slow_down":
                    wait += SLOW_DOWN_INCREMENT
                    logger.debug("Polling slowed down", extra={"interval": wait})
                    continue
                if e.code == "access_denied":
                    raise DeviceFlowError("authorization denied by user", code=e.code) from e
                if e.code == "expired_token":
                    raise DeviceFlowError(
                        "device code expired, please try again", code=e.code
                    ) from e
                raise

        raise DeviceFlowError("timed out waiting for authorization")

    def _request_token(self, device_code: str) -> TokenSet:
        response = self._post(
            DEVICE_TOKEN_PATH,
            {
                "grant_type": DEVICE_CODE_GRANT_TYPE,
                "device_code": device_code,
                "client_id": self._client_id,
            },
        )

        if response.status_code != 200:
            error = _oauth_error(response)
            if error is None:
                raise CliError(f"unexpected status {response.status_code}: {response.text}")
            code, description = error
            message = f"{code}: {description}" if description else code
            raise DeviceFlowError(message, code=code)

        data = _json_body(response)
        if not data.get("access_token"):
            raise CliError("token response missing access_token")
        return TokenSet.from_response(data)

    def get_session(self, access_token: str) -> SessionUser | None:
        try:
            response = self._client.get(
                f"{self._hostname}{SESSION_PATH}",
                headers={"Authorization": f"Bearer {access_token}"},
            )
        except httpx.HTTPError as e:
            raise CliError(f"session request failed: {e}") from e

        if response.status_code != 200:
            raise CliError(f"unexpected status {response.status_code}")

        # 세션이 없으면 본문이 null
        user = _json_body(response).get("user")
        if not user:
            return None
        return SessionUser(
            id=str(user.get("id", "")),
            email=user.get("email") or None,
            name=user.get("name") or None,
        )


def _json_body(response: httpx.Response) -> dict[str, Any]:
    try:
        data = response.json()
    except ValueError as e:
        raise CliError("invalid JSON response from auth server") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise CliError("invalid JSON response from auth server")
    return data


def _oauth_error(response: httpx.Response) -> tuple[str, str] | None:
    """``{"error": ..., "error_description": ...}`` 본문 파싱."""
    try:
        body = response.json()
    except ValueError:
        return None
    if not isinstance(body, dict) or not body.get("error"):
        return None
    return str(body["error"]), str(body.get("error_description") or "")
