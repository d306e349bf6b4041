"""JOSE Token Verifier.

TokenVerifier 포트의 구현체입니다.
서명, exp/nbf/iat를 검증하고, 설정된 경우 aud/iss도 검증합니다.
aud 클레임은 문자열과 문자열 배열 모두 허용됩니다.

RSA/EC 키는 python-jose로, OKP(Ed25519) 키는 PyJWT로 검증합니다.
인증 서버의 기본 키 쌍이 EdDSA이며 python-jose는 OKP를 지원하지 않습니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import jwt as pyjwt
from jose import jwt
from jose.exceptions import JOSEError

from apps.resource.application.auth import AuthenticatedUser, InvalidTokenError

if TYPE_CHECKING:
    from apps.resource.application.auth import KeySource

DEFAULT_ALGORITHM = "RS256"
OKP_KEY_TYPE = "OKP"


class JoseTokenVerifier:
    def __init__(
        self,
        key_source: "KeySource",
        *,
        audience: str | None = None,
        issuer: str | None = None,
    ) -> None:
        self._key_source = key_source
        self._audience = audience
        self._issuer = issuer

    async def verify(self, token: str) -> AuthenticatedUser:
        try:
            header = jwt.get_unverified_header(token)
        except JOSEError as e:
            raise InvalidTokenError(str(e)) from e

        key = await self._key_source.get_key(header.get("kid"))
        if key.get("kty") == OKP_KEY_TYPE:
            claims = self._decode_okp(token, key)
        else:
            claims = self._decode(token, key, key.get("alg") or header.get("alg"))

        return AuthenticatedUser.from_claims(claims)

    def _decode(self, token: str, key: dict[str, Any], algorithm: str | None) -> dict[str, Any]:
        try:
            return jwt.decode(
                token,
                key,
                algorithms=[algorithm or DEFAULT_ALGORITHM],
                audience=self._audience,
                issuer=self._issuer,
                options={"verify_aud": self._audience is not None},
            )
        except JOSEError as e:
            raise InvalidTokenError(str(e)) from e

    def _decode_okp(self, token: str, key: dict[str, Any]) -> dict[str, Any]:
        """Ed25519 서명 토큰 검증."""
        try:
            signing_key = pyjwt.PyJWK(key)
            return pyjwt.decode(
                token,
                signing_key.key,
                algorithms=[signing_key.algorithm_name],
                audience=self._audience,
                issuer=self._issuer,
                options={"verify_aud": self._audience is not None},
            )
        except pyjwt.PyJWTError as e:
            raise InvalidTokenError(str(e)) from e
