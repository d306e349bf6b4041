"""Test Configuration and Fixtures.

테스트용 RSA/Ed25519 키로 JWKS와 JWT를 만듭니다.
"""

from __future__ import annotations

import base64
import time
from dataclasses import dataclass
from typing import Any, Callable

import jwt as pyjwt
import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ed25519, rsa
from jose import jwk, jwt

from apps.resource.setup.config import Settings


@dataclass(frozen=True)
class SigningKey:
    kid: str
    private_pem: bytes
    public_jwk: dict[str, Any]

    def sign(self, claims: dict[str, Any], *, kid: str | None = None) -> str:
        return jwt.encode(
            claims,
            self.private_pem,
            algorithm="RS256",
            headers={"kid": kid or self.kid},
        )


def _generate_signing_key(kid: str) -> SigningKey:
    private_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    private_pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )
    public_pem = private_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )
    public_jwk = {**jwk.construct(public_pem, algorithm="RS256").to_dict(), "kid": kid, "use": "sig"}
    return SigningKey(kid=kid, private_pem=private_pem, public_jwk=public_jwk)


@dataclass(frozen=True)
class OkpSigningKey:
    """Ed25519 키 (인증 서버 기본 키 쌍)."""

    kid: str
    private_key: ed25519.Ed25519PrivateKey
    public_jwk: dict[str, Any]

    def sign(self, claims: dict[str, Any]) -> str:
        return pyjwt.encode(claims, self.private_key, algorithm="EdDSA", headers={"kid": self.kid})


def _generate_okp_key(kid: str) -> OkpSigningKey:
    private_key = ed25519.Ed25519PrivateKey.generate()
    raw = private_key.public_key().public_bytes(
        encoding=serialization.Encoding.Raw,
        format=serialization.PublicFormat.Raw,
    )
    public_jwk = {
        "kty": "OKP",
        "crv": "Ed25519",
        "alg": "EdDSA",
        "x": base64.urlsafe_b64encode(raw).rstrip(b"=").decode(),
        "kid": kid,
    }
    return OkpSigningKey(kid=kid, private_key=private_key, public_jwk=public_jwk)


@pytest.fixture(scope="session")
def okp_key() -> OkpSigningKey:
    return _generate_okp_key("ed-1")


@pytest.fixture(scope="session")
def signing_key() -> SigningKey:
    return _generate_signing_key("key-1")


@pytest.fixture(scope="session")
def rotated_key() -> SigningKey:
    """키 교체 시나리오용 두 번째 키."""
    return _generate_signing_key("key-2")


@pytest.fixture
def make_claims() -> Callable[..., dict[str, Any]]:
    def _make(**overrides: Any) -> dict[str, Any]:
        now = int(time.time())
        claims = {
            "id": "user-1",
            "sub": "user-1",
            "email": "dev@example.com",
            "iat": now,
            "exp": now + 900,
        }
        claims.update(overrides)
        return {k: v for k, v in claims.items() if v is not None}

    return _make


@pytest.fixture
def settings() -> Settings:
    return Settings(auth_service_url="http://auth.test")
