"""Pastes HTTP Route Tests.

dependency_overrides로 인메모리 게이트웨이를 주입합니다.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from apps.pastes.application.common.exceptions import PasteStorageError
from apps.pastes.application.paste.commands import CreatePasteInteractor, DeletePasteInteractor
from apps.pastes.application.paste.queries import GetPasteQuery, ListPastesQuery
from apps.pastes.infrastructure.persistence_postgres.adapters import SqlaPasteQueryGateway
from apps.pastes.main import create_app
from apps.pastes.presentation.http.controllers.pastes import resolve_page
from apps.pastes.setup.dependencies import (
    get_create_paste_interactor,
    get_delete_paste_interactor,
    get_get_paste_query,
    get_list_pastes_query,
)


@pytest.fixture
def client(gateway, mock_tx: AsyncMock, slug_generator: MagicMock, now: datetime) -> TestClient:
    app = create_app()
    clock = lambda: now  # noqa: E731
    app.dependency_overrides[get_create_paste_interactor] = lambda: CreatePasteInteractor(
        gateway, mock_tx, slug_generator, clock=clock
    )
    app.dependency_overrides[get_delete_paste_interactor] = lambda: DeletePasteInteractor(
        gateway, mock_tx
    )
    app.dependency_overrides[get_get_paste_query] = lambda: GetPasteQuery(gateway, clock=clock)
    app.dependency_overrides[get_list_pastes_query] = lambda: ListPastesQuery(
        gateway, clock=clock
    )
    return TestClient(app)


class TestCreatePaste:
    """POST /pastes 테스트."""

    def test_created(self, client: TestClient) -> None:
        # Act
        response = client.post(
            "/pastes",
            json={"title": "hello", "content": "print(1)", "language": "python"},
        )

        # Assert
        assert response.status_code == 201
        body = response.json()
        assert body["slug"] == "slug0001"
        assert body["title"] == "hello"
        assert body["language"] == "python"
        assert body["is_public"] is True
        assert "expires_at" not in body

    def test_defaults(self, client: TestClient) -> None:
        response = client.post("/pastes", json={"content": "x", "is_public": False})

        body = response.json()
        assert response.status_code == 201
        assert body["language"] == "plaintext"
        assert body["is_public"] is False
        assert "title" not in body

    def test_expiry(self, client: TestClient, now: datetime) -> None:
        response = client.post("/pastes", json={"content": "x", "expires_in_minutes": 60})

        expires_at = datetime.fromisoformat(response.json()["expires_at"].replace("Z", "+00:00"))
        assert expires_at == now + timedelta(minutes=60)

    def test_invalid_json(self, client: TestClient) -> None:
        response = client.post(
            "/pastes",
            content=b"{not json",
            headers={"content-type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "invalid request body"}

    def test_wrong_type(self, client: TestClient) -> None:
        response = client.post("/pastes", json={"content": 42})

        assert response.status_code == 400
        assert response.json() == {"error": "invalid request body"}

    def test_empty_content(self, client: TestClient) -> None:
        response = client.post("/pastes", json={"title": "only title", "content": ""})

        assert response.status_code == 400
        assert response.json() == {"error": "content is required"}

    def test_title_too_long(self, client: TestClient) -> None:
        response = client.post("/pastes", json={"title": "t" * 201, "content": "x"})

        assert response.status_code == 400
        assert "title" in response.json()["error"]

    def test_storage_failure(self, client: TestClient, mock_tx: AsyncMock) -> None:
        mock_tx.commit.side_effect = PasteStorageError("connection reset")

        response = client.post("/pastes", json={"content": "x"})

        assert response.status_code == 500
        assert response.json() == {"error": "failed to create paste"}

    def test_expiry_out_of_range(self, client: TestClient) -> None:
        response = client.post("/pastes", json={"content": "x", "expires_in_minutes": 10**10})

        assert response.status_code == 400
        assert response.json() == {"error": "expires_in_minutes is too large"}


class TestGetPaste:
    """GET /pastes/{slug} 테스트."""

    def test_found(self, client: TestClient, gateway, make_paste) -> None:
        gateway.pastes["abcDEF12"] = make_paste("abcDEF12")

        response = client.get("/pastes/abcDEF12")

        assert response.status_code == 200
        assert response.json()["content"] == "print('hello')"

    def test_not_found(self, client: TestClient) -> None:
        response = client.get("/pastes/missing1")

        assert response.status_code == 404
        assert response.json() == {"error": "paste not found"}

    def test_expired(self, client: TestClient, gateway, make_paste, now: datetime) -> None:
        gateway.pastes["old"] = make_paste("old", expires_at=now - timedelta(minutes=1))

        response = client.get("/pastes/old")

        assert response.status_code == 410
        assert response.json() == {"error": "paste has expired"}

    def test_storage_failure_hides_driver_error(self) -> None:
        """DB 오류 내용(SQL, 파라미터)은 응답에 노출되지 않음."""
        # Arrange
        session = AsyncMock()
        session.execute.side_effect = OperationalError(
            "SELECT pastes.id FROM pastes WHERE slug=$1",
            {"slug": "x"},
            Exception("password authentication failed for user pastebin"),
        )
        app = create_app()
        app.dependency_overrides[get_get_paste_query] = lambda: GetPasteQuery(
            SqlaPasteQueryGateway(session)
        )

        # Act
        response = TestClient(app).get("/pastes/x")

        # Assert
        assert response.status_code == 500
        assert response.json() == {"error": "failed to get paste"}
        assert "password" not in response.text


class TestListPastes:
    """GET /pastes 테스트."""

    def test_list(self, client: TestClient, gateway, make_paste) -> None:
        # Arrange
        gateway.pastes = {
            "first": make_paste("first", created_offset=timedelta(minutes=-5)),
            "second": make_paste("second", created_offset=timedelta(minutes=-1)),
            "hidden": make_paste("hidden", is_public=False),
        }

        # Act
        response = client.get("/pastes")

        # Assert
        body = response.json()
        assert response.status_code == 200
        assert body["limit"] == 20
        assert body["offset"] == 0
        assert [p["slug"] for p in body["pastes"]] == ["second", "first"]

    def test_empty(self, client: TestClient) -> None:
        assert client.get("/pastes").json() == {"pastes": [], "limit": 20, "offset": 0}

    def test_limit_and_offset(self, client: TestClient) -> None:
        body = client.get("/pastes", params={"limit": 10, "offset": 5}).json()

        assert (body["limit"], body["offset"]) == (10, 5)


class TestResolvePage:
    """limit/offset 해석 테스트."""

    @pytest.mark.parametrize(
        ("limit", "offset", "expected"),
        [
            (None, None, (20, 0)),
            ("1", "0", (1, 0)),
            ("100", "3", (100, 3)),
            ("0", "-1", (20, 0)),
            ("101", "abc", (20, 0)),
            ("ten", "7", (20, 7)),
        ],
    )
    def test_resolve(self, limit, offset, expected) -> None:
        page = resolve_page(limit, offset)

        assert (page.limit, page.offset) == expected


class TestDeleteAndHealth:
    """DELETE /pastes/{slug}, /health 테스트."""

    def test_delete(self, client: TestClient, gateway, make_paste) -> None:
        gateway.pastes["abcDEF12"] = make_paste("abcDEF12")

        response = client.delete("/pastes/abcDEF12")

        assert response.status_code == 204
        assert response.content == b""
        assert "abcDEF12" not in gateway.pastes

    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}
