"""End-to-end tests for the access token lifecycle."""

from fastapi.testclient import TestClient

from tests.conftest import sign_up_body
from tests.harness import create_client_fixture

# E2E test fixture
client = create_client_fixture()

CREDENTIALS = {"email": "email-1@test.com", "password": "the-Secret-123"}


class TestAccessTokens:
    """End-to-end tests for /access-tokens."""

    def test_sign_in(self, client: TestClient):
        """Should return a new token pair that authenticates."""
        # Arrange
        client.post("/users", json=sign_up_body())

        # Act
        response = client.post("/access-tokens", json=CREDENTIALS)

        # Assert
        assert response.status_code == 201
        tokens = response.json()
        me = client.get("/me", headers={"X-Access-Token": tokens["jwt"]})
        assert me.status_code == 200

    def test_sign_in_wrong_password(self, client: TestClient):
        """Should refuse a wrong password with 401."""
        client.post("/users", json=sign_up_body())

        response = client.post(
            "/access-tokens", json={**CREDENTIALS, "password": "the-Secret-456"}
        )

        assert response.status_code == 401
        assert response.json()["name"] == "INVALID_PASSWORD"

    def test_sign_in_unknown_user(self, client: TestClient):
        """Should report an unknown email with 401."""
        response = client.post("/access-tokens", json=CREDENTIALS)

        assert response.status_code == 401
        assert response.json()["name"] == "USER_NOT_FOUND"

    def test_refresh(self, client: TestClient):
        """Should return a new access token only."""
        tokens = client.post("/users", json=sign_up_body()).json()

        response = client.post(
            "/access-tokens/refresh",
            json={"refresh_token": tokens["refresh_token"]},
            headers={"X-Access-Token": tokens["jwt"]},
        )

        assert response.status_code == 200
        data = response.json()
        assert list(data) == ["jwt"]
        me = client.get("/me", headers={"X-Access-Token": data["jwt"]})
        assert me.status_code == 200

    def test_refresh_with_wrong_refresh_token(self, client: TestClient):
        """Should refuse a refresh token that is not the stored one."""
        tokens = client.post("/users", json=sign_up_body()).json()

        response = client.post(
            "/access-tokens/refresh",
            json={"refresh_token": "bm90LXRoZS1yaWdodC1vbmU6MA=="},
            headers={"X-Access-Token": tokens["jwt"]},
        )

        assert response.status_code == 401
        assert response.json()["name"] == "REFRESH_TOKEN_MISMATCH"

    def test_sign_out(self, client: TestClient):
        """Should revoke the token pair."""
        # Arrange
        tokens = client.post("/users", json=sign_up_body()).json()
        headers = {"X-Access-Token": tokens["jwt"]}

        # Act
        response = client.request(
            "DELETE",
            "/access-tokens",
            json={"refresh_token": tokens["refresh_token"]},
            headers=headers,
        )

        # Assert
        assert response.status_code == 204
        rejected = client.get("/me", headers=headers)
        assert rejected.status_code == 401
        assert rejected.json()["message"] == (
            "Please authenticate! : The user is signed out, please sign in"
        )

    def test_bearer_prefix(self, client: TestClient):
        """Should accept a Bearer-prefixed access token."""
        client.post("/users", json=sign_up_body())
        tokens = client.post("/access-tokens", json=CREDENTIALS).json()

        response = client.get(
            "/me", headers={"X-Access-Token": f"Bearer {tokens['jwt']}"}
        )

        assert response.status_code == 200
