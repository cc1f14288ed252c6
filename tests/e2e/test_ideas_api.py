"""End-to-end tests for the idea endpoints."""

import pytest
from fastapi.testclient import TestClient

from tests.conftest import idea_body, sign_up_body
from tests.harness import create_client_fixture

# E2E test fixture
client = create_client_fixture()


@pytest.fixture
def headers(client: TestClient) -> dict[str, str]:
    """Access token header of a freshly signed-up user."""
    tokens = client.post("/users", json=sign_up_body()).json()
    return {"X-Access-Token": tokens["jwt"]}


class TestCreateIdea:
    """End-to-end tests for POST /ideas."""

    def test_create(self, client: TestClient, headers):
        """Should return the stored idea with its average score."""
        response = client.post("/ideas", json=idea_body(), headers=headers)

        assert response.status_code == 200
        data = response.json()
        assert data["content"] == "My awesome idea"
        assert data["impact"] == 8
        assert data["ease"] == 5
        assert data["confidence"] == 4
        assert data["average_score"] == 5.666666666666667
        assert isinstance(data["created_at"], int)
        assert data["id"]

    def test_missing_metric(self, client: TestClient, headers):
        """Should name the missing property."""
        body = idea_body()
        del body["confidence"]

        response = client.post("/ideas", json=body, headers=headers)

        assert response.status_code == 400
        assert response.json()["message"] == "Please provide confidence"

    @pytest.mark.parametrize(
        "overrides,name",
        [
            ({"impact": 11}, "METRIC_OUT_OF_RANGE"),
            ({"ease": 0}, "METRIC_OUT_OF_RANGE"),
            ({"confidence": "4"}, "METRIC_NOT_NUMBER"),
            ({"content": "x" * 256}, "CONTENT_TOO_LONG"),
            ({"content": 42}, "CONTENT_NOT_STRING"),
        ],
    )
    def test_invalid_fields(self, client: TestClient, headers, overrides, name):
        """Should reject invalid fields."""
        response = client.post(
            "/ideas", json={**idea_body(), **overrides}, headers=headers
        )

        assert response.status_code == 400
        assert response.json()["name"] == name
        assert client.get("/ideas", headers=headers).json() == []

    def test_without_token(self, client: TestClient):
        """Should require authentication."""
        response = client.post("/ideas", json=idea_body())

        assert response.status_code == 401
        assert response.json()["name"] == "UNAUTHORIZED"


class TestListIdeas:
    """End-to-end tests for GET /ideas."""

    def test_pages(self, client: TestClient, headers):
        """Should return ten ideas per page, best first."""
        # Arrange
        for score in range(1, 11):
            client.post(
                "/ideas",
                json=idea_body(f"idea {score}", score, score, score),
                headers=headers,
            )
        for score in (1.5, 2.5, 3.5):
            client.post(
                "/ideas",
                json=idea_body(f"idea {score}", score, score, score),
                headers=headers,
            )

        # Act
        first = client.get("/ideas", headers=headers)
        second = client.get("/ideas", params={"page": 2}, headers=headers)
        cursor = client.get("/ideas", params={"last": 3}, headers=headers)

        # Assert
        assert [idea["average_score"] for idea in first.json()] == [
            10.0, 9.0, 8.0, 7.0, 6.0, 5.0, 4.0, 3.5, 3.0, 2.5
        ]
        assert [idea["average_score"] for idea in second.json()] == [2.0, 1.5, 1.0]
        assert [idea["average_score"] for idea in cursor.json()] == [
            2.5, 2.0, 1.5, 1.0
        ]

    def test_invalid_page(self, client: TestClient, headers):
        """Should reject a page that is not a positive integer."""
        response = client.get("/ideas", params={"page": "first"}, headers=headers)

        assert response.status_code == 400
        assert response.json() == {
            "name": "INVALID_PAGE_NUMBER",
            "type": "Idea service",
            "status": 400,
            "message": "Page must be an integer number and greater than 0",
        }

    def test_only_own_ideas(self, client: TestClient, headers):
        """Should not list ideas of other users."""
        other = client.post("/users", json=sign_up_body(2)).json()
        client.post(
            "/ideas", json=idea_body(), headers={"X-Access-Token": other["jwt"]}
        )

        response = client.get("/ideas", headers=headers)

        assert response.status_code == 200
        assert response.json() == []


class TestSingleIdea:
    """End-to-end tests for /ideas/{idea_id}."""

    def test_get_update_delete(self, client: TestClient, headers):
        """Should read, replace and remove an idea."""
        created = client.post("/ideas", json=idea_body(), headers=headers).json()
        url = f"/ideas/{created['id']}"

        fetched = client.get(url, headers=headers)
        updated = client.put(
            url, json=idea_body("Improved", 10, 10, 10), headers=headers
        )
        deleted = client.delete(url, headers=headers)
        missing = client.get(url, headers=headers)

        assert fetched.json() == created
        assert updated.status_code == 200
        assert updated.json()["average_score"] == 10.0
        assert updated.json()["created_at"] == created["created_at"]
        assert deleted.status_code == 204
        assert missing.status_code == 400
        assert missing.json()["name"] == "IDEA_NOT_FOUND"

    def test_unknown_id(self, client: TestClient, headers):
        """Should report an id that names no idea."""
        response = client.delete("/ideas/not-an-id", headers=headers)

        assert response.status_code == 400
        assert response.json()["name"] == "IDEA_NOT_FOUND"


class TestUnknownEndpoint:
    """End-to-end tests for routes that do not exist."""

    def test_not_found(self, client: TestClient):
        """Should answer unknown routes with a JSON error."""
        response = client.get("/nothing-here")

        assert response.status_code == 404
        assert response.json()["name"] == "ENDPOINT_NOT_FOUND"
        assert response.json()["message"] == "API endpoint not found"

    def test_health(self, client: TestClient):
        """Should report the service as healthy."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
