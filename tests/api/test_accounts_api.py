"""
API tests for account endpoints.

Tests cover:
- Create account (success, duplicates, validation errors)
- List accounts with filters
- Get by id / code, children
- Update and delete
- Error responses (400, 404, 409, 422)
"""

import pytest
from fastapi.testclient import TestClient


def _create(client: TestClient, code: str, type_: str = "ASSET", **extra) -> dict:
    response = client.post("/accounts/", json={
        "code": code,
        "name": extra.pop("name", f"Account {code}"),
        "type": type_,
        **extra,
    })
    assert response.status_code == 201, response.text
    return response.json()


# =============================================================================
# CREATE ACCOUNT TESTS
# =============================================================================


class TestCreateAccountAPI:
    """Tests for POST /accounts endpoint."""

    def test_create_account_success(self, client: TestClient):
        """
        GIVEN no accounts exist
        WHEN I POST /accounts with valid data
        THEN response is 201 with account data
        """
        response = client.post("/accounts/", json={
            "code": "1000",
            "name": "Cash",
            "type": "ASSET",
        })

        assert response.status_code == 201
        data = response.json()
        assert data["code"] == "1000"
        assert data["type"] == "ASSET"
        assert data["active"] is True
        assert data["level"] == 1
        assert data["parent_id"] is None
        assert data["id"] is not None

    def test_create_child_account(self, client: TestClient):
        parent = _create(client, "1")

        child = _create(client, "1.1", parent_id=parent["id"])

        assert child["parent_id"] == parent["id"]
        assert child["level"] == 2

    def test_create_duplicate_code_returns_400(self, client: TestClient):
        """
        GIVEN account 1000 exists
        WHEN I POST another account with code 1000
        THEN response is 400 with VALIDATION_ERROR
        """
        _create(client, "1000")

        response = client.post("/accounts/", json={
            "code": "1000",
            "name": "Duplicate",
            "type": "ASSET",
        })

        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"

    def test_create_with_unknown_parent_returns_404(self, client: TestClient):
        response = client.post("/accounts/", json={
            "code": "1.1",
            "name": "Orphan",
            "type": "ASSET",
            "parent_id": 999,
        })

        assert response.status_code == 404
        assert response.json()["error"] == "NOT_FOUND"

    @pytest.mark.parametrize("payload", [
        {"name": "No code", "type": "ASSET"},
        {"code": "", "name": "Empty code", "type": "ASSET"},
        {"code": "1000", "name": "Bad type", "type": "REVENUE"},
    ])
    def test_create_invalid_payload_returns_422(self, client: TestClient, payload: dict):
        response = client.post("/accounts/", json=payload)

        assert response.status_code == 422


# =============================================================================
# LIST / GET TESTS
# =============================================================================


class TestListAccountsAPI:
    """Tests for GET /accounts endpoint."""

    def test_list_empty(self, client: TestClient):
        response = client.get("/accounts/")

        assert response.status_code == 200
        assert response.json() == {"accounts": [], "count": 0}

    def test_list_sorted_by_code(self, client: TestClient):
        for code in ["3000", "1000", "2000"]:
            _create(client, code)

        data = client.get("/accounts/").json()

        assert data["count"] == 3
        assert [a["code"] for a in data["accounts"]] == ["1000", "2000", "3000"]

    def test_list_filtered_by_type(self, client: TestClient):
        _create(client, "1000", "ASSET")
        _create(client, "2000", "LIABILITY")

        data = client.get("/accounts/", params={"type": "LIABILITY"}).json()

        assert [a["code"] for a in data["accounts"]] == ["2000"]

    def test_list_roots_only(self, client: TestClient):
        parent = _create(client, "1")
        _create(client, "1.1", parent_id=parent["id"])
        _create(client, "2", "LIABILITY")

        data = client.get("/accounts/", params={"roots_only": True}).json()

        assert [a["code"] for a in data["accounts"]] == ["1", "2"]

    def test_list_active_only(self, client: TestClient):
        first = _create(client, "1000")
        _create(client, "1100")
        client.put(f"/accounts/{first['id']}", json={"active": False})

        data = client.get("/accounts/", params={"active_only": True}).json()

        assert [a["code"] for a in data["accounts"]] == ["1100"]


class TestGetAccountAPI:
    """Tests for single-account lookups."""

    def test_get_by_id(self, client: TestClient):
        created = _create(client, "1000", name="Cash")

        response = client.get(f"/accounts/{created['id']}")

        assert response.status_code == 200
        assert response.json()["name"] == "Cash"

    def test_get_by_id_not_found(self, client: TestClient):
        response = client.get("/accounts/999")

        assert response.status_code == 404
        assert response.json()["error"] == "NOT_FOUND"

    def test_get_by_code(self, client: TestClient):
        created = _create(client, "1.1.01")

        response = client.get("/accounts/code/1.1.01")

        assert response.status_code == 200
        assert response.json()["id"] == created["id"]

    def test_get_by_code_not_found(self, client: TestClient):
        assert client.get("/accounts/code/nope").status_code == 404

    def test_children(self, client: TestClient):
        parent = _create(client, "1")
        _create(client, "1.2", parent_id=parent["id"])
        _create(client, "1.1", parent_id=parent["id"])

        data = client.get(f"/accounts/{parent['id']}/children").json()

        assert [a["code"] for a in data["accounts"]] == ["1.1", "1.2"]


# =============================================================================
# UPDATE / DELETE TESTS
# =============================================================================


class TestUpdateAccountAPI:
    """Tests for PUT /accounts/{id}."""

    def test_update_changes_only_sent_fields(self, client: TestClient):
        created = _create(client, "1000", name="Cash")

        response = client.put(f"/accounts/{created['id']}", json={"name": "Cash on hand"})

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Cash on hand"
        assert data["code"] == "1000"
        assert data["type"] == "ASSET"

    def test_update_to_existing_code_returns_409(self, client: TestClient):
        """
        GIVEN accounts 1000 and 2000
        WHEN I change 2000's code to 1000
        THEN the database constraint violation maps to 409
        """
        _create(client, "1000")
        second = _create(client, "2000")

        response = client.put(f"/accounts/{second['id']}", json={"code": "1000"})

        assert response.status_code == 409
        assert response.json()["error"] == "CONSTRAINT_VIOLATION"

    def test_update_missing_returns_404(self, client: TestClient):
        response = client.put("/accounts/999", json={"name": "Ghost"})

        assert response.status_code == 404

    @pytest.mark.parametrize("field", ["code", "name", "type", "active"])
    def test_update_null_required_field_returns_422(self, client: TestClient, field: str):
        """
        GIVEN account 1000 named Cash
        WHEN I send null for a field that cannot be empty
        THEN the request is rejected with 422 and the account is unchanged
        """
        created = _create(client, "1000", name="Cash")

        response = client.put(f"/accounts/{created['id']}", json={field: None})

        assert response.status_code == 422
        stored = client.get(f"/accounts/{created['id']}").json()
        assert stored["code"] == "1000"
        assert stored["name"] == "Cash"
        assert stored["type"] == "ASSET"
        assert stored["active"] is True

    def test_update_null_description_clears_it(self, client: TestClient):
        """
        GIVEN account 1000 with a description
        WHEN I send null for the description
        THEN the description is cleared
        """
        created = _create(client, "1000", description="Petty cash")

        response = client.put(f"/accounts/{created['id']}", json={"description": None})

        assert response.status_code == 200
        assert response.json()["description"] is None


class TestDeleteAccountAPI:
    """Tests for DELETE /accounts/{id}."""

    def test_delete_success(self, client: TestClient):
        created = _create(client, "1000")

        response = client.delete(f"/accounts/{created['id']}")

        assert response.status_code == 204
        assert client.get(f"/accounts/{created['id']}").status_code == 404

    def test_delete_parent_returns_400(self, client: TestClient):
        parent = _create(client, "1")
        _create(client, "1.1", parent_id=parent["id"])

        response = client.delete(f"/accounts/{parent['id']}")

        assert response.status_code == 400
        assert response.json()["error"] == "ACCOUNT_IN_USE"


# =============================================================================
# MISC ENDPOINTS
# =============================================================================


class TestMiscAPI:
    """Tests for initialization and health endpoints."""

    def test_initialize_default_chart(self, client: TestClient):
        response = client.post("/accounts/initialize")

        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 20
        assert data["accounts"][0]["code"] == "1"

    def test_initialize_twice_is_noop(self, client: TestClient):
        client.post("/accounts/initialize")

        data = client.post("/accounts/initialize").json()

        assert data["count"] == 20

    def test_health(self, client: TestClient):
        assert client.get("/health").json() == {"status": "healthy"}
