"""
Component tests for registration and login against the in-memory Firestore.
"""
import pytest
from fastapi.testclient import TestClient

from shopco.core.passwords import HmacPasswords, get_password_hasher
from shopco.main import app


def _users(fake_db):
    return fake_db.collection("users").store


def _register(client, email="ada@example.com", password="pw123", name="Ada"):
    return client.post("/api/auth/register", json={"email": email, "password": password, "name": name})


class TestRegister:

    def test_register_creates_account(self, test_client: TestClient, fake_db):
        response = _register(test_client)

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["message"] == "User registered successfully"

        stored = _users(fake_db)[data["userId"]]
        assert stored["email"] == "ada@example.com"
        assert stored["name"] == "Ada"
        assert stored["password"] == "pw123"
        assert stored["createdAt"] is not None

    def test_duplicate_email_is_rejected_and_first_record_kept(self, test_client: TestClient, fake_db):
        first_id = _register(test_client).json()["userId"]
        original = dict(_users(fake_db)[first_id])

        response = _register(test_client, password="other", name="Someone else")

        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "User already exists", "error": "ALREADY_EXISTS"}
        assert list(_users(fake_db)) == [first_id]
        assert _users(fake_db)[first_id] == original

    def test_email_match_is_case_sensitive(self, test_client: TestClient):
        _register(test_client)
        assert _register(test_client, email="Ada@example.com").status_code == 200

    def test_name_is_optional(self, test_client: TestClient):
        response = test_client.post("/api/auth/register", json={"email": "x@y.z", "password": "pw"})
        assert response.status_code == 200

    def test_missing_password_is_rejected(self, test_client: TestClient):
        response = test_client.post("/api/auth/register", json={"email": "x@y.z"})
        assert response.status_code == 422
        assert response.json()["success"] is False


class TestLogin:

    def test_login_returns_user_without_password(self, test_client: TestClient):
        user_id = _register(test_client).json()["userId"]

        response = test_client.post("/api/auth/login", json={"email": "ada@example.com", "password": "pw123"})

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Login successful"
        assert data["user"] == {"id": user_id, "email": "ada@example.com", "name": "Ada"}
        assert "password" not in response.text

    @pytest.mark.parametrize("email, password", [
        ("ada@example.com", "wrong"),
        ("nobody@example.com", "pw123"),
        ("ADA@example.com", "pw123"),
    ])
    def test_bad_credentials_are_401(self, test_client: TestClient, email, password):
        _register(test_client)

        response = test_client.post("/api/auth/login", json={"email": email, "password": password})

        assert response.status_code == 401
        assert response.json() == {"success": False, "message": "Invalid credentials", "error": "INVALID_CREDENTIALS"}


class TestHmacScheme:

    @pytest.fixture
    def hmac_client(self, test_client: TestClient):
        app.dependency_overrides[get_password_hasher] = lambda: HmacPasswords("pepper")
        yield test_client

    def test_password_is_not_stored_raw_and_login_still_works(self, hmac_client: TestClient, fake_db):
        user_id = _register(hmac_client).json()["userId"]

        assert _users(fake_db)[user_id]["password"] != "pw123"
        ok = hmac_client.post("/api/auth/login", json={"email": "ada@example.com", "password": "pw123"})
        bad = hmac_client.post("/api/auth/login", json={"email": "ada@example.com", "password": "pw12"})
        assert ok.status_code == 200
        assert bad.status_code == 401


@pytest.mark.parametrize("path, body, message", [
    ("/api/auth/register", {"email": "a@b.c", "password": "pw"}, "Error registering user"),
    ("/api/auth/login", {"email": "a@b.c", "password": "pw"}, "Error logging in"),
])
def test_store_errors_map_to_500(broken_client: TestClient, path, body, message):
    response = broken_client.post(path, json=body)

    assert response.status_code == 500
    assert response.json()["message"] == message
