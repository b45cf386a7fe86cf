# =============================================================================
# SUPPLIER MINIMAL API - AUTH ENDPOINT TESTS
# =============================================================================
# File: tests/test_auth_api.py
# Description: Integration tests for register, login, lockout and claims
#
# EXECUTION:
#   pytest tests/test_auth_api.py -v
# =============================================================================

import uuid

from httpx import AsyncClient

from auth.dependencies import REMOVE_SUPPLIER_CLAIM
from auth.repository import UserRepository
from auth.service import AuthService
from core.config import settings
from core.security import jwt_manager


def login_payload(user_data: dict) -> dict:
    return {"email": user_data["email"], "password": user_data["password"]}


class TestRegister:
    """POST /register"""

    async def test_register_returns_bearer_token(self, async_client: AsyncClient, user_data):
        """
        Test: Register a new user
        Expected: 200 with a usable access token and the user summary
        """
        # Act
        response = await async_client.post("/register", json=user_data)

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["tokenType"] == "bearer"
        assert body["expiresIn"] == settings.jwt_access_token_expire_minutes * 60
        assert body["userToken"]["email"] == user_data["email"]
        assert body["userToken"]["claims"] == []

        payload = jwt_manager.decode_token(body["accessToken"])
        assert payload.sub == body["userToken"]["id"]
        assert payload.email == user_data["email"]

    async def test_register_accepts_snake_case(self, async_client: AsyncClient, user_data):
        payload = {
            "email": user_data["email"],
            "password": user_data["password"],
            "confirm_password": user_data["password"],
        }

        response = await async_client.post("/register", json=payload)

        assert response.status_code == 200

    async def test_email_is_stored_lower_case(self, async_client: AsyncClient, user_data):
        mixed = {**user_data, "email": user_data["email"].upper()}

        response = await async_client.post("/register", json=mixed)

        assert response.status_code == 200
        assert response.json()["userToken"]["email"] == user_data["email"].lower()

    async def test_duplicate_email_is_400(self, async_client: AsyncClient, user_data):
        await async_client.post("/register", json=user_data)

        response = await async_client.post("/register", json=user_data)

        assert response.status_code == 400
        assert response.json()["error_code"] == "USER_EXISTS"

    async def test_duplicate_email_past_the_existence_check_is_400(
        self, async_client: AsyncClient, user_data, monkeypatch
    ):
        """
        Test: Two registrations of one email both pass the existence check
        Expected: The unique index rejects the second one as USER_EXISTS, not a 500
        """
        # Arrange
        async def never_exists(self, email: str) -> bool:
            return False

        monkeypatch.setattr(UserRepository, "exists_email", never_exists)
        await async_client.post("/register", json=user_data)

        # Act
        response = await async_client.post("/register", json=user_data)

        # Assert
        assert response.status_code == 400
        assert response.json()["error_code"] == "USER_EXISTS"

    async def test_password_mismatch_is_400(self, async_client: AsyncClient, user_data):
        response = await async_client.post(
            "/register", json={**user_data, "confirmPassword": "Different123!"}
        )

        assert response.status_code == 400
        body = response.json()
        assert body["error_code"] == "VALIDATION_ERROR"
        messages = [m for msgs in body["details"]["errors"].values() for m in msgs]
        assert "The passwords do not match." in messages

    async def test_short_password_is_400(self, async_client: AsyncClient, user_data):
        response = await async_client.post(
            "/register", json={**user_data, "password": "Ab1!", "confirmPassword": "Ab1!"}
        )

        assert response.status_code == 400
        assert "password" in response.json()["details"]["errors"]

    async def test_weak_password_is_400(self, async_client: AsyncClient, user_data):
        response = await async_client.post(
            "/register", json={**user_data, "password": "abcdefg", "confirmPassword": "abcdefg"}
        )

        assert response.status_code == 400
        body = response.json()
        assert body["error_code"] == "PASSWORD_VALIDATION_ERROR"
        assert body["details"]["errors"]["password"]

    async def test_invalid_email_is_400(self, async_client: AsyncClient, user_data):
        response = await async_client.post("/register", json={**user_data, "email": "not-an-email"})

        assert response.status_code == 400
        assert "email" in response.json()["details"]["errors"]


class TestLogin:
    """POST /login"""

    async def test_login_after_register(self, async_client: AsyncClient, user_data):
        await async_client.post("/register", json=user_data)

        response = await async_client.post("/login", json=login_payload(user_data))

        assert response.status_code == 200
        token = response.json()["accessToken"]
        listed = await async_client.get(
            f"/supplier/{uuid.uuid4()}", headers={"Authorization": f"Bearer {token}"}
        )
        assert listed.status_code == 404

    async def test_wrong_password_is_400(self, async_client: AsyncClient, user_data):
        await async_client.post("/register", json=user_data)

        response = await async_client.post(
            "/login", json={"email": user_data["email"], "password": "WrongPass123!"}
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid user or password."

    async def test_password_whitespace_is_significant(self, async_client: AsyncClient, user_data):
        """
        Test: Register with a space-padded password, log in with it trimmed
        Expected: 400 for the trimmed form, 200 for the password as registered
        """
        # Arrange
        padded = "  SecurePass123!  "
        await async_client.post(
            "/register", json={**user_data, "password": padded, "confirmPassword": padded}
        )

        # Act
        trimmed = await async_client.post(
            "/login", json={"email": user_data["email"], "password": padded.strip()}
        )
        exact = await async_client.post(
            "/login", json={"email": user_data["email"], "password": padded}
        )

        # Assert
        assert trimmed.status_code == 400
        assert trimmed.json()["message"] == "Invalid user or password."
        assert exact.status_code == 200

    async def test_unknown_user_is_400(self, async_client: AsyncClient, user_data):
        response = await async_client.post("/login", json=login_payload(user_data))

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid user or password."

    async def test_repeated_failures_lock_the_account(self, async_client: AsyncClient, user_data):
        """
        Test: Fail the login max_login_attempts times, then use the right password
        Expected: earlier failures report bad credentials, then the account is blocked
        """
        # Arrange
        await async_client.post("/register", json=user_data)
        wrong = {"email": user_data["email"], "password": "WrongPass123!"}

        # Act
        for _ in range(settings.max_login_attempts - 1):
            response = await async_client.post("/login", json=wrong)
            assert response.json()["message"] == "Invalid user or password."

        locking = await async_client.post("/login", json=wrong)
        after = await async_client.post("/login", json=login_payload(user_data))

        # Assert
        assert locking.status_code == 400
        assert locking.json()["message"] == "User is blocked."
        assert after.status_code == 400
        assert after.json()["message"] == "User is blocked."
        assert "locked_until" in after.json()["details"]

    async def test_success_resets_failure_count(self, async_client: AsyncClient, user_data):
        await async_client.post("/register", json=user_data)
        wrong = {"email": user_data["email"], "password": "WrongPass123!"}

        for _ in range(settings.max_login_attempts - 1):
            await async_client.post("/login", json=wrong)
        assert (await async_client.post("/login", json=login_payload(user_data))).status_code == 200

        response = await async_client.post("/login", json=wrong)

        assert response.json()["message"] == "Invalid user or password."


class TestClaimFlow:
    """Granting RemoveSupplier and using it end to end."""

    async def test_granted_claim_travels_in_token(
        self, async_client: AsyncClient, db_adapter, user_data, supplier_data
    ):
        # Arrange
        register = await async_client.post("/register", json=user_data)
        plain_headers = {"Authorization": f"Bearer {register.json()['accessToken']}"}
        created = (await async_client.post("/supplier", json=supplier_data, headers=plain_headers)).json()

        async with db_adapter.get_session() as session:
            await AuthService(session).grant_claim(user_data["email"], REMOVE_SUPPLIER_CLAIM)

        # Act
        login = await async_client.post("/login", json=login_payload(user_data))
        claim_headers = {"Authorization": f"Bearer {login.json()['accessToken']}"}
        forbidden = await async_client.delete(f"/supplier/{created['id']}", headers=plain_headers)
        removed = await async_client.delete(f"/supplier/{created['id']}", headers=claim_headers)

        # Assert
        assert login.json()["userToken"]["claims"] == [{"type": REMOVE_SUPPLIER_CLAIM, "value": ""}]
        assert forbidden.status_code == 403
        assert removed.status_code == 204


class TestHealth:
    async def test_health(self, async_client: AsyncClient):
        response = await async_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    async def test_ready_checks_database(self, async_client: AsyncClient):
        response = await async_client.get("/health/ready")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["components"]["database"]["status"] == "healthy"

    async def test_request_id_is_echoed(self, async_client: AsyncClient):
        response = await async_client.get("/health", headers={"X-Request-ID": "abc-123"})

        assert response.headers["x-request-id"] == "abc-123"
