"""API tests for the authentication and administration endpoints.

Tests the HTTP request/response cycle:
- Success and error envelopes
- Request validation (422 VALIDATION_ERROR)
- The bearer gate (401 INVALID_TOKEN / ACCOUNT_BLOCKED)
- Permission checks on admin routes (403 INSUFFICIENT_PERMISSIONS)

Architecture:
- Uses the real app with dependency overrides
- Handlers are stubbed; the token service and Casbin resolver are real
- Full stack behavior is covered by handler and repository tests
"""

from unittest.mock import AsyncMock, Mock

import pytest
from fastapi.testclient import TestClient
from uuid_extensions import uuid7

from src.application.dtos import AccountSummary, MessageResult, RegistrationResult
from src.application.errors import AuthFailures
from src.application.queries.handlers.auth_query_handlers import GetProfileHandler
from src.core.container import (
    get_account_repository,
    get_login_handler,
    get_permission_resolver,
    get_profile_handler,
    get_register_handler,
    get_token_service,
    get_update_account_status_handler,
)
from src.core.result import Failure, Success
from src.domain.entities.account import Account
from src.domain.entities.role import Permission, Role
from src.domain.enums import AccountStatus
from src.domain.protocols import TokenClaims
from src.infrastructure.authorization.casbin_adapter import CasbinAdapter
from src.main import app


# =============================================================================
# Test Doubles
# =============================================================================


def create_account(role_name: str = "user", **kwargs) -> Account:
    return Account(
        id=uuid7(),
        email=f"{role_name}@example.com",
        name="Buyer",
        role_id=uuid7(),
        role_name=role_name,
        password_hash="hashed",
        **kwargs,
    )


class StubRegisterHandler:
    async def handle(self, cmd):
        if cmd.email == "taken@example.com":
            return Failure(error=AuthFailures.EMAIL_ALREADY_EXISTS)
        account = Account(id=uuid7(), email=cmd.email, name=cmd.name, role_id=uuid7())
        return Success(
            value=RegistrationResult(
                account=AccountSummary.from_account(account),
                message="Registration successful. Check your email for a code",
            )
        )


class StubLoginHandler:
    async def handle(self, cmd):
        return Failure(error=AuthFailures.INVALID_CREDENTIALS)


class StubUpdateAccountStatusHandler:
    def __init__(self):
        self.commands = []

    async def handle(self, cmd):
        self.commands.append(cmd)
        return Success(value=MessageResult(message="Account status updated", count=2))


def build_resolver() -> CasbinAdapter:
    resolver = CasbinAdapter(logger=Mock())
    resolver.load_roles(
        [
            Role(
                id=uuid7(),
                name="admin",
                permissions=(
                    Permission(
                        id=uuid7(),
                        name="users.update",
                        path="/admin/accounts/{account_id}/status",
                        method="PATCH",
                    ),
                ),
            ),
            Role(id=uuid7(), name="user"),
        ]
    )
    return resolver


def bearer_for(account: Account) -> dict[str, str]:
    token = get_token_service().sign_access(
        TokenClaims(
            account_id=account.id,
            email=account.email,
            role=account.role_name,
            device_id=uuid7(),
        )
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def accounts():
    """Accounts known to the stub repository, keyed by role."""
    return {
        "user": create_account("user"),
        "admin": create_account("admin"),
        "blocked": create_account("user", status=AccountStatus.BLOCKED),
    }


@pytest.fixture
def client(accounts):
    by_id = {account.id: account for account in accounts.values()}
    account_repo = AsyncMock()
    account_repo.find_by_id.side_effect = lambda account_id: by_id.get(account_id)
    resolver = build_resolver()

    app.dependency_overrides[get_account_repository] = lambda: account_repo
    app.dependency_overrides[get_permission_resolver] = lambda: resolver
    app.dependency_overrides[get_register_handler] = StubRegisterHandler
    app.dependency_overrides[get_login_handler] = StubLoginHandler
    app.dependency_overrides[get_profile_handler] = lambda: GetProfileHandler(
        account_repo=account_repo
    )

    yield TestClient(app)

    app.dependency_overrides.clear()


# =============================================================================
# Public endpoints
# =============================================================================


@pytest.mark.api
class TestRegisterEndpoint:
    """POST /auth/register"""

    def test_register_returns_created_envelope(self, client):
        # Act
        response = client.post(
            "/auth/register",
            json={
                "email": "New.Buyer@Example.com",
                "password": "SecurePass123",
                "name": "New Buyer",
            },
        )

        # Assert
        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["path"] == "/auth/register"
        assert body["message"].startswith("Registration successful")
        assert body["data"]["email"] == "new.buyer@example.com"
        assert body["data"]["is_verified"] is False
        assert "password_hash" not in body["data"]

    def test_duplicate_email_is_conflict(self, client):
        response = client.post(
            "/auth/register",
            json={
                "email": "taken@example.com",
                "password": "SecurePass123",
                "name": "Buyer",
            },
        )

        assert response.status_code == 409
        assert response.json()["error"]["code"] == "EMAIL_ALREADY_EXISTS"

    def test_invalid_body_is_validation_error(self, client):
        # Act
        response = client.post(
            "/auth/register",
            json={"email": "not-an-email", "password": "weak", "name": "Buyer"},
        )

        # Assert
        assert response.status_code == 422
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert error["statusCode"] == 422
        assert "email" in error["message"]
        assert "password" in error["message"]

    @pytest.mark.parametrize(
        "password", ["Aa1" + "x" * 97, "Aa1" + "\u5bc6" * 30]
    )
    def test_password_over_bcrypt_limit_is_validation_error(self, client, password):
        # Act
        response = client.post(
            "/auth/register",
            json={"email": "buyer@example.com", "password": password, "name": "Buyer"},
        )

        # Assert
        assert response.status_code == 422
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert "password" in error["message"]


@pytest.mark.api
class TestLoginEndpoint:
    """POST /auth/login"""

    def test_failed_login_uses_error_envelope(self, client):
        # Act
        response = client.post(
            "/auth/login",
            json={"email": "buyer@example.com", "password": "WrongPass123"},
        )

        # Assert
        assert response.status_code == 401
        body = response.json()
        assert body["success"] is False
        assert body["error"]["code"] == "INVALID_CREDENTIALS"
        assert body["error"]["path"] == "/auth/login"


# =============================================================================
# Authentication gate
# =============================================================================


@pytest.mark.api
class TestBearerGate:
    """GET /auth/profile"""

    def test_missing_token_is_rejected(self, client):
        # Act
        response = client.get("/auth/profile")

        # Assert
        assert response.status_code == 401
        assert response.json()["error"]["code"] == "INVALID_TOKEN"
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_garbage_token_is_rejected(self, client):
        response = client.get(
            "/auth/profile", headers={"Authorization": "Bearer not-a-jwt"}
        )

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "INVALID_TOKEN"

    def test_pending_two_factor_token_is_not_an_access_token(self, client):
        # Arrange
        pending = get_token_service().sign_pending_two_factor("user@example.com")

        # Act
        response = client.get(
            "/auth/profile", headers={"Authorization": f"Bearer {pending}"}
        )

        # Assert
        assert response.status_code == 401

    def test_blocked_account_is_rejected(self, client, accounts):
        response = client.get("/auth/profile", headers=bearer_for(accounts["blocked"]))

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "ACCOUNT_BLOCKED"

    def test_unknown_account_is_rejected(self, client):
        response = client.get("/auth/profile", headers=bearer_for(create_account()))

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "INVALID_TOKEN"

    def test_profile_lists_role_permissions(self, client, accounts):
        # Act
        response = client.get("/auth/profile", headers=bearer_for(accounts["admin"]))

        # Assert
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["account"]["email"] == "admin@example.com"
        assert data["account"]["role"] == "admin"
        assert data["permissions"] == ["users.update"]
        assert data["device_id"] is not None


# =============================================================================
# Admin endpoints
# =============================================================================


@pytest.mark.api
class TestAdminPermissions:
    """PATCH /admin/accounts/{account_id}/status"""

    def test_user_without_permission_is_forbidden(self, client, accounts):
        # Arrange
        handler = StubUpdateAccountStatusHandler()
        app.dependency_overrides[get_update_account_status_handler] = lambda: handler

        # Act
        response = client.patch(
            f"/admin/accounts/{uuid7()}/status",
            json={"status": "BLOCKED"},
            headers=bearer_for(accounts["user"]),
        )

        # Assert
        assert response.status_code == 403
        assert response.json()["error"]["code"] == "INSUFFICIENT_PERMISSIONS"
        assert handler.commands == []

    def test_admin_can_block_account(self, client, accounts):
        # Arrange
        handler = StubUpdateAccountStatusHandler()
        app.dependency_overrides[get_update_account_status_handler] = lambda: handler
        target_id = uuid7()

        # Act
        response = client.patch(
            f"/admin/accounts/{target_id}/status",
            json={"status": "BLOCKED"},
            headers=bearer_for(accounts["admin"]),
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["data"] == {"count": 2}
        assert handler.commands[0].account_id == target_id
        assert handler.commands[0].status == AccountStatus.BLOCKED
        assert handler.commands[0].actor_id == accounts["admin"].id

    def test_unauthenticated_admin_call_is_unauthorized(self, client):
        response = client.get("/admin/verification-codes/statistics")

        assert response.status_code == 401
