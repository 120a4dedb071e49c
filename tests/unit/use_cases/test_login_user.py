"""Unit tests for LoginUser use case"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.auth import LoginUser, LoginCommandDTO
from src.app.services.token_service import TokenClaims
from src.domain.user import User


@pytest.fixture
def mock_user_repo():
    return MagicMock()


@pytest.fixture
def mock_hasher():
    hasher = MagicMock()
    hasher.verify = MagicMock(side_effect=lambda password, hashed: password == "secret123")
    return hasher


@pytest.fixture
def mock_token_service():
    service = MagicMock()
    service.issue = MagicMock(return_value="signed.jwt.token")
    return service


@pytest.fixture
def login_use_case(mock_user_repo, mock_hasher, mock_token_service):
    return LoginUser(mock_user_repo, mock_hasher, mock_token_service)


@pytest.fixture
def admin_user():
    return User(
        id=1,
        username="admin",
        email="admin@company.com",
        password_hash="$2b$10$hash",
        full_name="Administrator",
    )


@pytest.mark.asyncio
class TestLoginSuccess:
    async def test_login_returns_token_and_profile(
        self, login_use_case, mock_user_repo, mock_token_service, admin_user
    ):
        mock_user_repo.get_by_username_or_email = AsyncMock(return_value=admin_user)

        result = await login_use_case.execute(LoginCommandDTO(username="admin", password="secret123"))

        assert result.is_ok()
        assert result.value.token == "signed.jwt.token"
        assert result.value.user.id == 1
        assert result.value.user.full_name == "Administrator"
        mock_token_service.issue.assert_called_once_with(
            TokenClaims(user_id=1, username="admin", email="admin@company.com")
        )

    async def test_login_by_email(self, login_use_case, mock_user_repo, admin_user):
        mock_user_repo.get_by_username_or_email = AsyncMock(return_value=admin_user)

        result = await login_use_case.execute(
            LoginCommandDTO(username="admin@company.com", password="secret123")
        )

        assert result.is_ok()
        mock_user_repo.get_by_username_or_email.assert_called_once_with("admin@company.com")


@pytest.mark.asyncio
class TestLoginFailure:
    @pytest.mark.parametrize(
        "username,password",
        [(None, "secret123"), ("admin", None), ("", ""), ("admin", "")],
    )
    async def test_missing_fields(self, login_use_case, mock_user_repo, username, password):
        mock_user_repo.get_by_username_or_email = AsyncMock()

        result = await login_use_case.execute(LoginCommandDTO(username=username, password=password))

        assert result.is_err()
        assert result.error.code == "MISSING_FIELDS"
        assert result.error.message == "Username and password are required"
        mock_user_repo.get_by_username_or_email.assert_not_called()

    async def test_unknown_user_and_wrong_password_are_indistinguishable(
        self, login_use_case, mock_user_repo, admin_user
    ):
        mock_user_repo.get_by_username_or_email = AsyncMock(return_value=None)
        unknown = await login_use_case.execute(LoginCommandDTO(username="ghost", password="secret123"))

        mock_user_repo.get_by_username_or_email = AsyncMock(return_value=admin_user)
        wrong = await login_use_case.execute(LoginCommandDTO(username="admin", password="nope"))

        assert unknown.is_err() and wrong.is_err()
        assert unknown.error.code == wrong.error.code == "INVALID_CREDENTIALS"
        assert unknown.error.message == wrong.error.message == "Invalid credentials"

    async def test_repository_failure(self, login_use_case, mock_user_repo):
        mock_user_repo.get_by_username_or_email = AsyncMock(side_effect=Exception("db down"))

        result = await login_use_case.execute(LoginCommandDTO(username="admin", password="secret123"))

        assert result.is_err()
        assert result.error.code == "INTERNAL_ERROR"
