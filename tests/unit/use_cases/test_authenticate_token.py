"""Unit tests for AuthenticateToken use case"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.auth import AuthenticateToken, USER_NOT_FOUND
from src.app.services.token_service import TokenClaims, TokenExpiredError, InvalidTokenError
from src.domain.user import User


@pytest.fixture
def mock_user_repo():
    return MagicMock()


@pytest.fixture
def mock_token_service():
    return MagicMock()


@pytest.fixture
def use_case(mock_user_repo, mock_token_service):
    return AuthenticateToken(mock_user_repo, mock_token_service)


@pytest.mark.asyncio
class TestAuthenticateToken:
    async def test_valid_token(self, use_case, mock_user_repo, mock_token_service):
        mock_token_service.verify = MagicMock(
            return_value=TokenClaims(user_id=7, username="jane", email="jane@example.com")
        )
        mock_user_repo.get_by_id = AsyncMock(
            return_value=User(id=7, username="jane", email="jane@example.com", password_hash="x")
        )

        result = await use_case.execute("token")

        assert result.is_ok()
        assert result.value.id == 7
        assert result.value.username == "jane"
        mock_user_repo.get_by_id.assert_called_once_with(7)

    @pytest.mark.parametrize("token", [None, ""])
    async def test_missing_token(self, use_case, mock_token_service, token):
        result = await use_case.execute(token)

        assert result.is_err()
        assert result.error.code == "MISSING_TOKEN"
        assert result.error.message == "Access token required"
        mock_token_service.verify.assert_not_called()

    async def test_expired_token(self, use_case, mock_token_service):
        mock_token_service.verify = MagicMock(side_effect=TokenExpiredError("expired"))

        result = await use_case.execute("token")

        assert result.error.code == "TOKEN_EXPIRED"
        assert result.error.message == "Token expired"

    async def test_tampered_token(self, use_case, mock_token_service, mock_user_repo):
        mock_token_service.verify = MagicMock(side_effect=InvalidTokenError("bad signature"))
        mock_user_repo.get_by_id = AsyncMock()

        result = await use_case.execute("token")

        assert result.error.code == "INVALID_TOKEN"
        assert result.error.message == "Invalid token"
        assert result.error.reason is None
        mock_user_repo.get_by_id.assert_not_called()

    async def test_user_no_longer_exists(self, use_case, mock_token_service, mock_user_repo):
        mock_token_service.verify = MagicMock(
            return_value=TokenClaims(user_id=99, username="gone", email="gone@example.com")
        )
        mock_user_repo.get_by_id = AsyncMock(return_value=None)

        result = await use_case.execute("token")

        assert result.error.code == "INVALID_TOKEN"
        assert result.error.message == "Invalid token - user not found"
        assert result.error.reason == USER_NOT_FOUND
