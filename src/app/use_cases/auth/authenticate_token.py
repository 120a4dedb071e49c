"""AuthenticateToken Use Case

Resolves a bearer token to the user it was issued for.
"""

import logging
from typing import Optional
from src.libs.result import Result, Return, Error
from src.app.repositories.user_repository import UserRepository
from src.app.services.token_service import (
    TokenService,
    TokenExpiredError,
    InvalidTokenError,
)
from .dtos import UserDTO

logger = logging.getLogger(__name__)

USER_NOT_FOUND = "user_not_found"


class AuthenticateToken:
    """
    Use Case: Authenticate a session token

    Business Rules:
    1. A token is required
    2. Expired tokens are rejected as TOKEN_EXPIRED
    3. Tampered or malformed tokens are rejected as INVALID_TOKEN
    4. Tokens of users that no longer exist are rejected as INVALID_TOKEN
    """

    def __init__(self, user_repo: UserRepository, token_service: TokenService):
        self.user_repo = user_repo
        self.token_service = token_service

    async def execute(self, token: Optional[str]) -> Result[UserDTO]:
        if not token:
            return Return.err(
                Error(code="MISSING_TOKEN", message="Access token required")
            )

        try:
            claims = self.token_service.verify(token)
        except TokenExpiredError:
            return Return.err(Error(code="TOKEN_EXPIRED", message="Token expired"))
        except InvalidTokenError as e:
            logger.warning(f"Rejected session token: {e}")
            return Return.err(Error(code="INVALID_TOKEN", message="Invalid token"))

        try:
            user = await self.user_repo.get_by_id(claims.user_id)
        except Exception as e:
            logger.exception("Token user lookup failed")
            return Return.err(
                Error(
                    code="INTERNAL_ERROR",
                    message="Internal server error",
                    reason=str(e),
                )
            )

        if user is None:
            return Return.err(
                Error(
                    code="INVALID_TOKEN",
                    message="Invalid token - user not found",
                    reason=USER_NOT_FOUND,
                )
            )

        return Return.ok(
            UserDTO(
                id=user.id,
                username=user.username,
                email=user.email,
                full_name=user.full_name,
            )
        )
