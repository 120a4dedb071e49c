"""LoginUser Use Case

Verifies a username-or-email / password pair and issues a session token.
"""

import logging
from src.libs.result import Result, Return, Error
from src.app.repositories.user_repository import UserRepository
from src.app.services.password_hasher import PasswordHasher
from src.app.services.token_service import TokenService, TokenClaims
from .dtos import LoginCommandDTO, LoginResponseDTO, UserDTO

logger = logging.getLogger(__name__)


class LoginUser:
    """
    Use Case: Log in with username or email

    Business Rules:
    1. Both identifier and password are required
    2. The identifier matches either the username or the email
    3. Unknown identifier and wrong password yield the same error
    4. Token carries user id, username and email and expires after 24 hours
    """

    def __init__(
        self,
        user_repo: UserRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ):
        self.user_repo = user_repo
        self.password_hasher = password_hasher
        self.token_service = token_service

    async def execute(self, command: LoginCommandDTO) -> Result[LoginResponseDTO]:
        if not command.username or not command.password:
            return Return.err(
                Error(
                    code="MISSING_FIELDS",
                    message="Username and password are required",
                )
            )

        try:
            user = await self.user_repo.get_by_username_or_email(command.username)

            if user is None or not self.password_hasher.verify(command.password, user.password_hash):
                logger.warning("Rejected login attempt")
                return Return.err(
                    Error(
                        code="INVALID_CREDENTIALS",
                        message="Invalid credentials",
                    )
                )

            token = self.token_service.issue(
                TokenClaims(user_id=user.id, username=user.username, email=user.email)
            )
            logger.info(f"User {user.id} logged in")

            return Return.ok(
                LoginResponseDTO(
                    token=token,
                    user=UserDTO(
                        id=user.id,
                        username=user.username,
                        email=user.email,
                        full_name=user.full_name,
                    ),
                )
            )

        except Exception as e:
            logger.exception("Login failed")
            return Return.err(
                Error(
                    code="INTERNAL_ERROR",
                    message="Internal server error",
                    reason=str(e),
                )
            )
