"""CreateUser Use Case

Out-of-band provisioning of a login account.
"""

import logging
from src.libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.password_hasher import PasswordHasher
from src.app.repositories.user_repository import UserRepository
from src.domain.user import User
from .dtos import CreateUserCommandDTO, UserDTO

logger = logging.getLogger(__name__)

MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 6


class CreateUser:
    """
    Use Case: Provision a user

    Business Rules:
    1. Username has at least 3 characters
    2. Password has at least 6 characters
    3. Username and email must not already be taken
    4. Only the bcrypt hash of the password is stored
    """

    def __init__(
        self,
        uow: UnitOfWork,
        user_repo: UserRepository,
        password_hasher: PasswordHasher,
    ):
        self.uow = uow
        self.user_repo = user_repo
        self.password_hasher = password_hasher

    async def execute(self, command: CreateUserCommandDTO) -> Result[UserDTO]:
        if len(command.username) < MIN_USERNAME_LENGTH:
            return Return.err(
                Error(
                    code="VALIDATION_ERROR",
                    message=f"Username must be at least {MIN_USERNAME_LENGTH} characters long",
                )
            )

        if len(command.password) < MIN_PASSWORD_LENGTH:
            return Return.err(
                Error(
                    code="VALIDATION_ERROR",
                    message=f"Password must be at least {MIN_PASSWORD_LENGTH} characters long",
                )
            )

        try:
            if await self.user_repo.exists(command.username, command.email):
                return Return.err(
                    Error(
                        code="USER_ALREADY_EXISTS",
                        message=f"User with username '{command.username}' already exists",
                    )
                )

            user = await self.user_repo.create(
                User(
                    username=command.username,
                    email=command.email,
                    password_hash=self.password_hasher.hash(command.password),
                    full_name=command.full_name,
                )
            )
            await self.uow.commit()
            logger.info(f"Created user {user.id} ({user.username})")

            return Return.ok(
                UserDTO(
                    id=user.id,
                    username=user.username,
                    email=user.email,
                    full_name=user.full_name,
                )
            )

        except Exception as e:
            await self.uow.rollback()
            logger.exception("Failed to create user")
            return Return.err(
                Error(
                    code="INTERNAL_ERROR",
                    message="Failed to create user",
                    reason=str(e),
                )
            )
