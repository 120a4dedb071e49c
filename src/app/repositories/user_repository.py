"""User Repository Interface

Defines the contract for user persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Optional
from src.domain.user import User


class UserRepository(ABC):
    """
    Repository interface for User persistence

    Backs the credential store used by login and token authentication.
    """

    @abstractmethod
    async def get_by_id(self, user_id: int) -> Optional[User]:
        """
        Retrieve user by ID

        Args:
            user_id: User ID

        Returns:
            User if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_username_or_email(self, identifier: str) -> Optional[User]:
        """
        Retrieve user whose username or email equals the identifier

        Args:
            identifier: Username or email typed at login

        Returns:
            User if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists(self, username: str, email: str) -> bool:
        """
        Check whether the username or the email is already taken

        Args:
            username: Candidate username
            email: Candidate email

        Returns:
            True if a user with either value exists
        """
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """
        Create a new user

        Args:
            user: User entity to persist

        Returns:
            Created User with generated ID
        """
        pass
