"""Password Hasher Interface"""

from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    """
    Salted one-way password hashing
    """

    @abstractmethod
    def hash(self, password: str) -> str:
        """Return a salted hash for storage"""
        pass

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        """Return True if the password matches the stored hash"""
        pass
