"""Session Token Service Interface

Defines the contract for issuing and verifying signed, time-limited
session tokens.
"""

from abc import ABC, abstractmethod
from pydantic import BaseModel


class TokenError(Exception):
    """Base error for token verification failures"""


class TokenExpiredError(TokenError):
    """Token signature is valid but the expiry has passed"""


class InvalidTokenError(TokenError):
    """Token is malformed or its signature does not match"""


class TokenClaims(BaseModel):
    """Identity carried inside a session token"""

    user_id: int
    username: str
    email: str


class TokenService(ABC):
    """
    Service interface for session tokens
    """

    @abstractmethod
    def issue(self, claims: TokenClaims) -> str:
        """
        Issue a signed token for the given identity

        Args:
            claims: Identity to embed

        Returns:
            Encoded token string
        """
        pass

    @abstractmethod
    def verify(self, token: str) -> TokenClaims:
        """
        Verify a token and return its claims

        Args:
            token: Encoded token string

        Returns:
            TokenClaims embedded in the token

        Raises:
            TokenExpiredError: expiry has passed
            InvalidTokenError: bad signature or malformed token
        """
        pass
