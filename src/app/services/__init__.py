from .unit_of_work import UnitOfWork
from .token_service import (
    TokenService,
    TokenClaims,
    TokenError,
    TokenExpiredError,
    InvalidTokenError,
)
from .password_hasher import PasswordHasher
from .pdf_service import PdfService

__all__ = [
    "UnitOfWork",
    "TokenService",
    "TokenClaims",
    "TokenError",
    "TokenExpiredError",
    "InvalidTokenError",
    "PasswordHasher",
    "PdfService",
]
