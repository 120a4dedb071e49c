from .unit_of_work import SqlAlchemyUnitOfWork
from .token_service import JoseTokenService
from .password_hasher import BcryptPasswordHasher
from .pdf_service import ReportLabPdfService

__all__ = [
    "SqlAlchemyUnitOfWork",
    "JoseTokenService",
    "BcryptPasswordHasher",
    "ReportLabPdfService",
]
