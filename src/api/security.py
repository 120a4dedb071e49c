"""Bearer token authentication for protected routes"""

from typing import Optional
from fastapi import Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.use_cases.auth import AuthenticateToken, UserDTO, USER_NOT_FOUND
from src.adapter.repositories.user_repository import SqlAlchemyUserRepository
from src.adapter.services.token_service import JoseTokenService
from src.depends import get_session, get_token_service
from src.api.error import ClientError

_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_scheme),
    session: AsyncSession = Depends(get_session),
    token_service: JoseTokenService = Depends(get_token_service),
) -> UserDTO:
    """
    Resolve the bearer token of the request to its user

    Raises:
        ClientError: 401 when the token is missing, expired or its user is
            gone; 403 when the token is malformed or its signature is wrong
    """
    token = credentials.credentials if credentials else None

    use_case = AuthenticateToken(SqlAlchemyUserRepository(session), token_service)
    result = await use_case.execute(token)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_TOKEN" and error.reason != USER_NOT_FOUND:
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        if error.code == "INTERNAL_ERROR":
            raise ClientError(error, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
        raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)

    return result.value
