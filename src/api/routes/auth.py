"""Auth API Routes

Login, token verification and logout.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.schemas.auth_request import (
    LoginRequestSchema,
    LoginResponseSchema,
    SessionUserSchema,
    VerifyResponseSchema,
    MessageResponseSchema,
)
from src.app.use_cases.auth import LoginUser, LoginCommandDTO, UserDTO
from src.adapter.repositories.user_repository import SqlAlchemyUserRepository
from src.adapter.services.password_hasher import BcryptPasswordHasher
from src.adapter.services.token_service import JoseTokenService
from src.depends import get_session, get_token_service, get_password_hasher
from src.api.error import ClientError
from src.api.security import get_current_user

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post(
    "/login",
    response_model=LoginResponseSchema,
    status_code=status.HTTP_200_OK,
    responses={
        400: {
            "description": "Missing username or password",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "MISSING_FIELDS",
                            "message": "Username and password are required"
                        }
                    }
                }
            }
        },
        401: {
            "description": "Invalid credentials",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "INVALID_CREDENTIALS",
                            "message": "Invalid credentials"
                        }
                    }
                }
            }
        }
    }
)
async def login(
    request: LoginRequestSchema,
    session: AsyncSession = Depends(get_session),
    password_hasher: BcryptPasswordHasher = Depends(get_password_hasher),
    token_service: JoseTokenService = Depends(get_token_service),
):
    """
    Log in with username (or email) and password.

    **Returns:**
    - 200: Session token valid for 24 hours and the user profile
    - 400: Username or password missing
    - 401: Unknown user or wrong password
    """
    use_case = LoginUser(SqlAlchemyUserRepository(session), password_hasher, token_service)
    result = await use_case.execute(
        LoginCommandDTO(username=request.username, password=request.password)
    )

    if result.is_err():
        if result.error.code == "INVALID_CREDENTIALS":
            raise ClientError(result.error, status_code=status.HTTP_401_UNAUTHORIZED)
        if result.error.code == "INTERNAL_ERROR":
            raise ClientError(result.error, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
        raise ClientError(result.error)

    return LoginResponseSchema(
        token=result.value.token,
        user=SessionUserSchema.from_dto(result.value.user),
    )


@router.get("/verify", response_model=VerifyResponseSchema)
async def verify(user: UserDTO = Depends(get_current_user)):
    """Check that the bearer token is still valid and return its user."""
    return VerifyResponseSchema(valid=True, user=user)


@router.post("/logout", response_model=MessageResponseSchema)
async def logout():
    """
    Log out.

    Tokens are stateless; the client discards its copy.
    """
    return MessageResponseSchema(message="Logout successful")
