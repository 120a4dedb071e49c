"""Authentication use cases"""
from .login_user import LoginUser
from .authenticate_token import AuthenticateToken, USER_NOT_FOUND
from .create_user import CreateUser
from .dtos import (
    LoginCommandDTO,
    LoginResponseDTO,
    UserDTO,
    CreateUserCommandDTO,
)

__all__ = [
    "LoginUser",
    "AuthenticateToken",
    "USER_NOT_FOUND",
    "CreateUser",
    "LoginCommandDTO",
    "LoginResponseDTO",
    "UserDTO",
    "CreateUserCommandDTO",
]
