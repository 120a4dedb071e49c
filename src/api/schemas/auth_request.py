"""Request and response schemas for the Auth API"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from src.app.use_cases.auth import UserDTO


class LoginRequestSchema(BaseModel):
    """
    Request schema for logging in

    Used for POST /auth/login. ``username`` may also hold the email address.
    """

    username: Optional[str] = Field(default=None, description="Username or email")
    password: Optional[str] = Field(default=None, description="Password")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"username": "admin", "password": "secret123"}
        }
    )


class SessionUserSchema(BaseModel):
    """User profile as returned on login (camelCase fullName)"""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    username: str
    email: str
    full_name: Optional[str] = Field(default=None, alias="fullName")

    @classmethod
    def from_dto(cls, user: UserDTO) -> "SessionUserSchema":
        return cls(**user.model_dump())


class LoginResponseSchema(BaseModel):
    message: str = "Login successful"
    token: str
    user: SessionUserSchema


class VerifyResponseSchema(BaseModel):
    valid: bool = True
    user: UserDTO


class MessageResponseSchema(BaseModel):
    message: str
