"""Data Transfer Objects for Authentication Use Cases"""

from typing import Optional
from pydantic import BaseModel, Field


class LoginCommandDTO(BaseModel):
    """
    Command DTO for logging in

    Both fields are optional here so that missing input is reported by the
    use case as MISSING_FIELDS rather than by schema validation.
    """

    username: Optional[str] = Field(
        default=None,
        description="Username or email"
    )

    password: Optional[str] = Field(
        default=None,
        description="Plain-text password"
    )


class UserDTO(BaseModel):
    """Public profile of an authenticated user"""

    id: int
    username: str
    email: str
    full_name: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "id": 1,
                "username": "admin",
                "email": "admin@company.com",
                "full_name": "Administrator",
            }
        }


class LoginResponseDTO(BaseModel):
    """Session token plus the profile it was issued for"""

    token: str
    user: UserDTO


class CreateUserCommandDTO(BaseModel):
    """Command DTO for provisioning a user"""

    username: str = Field(..., description="Login name (at least 3 characters)")
    password: str = Field(..., description="Plain-text password (at least 6 characters)")
    email: str = Field(..., description="Email address")
    full_name: Optional[str] = Field(default="Administrator", description="Display name")
