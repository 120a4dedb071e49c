"""User Domain Entity

Account allowed to log in and own invoices.
"""

from datetime import datetime
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import String
from src.domain.base import BaseModel, IdentifierType, TimestampType, utc_now


class User(BaseModel, table=True):
    """
    User - Authenticated owner of invoices

    Domain Rules:
    - username and email are both unique and both usable to log in
    - Only the salted password hash is stored
    - Created out-of-band by the admin provisioning tool
    """

    __tablename__ = "users"

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdentifierType, primary_key=True, autoincrement=True),
        description="Unique user identifier (auto-increment)"
    )

    username: str = Field(
        sa_column=Column(String(50), nullable=False, unique=True),
        description="Login name"
    )

    email: str = Field(
        sa_column=Column(String(255), nullable=False, unique=True),
        description="Email address, also accepted as login identifier"
    )

    password_hash: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="bcrypt hash of the password"
    )

    full_name: Optional[str] = Field(
        default=None,
        sa_column=Column(String(255), nullable=True),
        description="Display name"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(TimestampType, nullable=False),
        description="Account creation timestamp"
    )
