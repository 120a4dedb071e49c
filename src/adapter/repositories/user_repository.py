"""SQLAlchemy User Repository Implementation

Implements user persistence using SQLAlchemy async session.
"""

from typing import Optional
from sqlalchemy import or_
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.user_repository import UserRepository
from src.domain.user import User


class SqlAlchemyUserRepository(UserRepository):
    """
    SQLAlchemy implementation of UserRepository
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: int) -> Optional[User]:
        statement = select(User).where(User.id == user_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_by_username_or_email(self, identifier: str) -> Optional[User]:
        statement = (
            select(User)
            .where(or_(User.username == identifier, User.email == identifier))
            .order_by(User.id)
            .limit(1)
        )
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def exists(self, username: str, email: str) -> bool:
        statement = (
            select(func.count())
            .select_from(User)
            .where(or_(User.username == username, User.email == email))
        )
        result = await self.session.execute(statement)
        return result.scalar_one() > 0

    async def create(self, user: User) -> User:
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user
