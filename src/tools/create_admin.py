"""Provision a login account

Usage:
    python -m src.tools.create_admin admin secret123
    python -m src.tools.create_admin jane s3cret! --email jane@example.com --full-name "Jane Doe"
    python -m src.tools.create_admin admin secret123 --init-db
"""

import asyncio
import logging
import sys

from config import ApplicationConfig
from src.app.use_cases.auth import CreateUser, CreateUserCommandDTO
from src.adapter.repositories.user_repository import SqlAlchemyUserRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import AsyncSessionLocal, engine, get_password_hasher
from src.api.app import create_tables

logger = logging.getLogger(__name__)


async def create_admin(username: str, password: str, email: str = None, full_name: str = "Administrator"):
    """
    Create a user through the CreateUser use case

    Returns:
        Result[UserDTO]
    """
    command = CreateUserCommandDTO(
        username=username,
        password=password,
        email=email or f"{username}@{ApplicationConfig.ADMIN_EMAIL_DOMAIN}",
        full_name=full_name,
    )
    async with AsyncSessionLocal() as session:
        use_case = CreateUser(
            SqlAlchemyUnitOfWork(session),
            SqlAlchemyUserRepository(session),
            get_password_hasher(),
        )
        return await use_case.execute(command)


async def main():
    import argparse

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(description="Create a user who can log in to Invoice Maker")
    parser.add_argument("username", help="Login name (at least 3 characters)")
    parser.add_argument("password", help="Password (at least 6 characters)")
    parser.add_argument(
        "--email",
        help=f"Email address (default: <username>@{ApplicationConfig.ADMIN_EMAIL_DOMAIN})",
    )
    parser.add_argument("--full-name", default="Administrator", help="Display name")
    parser.add_argument("--init-db", action="store_true", help="Create missing tables first")
    args = parser.parse_args()

    try:
        if args.init_db:
            await create_tables()
            logger.info("Database tables ready")

        result = await create_admin(args.username, args.password, args.email, args.full_name)
    finally:
        await engine.dispose()

    if result.is_err():
        print(f"Error: {result.error.message}", file=sys.stderr)
        return 1

    user = result.value
    print("User created successfully")
    print(f"  ID:       {user.id}")
    print(f"  Username: {user.username}")
    print(f"  Email:    {user.email}")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
