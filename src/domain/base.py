"""Shared base for domain entities"""

from datetime import datetime, timezone

from sqlalchemy import BigInteger, DateTime, Integer
from sqlmodel import SQLModel

# SQLite only auto-increments INTEGER PRIMARY KEY columns
IdentifierType = BigInteger().with_variant(Integer, "sqlite")
MAX_IDENTIFIER = 2 ** 63 - 1

TimestampType = DateTime(timezone=True)


def utc_now() -> datetime:
    """Timezone-aware current time in UTC"""
    return datetime.now(timezone.utc)


class BaseModel(SQLModel):
    """Base class for all persisted domain entities"""
    pass
