"""SQLAlchemy model for the users table."""

from sqlalchemy import Column, DateTime, Integer, String

from bookmatch.infrastructure.database import Base
from bookmatch.utils import now_in_app_naive_datetime


class UserModel(Base):
    """Database representation of a registered reader."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), nullable=False, unique=True)
    email = Column(String(120), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["UserModel"]
