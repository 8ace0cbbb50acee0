"""SQLAlchemy model for books owned by users."""

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from bookmatch.infrastructure.database import Base
from bookmatch.utils import now_in_app_naive_datetime


class BookModel(Base):
    """Database representation of a book in a user's inventory.

    ``title_key`` and ``author_key`` hold the normalized identity used for
    matching; the unique constraint keeps one copy per owner and identity.
    """

    __tablename__ = "books"
    __table_args__ = (
        UniqueConstraint("user_id", "title_key", "author_key", name="uq_books_owner_identity"),
        Index("ix_books_identity", "title_key", "author_key"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title = Column(String(255), nullable=False)
    author = Column(String(255), nullable=False)
    genre = Column(String(100), nullable=True)
    title_key = Column(String(255), nullable=False)
    author_key = Column(String(255), nullable=False)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)

    user = relationship("UserModel", lazy="joined")


__all__ = ["BookModel"]
