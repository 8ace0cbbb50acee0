"""SQLAlchemy models for chat rooms and their join tables."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from bookmatch.infrastructure.database import Base
from bookmatch.utils import now_in_app_naive_datetime


class ChatRoomModel(Base):
    """Database representation of a pairwise chat room."""

    __tablename__ = "chat_rooms"

    id = Column(Integer, primary_key=True, index=True)
    pair_key = Column(String(64), nullable=False, unique=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)

    participants = relationship(
        "ChatRoomParticipantModel",
        back_populates="chat_room",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="ChatRoomParticipantModel.id",
    )
    matched_books = relationship(
        "ChatRoomMatchedBookModel",
        back_populates="chat_room",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="ChatRoomMatchedBookModel.id",
    )
    messages = relationship(
        "MessageModel",
        back_populates="chat_room",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class ChatRoomParticipantModel(Base):
    """Membership of a user in a chat room."""

    __tablename__ = "chat_room_participants"
    __table_args__ = (
        UniqueConstraint("chat_room_id", "user_id", name="uq_chat_room_participants_room_user"),
    )

    id = Column(Integer, primary_key=True, index=True)
    chat_room_id = Column(
        Integer,
        ForeignKey("chat_rooms.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    chat_room = relationship("ChatRoomModel", back_populates="participants")
    user = relationship("UserModel", lazy="joined")


class ChatRoomMatchedBookModel(Base):
    """Book that motivated the creation of a chat room."""

    __tablename__ = "chat_room_matched_books"

    id = Column(Integer, primary_key=True, index=True)
    chat_room_id = Column(
        Integer,
        ForeignKey("chat_rooms.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    book_id = Column(
        Integer,
        ForeignKey("books.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    chat_room = relationship("ChatRoomModel", back_populates="matched_books")
    book = relationship("BookModel", lazy="joined")


__all__ = ["ChatRoomModel", "ChatRoomParticipantModel", "ChatRoomMatchedBookModel"]
