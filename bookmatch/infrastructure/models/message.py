"""SQLAlchemy model for chat messages."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship

from bookmatch.infrastructure.database import Base
from bookmatch.utils import now_in_app_naive_datetime


class MessageModel(Base):
    """Database representation of a message posted in a chat room."""

    __tablename__ = "messages"

    id = Column(Integer, primary_key=True, index=True)
    chat_room_id = Column(
        Integer,
        ForeignKey("chat_rooms.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    sender_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    content = Column(Text, nullable=False)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)

    chat_room = relationship("ChatRoomModel", back_populates="messages")
    sender = relationship("UserModel", lazy="joined")


__all__ = ["MessageModel"]
