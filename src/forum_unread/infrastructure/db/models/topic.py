from __future__ import annotations

from sqlalchemy import BigInteger, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from forum_unread.infrastructure.db.base import Base


class TopicModel(Base):
    __tablename__ = "topics"

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    forum_id: Mapped[int] = mapped_column(BigInteger, nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    # id of the most recent reply, 0 while the topic has none
    last_reply_id: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)

    replies = relationship("ReplyModel", back_populates="topic", lazy="noload")
