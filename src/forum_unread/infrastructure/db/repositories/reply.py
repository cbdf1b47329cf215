from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from forum_unread.infrastructure.db.models.reply import ReplyModel


class ReplyReaderRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def first_reply_after(self, topic_id: int, after_id: int) -> int | None:
        stmt = (
            select(ReplyModel.id)
            .where(
                ReplyModel.topic_id == topic_id,
                ReplyModel.id > after_id,
            )
            .order_by(ReplyModel.id.asc())
            .limit(1)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()
