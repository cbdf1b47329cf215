from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from forum_unread.domain.entities.topic import Topic
from forum_unread.infrastructure.db.mappers import topic as mapper
from forum_unread.infrastructure.db.models.topic import TopicModel


class TopicReaderRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, topic_id: int) -> Topic | None:
        result = await self._session.get(TopicModel, topic_id)
        return mapper.model_to_entity(result) if result else None

    async def list_by_ids(self, topic_ids: Sequence[int]) -> list[Topic]:
        if not topic_ids:
            return []
        stmt = (
            select(TopicModel)
            .where(TopicModel.id.in_(topic_ids))
            .order_by(TopicModel.id.asc())
        )
        result = await self._session.execute(stmt)
        return [mapper.model_to_entity(m) for m in result.scalars().all()]
