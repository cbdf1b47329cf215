from __future__ import annotations

from types import TracebackType
from typing import Self

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from forum_unread.application.exceptions import ReadMapPersistenceError
from forum_unread.application.ports.read_map_store import ReadMapStore
from forum_unread.infrastructure.db.repositories.reply import ReplyReaderRepo
from forum_unread.infrastructure.db.repositories.topic import TopicReaderRepo


class SqlAlchemyUoW:
    """Concrete Unit-of-Work backed by a single AsyncSession.

    The read map store is injected since it may live outside the database.
    """

    def __init__(self, session: AsyncSession, read_maps: ReadMapStore) -> None:
        self._session = session
        self.topics = TopicReaderRepo(session)
        self.replies = ReplyReaderRepo(session)
        self.read_maps = read_maps

    async def commit(self) -> None:
        try:
            await self._session.commit()
        except SQLAlchemyError as exc:
            await self._session.rollback()
            raise ReadMapPersistenceError(f"commit failed: {exc}") from exc

    async def rollback(self) -> None:
        await self._session.rollback()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if exc_type is not None:
            await self.rollback()
