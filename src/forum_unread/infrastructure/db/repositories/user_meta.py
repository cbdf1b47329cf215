from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from forum_unread.application.exceptions import ReadMapPersistenceError
from forum_unread.infrastructure.db.models.user_meta import UserMetaModel


class SqlReadMapStore:
    """Read map persisted as a single user-meta row per user."""

    def __init__(self, session: AsyncSession, meta_key: str) -> None:
        self._session = session
        self._meta_key = meta_key

    async def load(self, user_id: int) -> str:
        stmt = select(UserMetaModel.meta_value).where(
            UserMetaModel.user_id == user_id,
            UserMetaModel.meta_key == self._meta_key,
        )
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            raise ReadMapPersistenceError(f"user meta load failed: {exc}") from exc
        return result.scalar_one_or_none() or ""

    async def save(self, user_id: int, value: str) -> None:
        stmt = (
            pg_insert(UserMetaModel)
            .values(
                user_id=user_id,
                meta_key=self._meta_key,
                meta_value=value,
            )
            .on_conflict_do_update(
                constraint="uq_user_meta_key",
                set_={"meta_value": value},
            )
        )
        try:
            await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            raise ReadMapPersistenceError(f"user meta save failed: {exc}") from exc
