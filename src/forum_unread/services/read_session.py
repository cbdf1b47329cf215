from __future__ import annotations

import logging

from forum_unread.application.dto.principal import Principal
from forum_unread.application.exceptions import ReadMapPersistenceError
from forum_unread.application.uow import UnitOfWork
from forum_unread.domain.entities.read_map import ReadMap
from forum_unread.infrastructure.read_map_codec import decode_read_map, encode_read_map

logger = logging.getLogger(__name__)


class ReadSession:
    """Request-scoped owner of one user's read map.

    The map is loaded lazily, at most once per session, and never shared
    between requests. Anonymous sessions never touch the store.
    """

    def __init__(self, principal: Principal, uow: UnitOfWork) -> None:
        self._principal = principal
        self._uow = uow
        self._read_map: ReadMap | None = None

    @property
    def user_id(self) -> int:
        return self._principal.user_id

    @property
    def is_anonymous(self) -> bool:
        return not self._principal.is_authenticated

    @property
    def read_map(self) -> ReadMap:
        if self._read_map is None:
            raise RuntimeError("read map accessed before ensure_loaded()")
        return self._read_map

    async def ensure_loaded(self) -> ReadMap:
        if self._read_map is not None:
            return self._read_map

        if self.is_anonymous:
            self._read_map = ReadMap(user_id=self.user_id)
            return self._read_map

        raw = await self._uow.read_maps.load(self.user_id)
        self._read_map = ReadMap(user_id=self.user_id, entries=decode_read_map(raw))
        logger.debug(
            "Loaded read map for user %s (%d topics)", self.user_id, len(self._read_map),
        )
        return self._read_map

    async def persist(self) -> None:
        """Encode and save the loaded map. No-op when anonymous or never loaded."""
        if self.is_anonymous or self._read_map is None:
            return
        await self._save(encode_read_map(self._read_map.entries))
        logger.info(
            "Saved read map for user %s (%d topics)", self.user_id, len(self._read_map),
        )

    async def reset(self) -> None:
        """Forget every read pointer for this user."""
        if self.is_anonymous:
            return
        await self._save("")
        if self._read_map is None:
            self._read_map = ReadMap(user_id=self.user_id)
        else:
            self._read_map.clear()
        logger.info("Cleared read map for user %s", self.user_id)

    async def _save(self, value: str) -> None:
        try:
            await self._uow.read_maps.save(self.user_id, value)
            await self._uow.commit()
        except ReadMapPersistenceError:
            logger.exception("Failed to save read map for user %s", self.user_id)
            await self._uow.rollback()
            raise
