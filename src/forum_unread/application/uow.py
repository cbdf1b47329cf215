from __future__ import annotations

from typing import Protocol

from forum_unread.application.ports.read_map_store import ReadMapStore
from forum_unread.application.repositories.reply import ReplyReader
from forum_unread.application.repositories.topic import TopicReader


class UnitOfWork(Protocol):
    topics: TopicReader
    replies: ReplyReader
    read_maps: ReadMapStore

    async def commit(self) -> None: ...
    async def rollback(self) -> None: ...
