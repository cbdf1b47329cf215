from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from forum_unread.domain.entities.topic import Topic


class TopicReader(Protocol):
    async def get_by_id(self, topic_id: int) -> Topic | None:
        """Return the topic, or None if the id is not a topic."""
        ...

    async def list_by_ids(self, topic_ids: Sequence[int]) -> list[Topic]: ...
