from __future__ import annotations

from typing import Protocol


class ReplyReader(Protocol):
    async def first_reply_after(self, topic_id: int, after_id: int) -> int | None:
        """Smallest reply id in the topic strictly greater than ``after_id``."""
        ...
