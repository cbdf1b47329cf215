from __future__ import annotations

from typing import Protocol


class LinkBuilder(Protocol):
    def topic_url(self, topic_id: int) -> str: ...

    def reply_url(self, topic_id: int, reply_id: int) -> str: ...
