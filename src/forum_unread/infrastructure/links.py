from __future__ import annotations


class ForumLinkBuilder:
    """Build forum permalinks rooted at a base URL."""

    def __init__(self, base_url: str) -> None:
        self._base_url = base_url.rstrip("/")

    def topic_url(self, topic_id: int) -> str:
        return f"{self._base_url}/topics/{topic_id}/"

    def reply_url(self, topic_id: int, reply_id: int) -> str:
        return f"{self.topic_url(topic_id)}#post-{reply_id}"
