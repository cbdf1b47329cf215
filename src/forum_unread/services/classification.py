from __future__ import annotations

from dataclasses import dataclass

from forum_unread.domain.entities.read_map import ReadMap
from forum_unread.domain.entities.topic import Topic
from forum_unread.services.read_session import ReadSession

UNREAD_TOPIC_CLASS = "unread-topic"
UNREAD_REPLIES_CLASS = "unread-replies"


@dataclass(frozen=True, slots=True)
class TopicReadStatus:
    unread_topic: bool
    unread_replies: bool

    @property
    def css_classes(self) -> list[str]:
        classes = []
        if self.unread_topic:
            classes.append(UNREAD_TOPIC_CLASS)
        if self.unread_replies:
            classes.append(UNREAD_REPLIES_CLASS)
        return classes


READ = TopicReadStatus(unread_topic=False, unread_replies=False)


def classify(topic_id: int, topic_last_reply_id: int, read_map: ReadMap) -> TopicReadStatus:
    last_read = read_map.get(topic_id)
    if last_read is None:
        # a topic without replies has last_reply_id 0
        return TopicReadStatus(unread_topic=True, unread_replies=topic_last_reply_id > 0)
    return TopicReadStatus(
        unread_topic=False,
        unread_replies=last_read < topic_last_reply_id,
    )


async def classify_topics(session: ReadSession, topics: list[Topic]) -> list[TopicReadStatus]:
    """Classify topics for display; anonymous visitors see everything as read."""
    if session.is_anonymous:
        return [READ for _ in topics]
    read_map = await session.ensure_loaded()
    return [classify(t.id, t.last_reply_id, read_map) for t in topics]
