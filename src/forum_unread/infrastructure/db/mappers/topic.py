from __future__ import annotations

from forum_unread.domain.entities.topic import Topic
from forum_unread.infrastructure.db.models.topic import TopicModel


def model_to_entity(model: TopicModel) -> Topic:
    return Topic(
        id=model.id,
        forum_id=model.forum_id,
        title=model.title,
        last_reply_id=model.last_reply_id,
    )
