from __future__ import annotations

import logging
from collections.abc import Sequence

from forum_unread.application.exceptions import NotFoundError
from forum_unread.application.ports.links import LinkBuilder
from forum_unread.application.uow import UnitOfWork
from forum_unread.domain.entities.topic import Topic
from forum_unread.domain.events.first_unread_marked import FirstUnreadReplyMarked
from forum_unread.services.classification import TopicReadStatus, classify_topics
from forum_unread.services.first_unread import first_unread_reply_url
from forum_unread.services.read_session import ReadSession
from forum_unread.services.tracker import track_topic_render

logger = logging.getLogger(__name__)


async def _get_topic(topic_id: int, uow: UnitOfWork) -> Topic:
    topic = await uow.topics.get_by_id(topic_id)
    if topic is None:
        raise NotFoundError("Topic not found")
    return topic


async def get_topic_status(
    topic_id: int,
    session: ReadSession,
    uow: UnitOfWork,
) -> tuple[Topic, TopicReadStatus]:
    topic = await _get_topic(topic_id, uow)
    [status] = await classify_topics(session, [topic])
    return topic, status


async def list_topic_statuses(
    topic_ids: Sequence[int],
    session: ReadSession,
    uow: UnitOfWork,
) -> list[tuple[Topic, TopicReadStatus]]:
    """Classify the given topics; ids that are not topics are left out."""
    topics = await uow.topics.list_by_ids(topic_ids)
    statuses = await classify_topics(session, topics)
    return list(zip(topics, statuses))


async def get_first_unread_url(
    topic_id: int,
    session: ReadSession,
    uow: UnitOfWork,
    links: LinkBuilder,
) -> str:
    url = await first_unread_reply_url(topic_id, session, uow, links)
    if url is None:
        raise NotFoundError("Topic not found")
    return url


async def render_topic(
    topic_id: int,
    reply_ids: Sequence[int],
    session: ReadSession,
    uow: UnitOfWork,
) -> FirstUnreadReplyMarked | None:
    """Record that ``reply_ids`` of a topic were rendered, in that order."""
    await _get_topic(topic_id, uow)
    return await track_topic_render(session, topic_id, reply_ids)


async def mark_all_unread(session: ReadSession) -> None:
    await session.reset()


async def mark_topic_created(
    topic_id: int,
    session: ReadSession,
    uow: UnitOfWork,
) -> None:
    """Record that the author has read the topic they just created.

    The topic's current last reply id becomes the read pointer, so every
    reply posted afterwards still counts as unread.
    """
    topic = await _get_topic(topic_id, uow)
    if session.is_anonymous:
        return
    read_map = await session.ensure_loaded()
    if read_map.advance(topic_id, topic.last_reply_id):
        logger.debug("Topic %s marked read for its author %s", topic_id, session.user_id)
    await session.persist()
