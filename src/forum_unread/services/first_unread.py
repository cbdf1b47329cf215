from __future__ import annotations

from forum_unread.application.ports.links import LinkBuilder
from forum_unread.application.uow import UnitOfWork
from forum_unread.services.read_session import ReadSession


async def first_unread_reply_url(
    topic_id: int,
    session: ReadSession,
    uow: UnitOfWork,
    links: LinkBuilder,
) -> str | None:
    """URL of the earliest reply the user has not read yet.

    Returns None when ``topic_id`` is not a topic. Anonymous visitors get the
    topic permalink. A fully read topic links to the last read reply, or to
    the topic itself when nothing has been read yet.
    """
    if session.is_anonymous:
        return links.topic_url(topic_id)

    topic = await uow.topics.get_by_id(topic_id)
    if topic is None:
        return None

    read_map = await session.ensure_loaded()
    baseline = read_map.get(topic_id, 0)

    reply_id = await uow.replies.first_reply_after(topic_id, baseline)
    if reply_id is not None:
        return links.reply_url(topic_id, reply_id)

    if baseline == 0:
        return links.topic_url(topic_id)
    return links.reply_url(topic_id, baseline)
