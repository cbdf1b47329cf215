"""Render-time read tracking.

The renderer drives a ``RenderTracker`` with three events per topic page:
``begin_topic`` before the topic, ``visit_reply`` before each reply in render
order, and ``end_topic`` afterwards. Visiting advances the user's read pointer
and yields a ``FirstUnreadReplyMarked`` event for the first reply that was
unread when the traversal began.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from forum_unread.domain.events.first_unread_marked import FirstUnreadReplyMarked
from forum_unread.services.read_session import ReadSession

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TraversalState:
    topic_id: int
    # read pointer at begin_topic; None when the topic was never read
    baseline: int | None
    marker_written: bool = False

    def is_unread(self, reply_id: int) -> bool:
        return self.baseline is None or reply_id > self.baseline


class RenderTracker:
    def __init__(self, session: ReadSession) -> None:
        self._session = session
        self._state: TraversalState | None = None

    @property
    def state(self) -> TraversalState | None:
        return self._state

    async def begin_topic(self, topic_id: int) -> None:
        if self._session.is_anonymous:
            return
        read_map = await self._session.ensure_loaded()
        if self._state is not None:
            logger.debug(
                "Topic %s traversal replaced by topic %s", self._state.topic_id, topic_id,
            )
        self._state = TraversalState(topic_id=topic_id, baseline=read_map.get(topic_id))

    def visit_reply(self, reply_id: int) -> FirstUnreadReplyMarked | None:
        state = self._state
        if self._session.is_anonymous or state is None:
            return None
        if not state.is_unread(reply_id):
            return None

        marker = None
        if not state.marker_written:
            state.marker_written = True
            marker = FirstUnreadReplyMarked(topic_id=state.topic_id, reply_id=reply_id)
            logger.debug("First unread reply of topic %s is %s", state.topic_id, reply_id)

        self._session.read_map.advance(state.topic_id, reply_id)
        return marker

    async def end_topic(self) -> None:
        if self._session.is_anonymous:
            return
        state, self._state = self._state, None
        if state is None:
            return
        await self._session.persist()


async def track_topic_render(
    session: ReadSession,
    topic_id: int,
    reply_ids: Iterable[int],
) -> FirstUnreadReplyMarked | None:
    """Run one full traversal over ``reply_ids`` and return the marker, if any."""
    tracker = RenderTracker(session)
    await tracker.begin_topic(topic_id)
    marker = None
    for reply_id in reply_ids:
        event = tracker.visit_reply(reply_id)
        if event is not None:
            marker = event
    await tracker.end_topic()
    return marker
