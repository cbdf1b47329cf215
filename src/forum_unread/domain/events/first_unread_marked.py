from __future__ import annotations

from dataclasses import dataclass

FIRST_UNREAD_ANCHOR = "first_unread_reply"


@dataclass(frozen=True, slots=True)
class FirstUnreadReplyMarked:
    """Emitted at most once per topic traversal, for the earliest unread reply visited."""

    topic_id: int
    reply_id: int
    anchor: str = FIRST_UNREAD_ANCHOR
