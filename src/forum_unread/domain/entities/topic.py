from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Topic:
    id: int
    forum_id: int
    title: str
    last_reply_id: int
