from __future__ import annotations

from pydantic import BaseModel, Field, NonNegativeInt


class TopicStatusResponse(BaseModel):
    topic_id: int
    last_reply_id: int
    unread_topic: bool
    unread_replies: bool
    css_classes: list[str]


class FirstUnreadResponse(BaseModel):
    url: str


class RenderTopicRequest(BaseModel):
    reply_ids: list[NonNegativeInt] = Field(default_factory=list)


class RenderTopicResponse(BaseModel):
    topic_id: int
    first_unread_reply_id: int | None = None
    anchor: str | None = None
