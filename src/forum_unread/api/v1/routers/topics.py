from __future__ import annotations

from fastapi import APIRouter, Query

from forum_unread.api.deps import LinksDep, ReadSessionDep, UoWDep
from forum_unread.api.v1.schemas.topic import (
    FirstUnreadResponse,
    RenderTopicRequest,
    RenderTopicResponse,
    TopicStatusResponse,
)
from forum_unread.domain.entities.topic import Topic
from forum_unread.services import read_state_service
from forum_unread.services.classification import TopicReadStatus

router = APIRouter(prefix="/api/v1/forum/topics", tags=["topics"])


def _status_response(topic: Topic, status: TopicReadStatus) -> TopicStatusResponse:
    return TopicStatusResponse(
        topic_id=topic.id,
        last_reply_id=topic.last_reply_id,
        unread_topic=status.unread_topic,
        unread_replies=status.unread_replies,
        css_classes=status.css_classes,
    )


@router.get("/status", response_model=list[TopicStatusResponse])
async def list_topic_statuses(
    session: ReadSessionDep,
    uow: UoWDep,
    ids: list[int] = Query(...),
) -> list[TopicStatusResponse]:
    pairs = await read_state_service.list_topic_statuses(ids, session, uow)
    return [_status_response(topic, status) for topic, status in pairs]


@router.get("/{topic_id}/status", response_model=TopicStatusResponse)
async def get_topic_status(
    topic_id: int,
    session: ReadSessionDep,
    uow: UoWDep,
) -> TopicStatusResponse:
    topic, status = await read_state_service.get_topic_status(topic_id, session, uow)
    return _status_response(topic, status)


@router.get("/{topic_id}/first-unread", response_model=FirstUnreadResponse)
async def get_first_unread(
    topic_id: int,
    session: ReadSessionDep,
    uow: UoWDep,
    links: LinksDep,
) -> FirstUnreadResponse:
    url = await read_state_service.get_first_unread_url(topic_id, session, uow, links)
    return FirstUnreadResponse(url=url)


@router.post("/{topic_id}/render", response_model=RenderTopicResponse)
async def render_topic(
    topic_id: int,
    body: RenderTopicRequest,
    session: ReadSessionDep,
    uow: UoWDep,
) -> RenderTopicResponse:
    marker = await read_state_service.render_topic(topic_id, body.reply_ids, session, uow)
    if marker is None:
        return RenderTopicResponse(topic_id=topic_id)
    return RenderTopicResponse(
        topic_id=topic_id,
        first_unread_reply_id=marker.reply_id,
        anchor=marker.anchor,
    )


@router.post("/{topic_id}/created", status_code=204)
async def topic_created(
    topic_id: int,
    session: ReadSessionDep,
    uow: UoWDep,
) -> None:
    await read_state_service.mark_topic_created(topic_id, session, uow)
