from __future__ import annotations

import pytest

from forum_unread.application.dto.principal import Principal
from forum_unread.application.exceptions import NotFoundError
from forum_unread.infrastructure.read_map_codec import decode_read_map
from forum_unread.services import read_state_service
from forum_unread.services.read_session import ReadSession
from tests.conftest import BASE_URL, make_topic


@pytest.mark.asyncio
async def test_mark_all_unread_wipes_store(session, uow):
    uow.read_maps._values[42] = "|5:3|7:2"

    await read_state_service.mark_all_unread(session)

    assert uow.read_maps._values[42] == ""
    assert uow.read_maps.loads == []


@pytest.mark.asyncio
async def test_mark_topic_created_uses_last_reply_as_pointer(session, uow):
    uow.add_topic(make_topic(50, last_reply_id=0))
    uow.read_maps._values[42] = "|3:4"

    await read_state_service.mark_topic_created(50, session, uow)

    assert decode_read_map(uow.read_maps._values[42]) == {3: 4, 50: 0}


@pytest.mark.asyncio
async def test_mark_topic_created_with_independent_id_sequences(session, uow):
    uow.add_topic(make_topic(500, last_reply_id=3), reply_ids=[1, 2, 3])

    await read_state_service.mark_topic_created(500, session, uow)
    uow.add_topic(make_topic(500, last_reply_id=4), reply_ids=[1, 2, 3, 4])

    fresh = ReadSession(Principal(user_id=42), uow)
    _, status = await read_state_service.get_topic_status(500, fresh, uow)
    assert status.unread_topic is False
    assert status.unread_replies is True


@pytest.mark.asyncio
async def test_mark_topic_created_never_rewinds(session, uow):
    uow.add_topic(make_topic(50, last_reply_id=60))
    uow.read_maps._values[42] = "|50:70"

    await read_state_service.mark_topic_created(50, session, uow)

    assert decode_read_map(uow.read_maps._values[42]) == {50: 70}


@pytest.mark.asyncio
async def test_mark_topic_created_requires_topic(session, uow):
    with pytest.raises(NotFoundError):
        await read_state_service.mark_topic_created(999, session, uow)

    assert uow.read_maps.saves == []
    assert uow.read_maps.loads == []


@pytest.mark.asyncio
async def test_get_topic_status(session, uow):
    uow.add_topic(make_topic(5, last_reply_id=30))
    uow.read_maps._values[42] = "|5:20"

    topic, status = await read_state_service.get_topic_status(5, session, uow)

    assert topic.id == 5
    assert status.unread_topic is False
    assert status.unread_replies is True


@pytest.mark.asyncio
async def test_get_topic_status_not_found(session, uow):
    with pytest.raises(NotFoundError):
        await read_state_service.get_topic_status(5, session, uow)


@pytest.mark.asyncio
async def test_list_topic_statuses_skips_unknown_ids(session, uow):
    uow.add_topic(make_topic(5, last_reply_id=30))
    uow.add_topic(make_topic(6, last_reply_id=0))

    pairs = await read_state_service.list_topic_statuses([6, 999, 5], session, uow)

    assert [t.id for t, _ in pairs] == [5, 6]


@pytest.mark.asyncio
async def test_get_first_unread_url_not_found(session, uow, links):
    with pytest.raises(NotFoundError):
        await read_state_service.get_first_unread_url(5, session, uow, links)


@pytest.mark.asyncio
async def test_get_first_unread_url(session, uow, links):
    uow.add_topic(make_topic(5, last_reply_id=30), reply_ids=[21, 30])

    url = await read_state_service.get_first_unread_url(5, session, uow, links)

    assert url == f"{BASE_URL}/topics/5/#post-21"


@pytest.mark.asyncio
async def test_render_topic_requires_topic(session, uow):
    with pytest.raises(NotFoundError):
        await read_state_service.render_topic(5, [101], session, uow)

    assert uow.read_maps.saves == []


@pytest.mark.asyncio
async def test_render_topic_tracks_replies(session, uow):
    uow.add_topic(make_topic(5, last_reply_id=103), reply_ids=[101, 102, 103])

    marker = await read_state_service.render_topic(5, [101, 102, 103], session, uow)

    assert marker.reply_id == 101
    assert decode_read_map(uow.read_maps._values[42]) == {5: 103}
