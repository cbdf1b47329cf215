"""Shared test fixtures."""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

import pytest

from forum_unread.application.dto.principal import ANONYMOUS, Principal
from forum_unread.application.exceptions import ReadMapPersistenceError
from forum_unread.domain.entities.topic import Topic
from forum_unread.infrastructure.links import ForumLinkBuilder
from forum_unread.services.read_session import ReadSession

BASE_URL = "https://forum.test"


@pytest.fixture
def user_principal() -> Principal:
    return Principal(user_id=42)


@pytest.fixture
def anonymous_principal() -> Principal:
    return ANONYMOUS


@pytest.fixture
def links() -> ForumLinkBuilder:
    return ForumLinkBuilder(BASE_URL)


def make_topic(topic_id: int = 5, *, last_reply_id: int = 0, forum_id: int = 1) -> Topic:
    return Topic(
        id=topic_id,
        forum_id=forum_id,
        title=f"Topic {topic_id}",
        last_reply_id=last_reply_id,
    )


@dataclass
class FakeTopicReader:
    _store: dict[int, Topic] = field(default_factory=dict)

    async def get_by_id(self, topic_id: int) -> Topic | None:
        return self._store.get(topic_id)

    async def list_by_ids(self, topic_ids: Sequence[int]) -> list[Topic]:
        return [self._store[t] for t in sorted(set(topic_ids)) if t in self._store]


@dataclass
class FakeReplyReader:
    _replies: dict[int, list[int]] = field(default_factory=dict)

    async def first_reply_after(self, topic_id: int, after_id: int) -> int | None:
        later = [r for r in self._replies.get(topic_id, []) if r > after_id]
        return min(later) if later else None


@dataclass
class FakeReadMapStore:
    _values: dict[int, str] = field(default_factory=dict)
    loads: list[int] = field(default_factory=list)
    saves: list[tuple[int, str]] = field(default_factory=list)
    fail_on_save: bool = False

    async def load(self, user_id: int) -> str:
        self.loads.append(user_id)
        return self._values.get(user_id, "")

    async def save(self, user_id: int, value: str) -> None:
        if self.fail_on_save:
            raise ReadMapPersistenceError("store unavailable")
        self.saves.append((user_id, value))
        self._values[user_id] = value


@dataclass
class FakeUoW:
    """In-memory UoW for unit tests."""
    topics: FakeTopicReader = field(default_factory=FakeTopicReader)
    replies: FakeReplyReader = field(default_factory=FakeReplyReader)
    read_maps: FakeReadMapStore = field(default_factory=FakeReadMapStore)
    _committed: bool = False
    _rolled_back: bool = False

    def add_topic(self, topic: Topic, reply_ids: Sequence[int] = ()) -> Topic:
        self.topics._store[topic.id] = topic
        self.replies._replies[topic.id] = list(reply_ids)
        return topic

    async def commit(self) -> None:
        self._committed = True

    async def rollback(self) -> None:
        self._rolled_back = True


@pytest.fixture
def uow() -> FakeUoW:
    return FakeUoW()


@pytest.fixture
def session(user_principal, uow) -> ReadSession:
    return ReadSession(user_principal, uow)


@pytest.fixture
def anonymous_session(anonymous_principal, uow) -> ReadSession:
    return ReadSession(anonymous_principal, uow)
