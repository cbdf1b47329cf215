from __future__ import annotations

from dataclasses import dataclass

from forum_unread.domain.value_objects.ids import ANONYMOUS_USER_ID


@dataclass(frozen=True, slots=True)
class Principal:
    """Caller identity extracted from JWT, or the anonymous visitor."""

    user_id: int

    @property
    def is_authenticated(self) -> bool:
        return self.user_id != ANONYMOUS_USER_ID


ANONYMOUS = Principal(user_id=ANONYMOUS_USER_ID)
