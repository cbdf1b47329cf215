from __future__ import annotations

from typing import NewType

UserId = NewType("UserId", int)

# user id carried by callers without a valid session
ANONYMOUS_USER_ID = UserId(0)
