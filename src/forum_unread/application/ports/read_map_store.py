from __future__ import annotations

from typing import Protocol


class ReadMapStore(Protocol):
    """Per-user storage of the encoded read map.

    Implementations raise ``ReadMapPersistenceError`` on backend failure.
    """

    async def load(self, user_id: int) -> str:
        """Return the stored string, or "" when the user has none."""
        ...

    async def save(self, user_id: int, value: str) -> None: ...
