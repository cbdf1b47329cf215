from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class ReadMap:
    """One user's topic id -> last read reply id mapping.

    A topic missing from ``entries`` has never been read.
    """

    user_id: int
    entries: dict[int, int] = field(default_factory=dict)

    def get(self, topic_id: int, default: int | None = None) -> int | None:
        return self.entries.get(topic_id, default)

    def __len__(self) -> int:
        return len(self.entries)

    def advance(self, topic_id: int, reply_id: int) -> bool:
        """Move the read pointer of a topic forward, never backward.

        Returns True if the stored value changed.
        """
        current = self.entries.get(topic_id)
        if current is not None and current >= reply_id:
            return False
        self.entries[topic_id] = reply_id
        return True

    def clear(self) -> None:
        self.entries.clear()
