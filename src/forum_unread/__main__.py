"""Entrypoint: python -m forum_unread"""
from __future__ import annotations

import uvicorn

from forum_unread.config import settings
from forum_unread.log_config import configure_logging


def main() -> None:
    configure_logging(settings.LOG_LEVEL)
    uvicorn.run(
        "forum_unread.app:create_app",
        factory=True,
        host="0.0.0.0",
        port=8000,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
