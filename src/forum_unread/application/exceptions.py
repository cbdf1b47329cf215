from __future__ import annotations


class AppError(Exception):
    """Base application error."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(detail)


class NotFoundError(AppError):
    pass


class ReadMapPersistenceError(AppError):
    """The per-user read map could not be loaded from or saved to its store."""
