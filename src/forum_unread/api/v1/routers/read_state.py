from __future__ import annotations

from fastapi import APIRouter

from forum_unread.api.deps import ReadSessionDep
from forum_unread.services import read_state_service

router = APIRouter(prefix="/api/v1/forum", tags=["read-state"])


@router.delete("/read-state", status_code=204)
async def mark_all_unread(session: ReadSessionDep) -> None:
    await read_state_service.mark_all_unread(session)
