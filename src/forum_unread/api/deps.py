"""FastAPI dependency injection helpers."""
from __future__ import annotations

from typing import Annotated, AsyncIterator

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from forum_unread.application.dto.principal import ANONYMOUS, Principal
from forum_unread.application.ports.auth import TokenVerifier
from forum_unread.application.ports.links import LinkBuilder
from forum_unread.application.ports.read_map_store import ReadMapStore
from forum_unread.application.uow import UnitOfWork
from forum_unread.config import settings
from forum_unread.infrastructure.auth.hs256_verifier import HS256Verifier
from forum_unread.infrastructure.auth.jwks_verifier import JWKSVerifier
from forum_unread.infrastructure.cache.redis_read_map import RedisReadMapStore
from forum_unread.infrastructure.db.repositories.user_meta import SqlReadMapStore
from forum_unread.infrastructure.db.session import AsyncSessionLocal
from forum_unread.infrastructure.db.uow import SqlAlchemyUoW
from forum_unread.infrastructure.links import ForumLinkBuilder
from forum_unread.services.read_session import ReadSession

# Missing credentials mean an anonymous visitor, not an error
_bearer_scheme = HTTPBearer(auto_error=False)


async def get_uow(request: Request) -> AsyncIterator[UnitOfWork]:
    async with AsyncSessionLocal() as session:
        read_maps: ReadMapStore
        if settings.READ_MAP_BACKEND == "redis":
            read_maps = RedisReadMapStore(request.app.state.redis, settings.READ_MAP_REDIS_KEY)
        else:
            read_maps = SqlReadMapStore(session, settings.READ_MAP_META_KEY)
        yield SqlAlchemyUoW(session, read_maps)


UoWDep = Annotated[UnitOfWork, Depends(get_uow)]


def _get_verifier() -> TokenVerifier:
    if settings.JWT_VERIFY_MODE == "jwks":
        assert settings.JWKS_URL, "JWKS_URL must be set when JWT_VERIFY_MODE=jwks"
        return JWKSVerifier(settings.JWKS_URL)
    return HS256Verifier(settings.JWT_SECRET, settings.JWT_ALGORITHM)


_verifier: TokenVerifier | None = None


def get_verifier() -> TokenVerifier:
    global _verifier  # noqa: PLW0603
    if _verifier is None:
        _verifier = _get_verifier()
    return _verifier


async def get_current_principal(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_bearer_scheme)],
) -> Principal:
    if credentials is None:
        return ANONYMOUS
    verifier = get_verifier()
    try:
        return await verifier.verify(credentials.credentials)
    except Exception as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exc),
        ) from exc


CurrentPrincipal = Annotated[Principal, Depends(get_current_principal)]


async def get_read_session(principal: CurrentPrincipal, uow: UoWDep) -> ReadSession:
    return ReadSession(principal, uow)


ReadSessionDep = Annotated[ReadSession, Depends(get_read_session)]


def get_links() -> LinkBuilder:
    return ForumLinkBuilder(settings.FORUM_BASE_URL)


LinksDep = Annotated[LinkBuilder, Depends(get_links)]
