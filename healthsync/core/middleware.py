import logging
from typing import Optional

from fastapi import HTTPException, Request, status
from jose import JWTError

from healthsync.core.auth import user_claims
from healthsync.db.session import get_db_session

logger = logging.getLogger(__name__)

# never inspected for credentials
PUBLIC_PATHS = (
    "/api/auth/login",
    "/api/auth/register",
    "/api/auth/refresh",
    "/docs",
    "/openapi.json",
    "/redoc",
)


def _bearer_or_cookie(request: Request) -> Optional[str]:
    auth_header = request.headers.get("Authorization", "")
    if auth_header.startswith("Bearer "):
        return auth_header.split(" ", 1)[1].strip()
    return request.cookies.get("session")


async def verify_token_middleware(request: Request, call_next):
    """
    Attach ``request.state.user`` when the request carries a valid access token.

    Unauthenticated requests pass through untouched; routes that need a user
    depend on `get_current_user`.
    """
    request.state.user = None

    if not request.url.path.startswith(PUBLIC_PATHS):
        token = _bearer_or_cookie(request)
        if token:
            try:
                request.state.user = user_claims(token)
            except JWTError:
                logger.debug(f"Ignoring invalid or expired token on {request.url.path}")

    return await call_next(request)


def get_current_user(request: Request) -> dict:
    """Dependency for protected routes: 401 unless the middleware found a user."""
    user = getattr(request.state, "user", None)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


async def get_db(request: Request):
    """Yield an async SQLAlchemy session (dependency)."""
    async for session in get_db_session(request):
        yield session
