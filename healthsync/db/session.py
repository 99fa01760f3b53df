import logging
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """One session per request from the factory the lifespan put on app.state."""
    session_factory = request.app.state.session_factory

    async with session_factory() as session:
        try:
            yield session
        except Exception:
            # uncommitted writes from a failed handler must not leak into the pool
            logger.debug(f"Rolling back session after error on {request.url.path}")
            await session.rollback()
            raise
