from sqlalchemy.ext.asyncio import AsyncEngine

from database import engine, Base
import models  # noqa: F401  registers tables on Base.metadata
import logging

logger = logging.getLogger(__name__)


async def init_database(target: AsyncEngine | None = None):
    """
    Create any missing tables.

    Safe to run on every startup: existing tables are left untouched.
    """
    target = target or engine
    async with target.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info(f"Database schema ready: {', '.join(sorted(Base.metadata.tables))}")
