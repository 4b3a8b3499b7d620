from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from config.app_config import DATABASE_URL, SQL_ECHO


def set_sqlite_pragma(dbapi_conn, connection_record):
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA busy_timeout=5000")  # Wait up to 5s for locks instead of failing immediately
    cursor.execute("PRAGMA foreign_keys=ON")  # manager_id references are only enforced with this on
    cursor.close()


def build_engine(url: str, **kwargs) -> AsyncEngine:
    """Create an async engine, enabling foreign keys on every SQLite connection"""
    kwargs.setdefault('echo', SQL_ECHO)
    kwargs.setdefault('pool_pre_ping', True)  # Verify connections are alive before using
    new_engine = create_async_engine(url, **kwargs)
    if new_engine.dialect.name == 'sqlite':
        event.listen(new_engine.sync_engine, "connect", set_sqlite_pragma)
    return new_engine


engine = build_engine(DATABASE_URL)

SessionLocal = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
Base = declarative_base()


async def get_db():
    """Dependency for FastAPI routes"""
    async with SessionLocal() as db:
        yield db
