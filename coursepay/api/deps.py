from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from coursepay.config import get_settings
from coursepay.infrastructure.db.engine import build_engine, build_sessionmaker

settings = get_settings()

# Falls back to in-memory SQLite when DATABASE_URL is not set
engine = build_engine(settings)
AsyncSessionLocal = build_sessionmaker(engine)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    async with AsyncSessionLocal() as session:
        yield session
