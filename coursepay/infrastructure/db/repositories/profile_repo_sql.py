from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from coursepay.application.interfaces.profile_repo import ProfileRecord, ProfileRepo
from coursepay.infrastructure.db.tables import profiles


class ProfileRepoSQL(ProfileRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, user_id: str) -> ProfileRecord | None:
        stmt = select(profiles.c.id, profiles.c.full_name).where(profiles.c.id == user_id)
        result = await self._session.execute(stmt)
        row = result.first()
        if not row:
            return None
        return ProfileRecord(id=row[0], full_name=row[1])
