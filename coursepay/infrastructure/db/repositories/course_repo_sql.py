from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from coursepay.application.interfaces.course_repo import CourseRecord, CourseRepo
from coursepay.infrastructure.db.tables import courses


class CourseRepoSQL(CourseRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, course_id: str) -> CourseRecord | None:
        stmt = select(courses).where(courses.c.id == course_id)
        result = await self._session.execute(stmt)
        row = result.mappings().first()
        if not row:
            return None
        return CourseRecord(
            id=row["id"],
            title=row["title"],
            price=Decimal(row["price"] or 0),
            is_free=bool(row["is_free"]),
            status=row["status"],
        )
