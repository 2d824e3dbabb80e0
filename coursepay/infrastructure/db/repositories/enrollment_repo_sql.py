from datetime import datetime, timezone

from sqlalchemy import insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from coursepay.application.interfaces.enrollment_repo import EnrollmentRepo
from coursepay.domain.entities.enrollment import Enrollment
from coursepay.infrastructure.db.tables import enrollments


class EnrollmentRepoSQL(EnrollmentRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def ensure_enrolled(self, user_id: str, course_id: str) -> bool:
        if await self.get(user_id, course_id):
            return False
        stmt = insert(enrollments).values(
            user_id=user_id,
            course_id=course_id,
            progress=0,
            created_at=datetime.now(timezone.utc),
        )
        # A concurrent delivery may insert the same pair between the read and
        # the insert; the savepoint keeps the outer transaction usable.
        try:
            async with self._session.begin_nested():
                await self._session.execute(stmt)
        except IntegrityError:
            return False
        return True

    async def get(self, user_id: str, course_id: str) -> Enrollment | None:
        stmt = (
            select(enrollments)
            .where(
                enrollments.c.user_id == user_id,
                enrollments.c.course_id == course_id,
            )
            .limit(1)
        )
        result = await self._session.execute(stmt)
        row = result.mappings().first()
        if not row:
            return None
        return Enrollment(
            id=row["id"],
            user_id=row["user_id"],
            course_id=row["course_id"],
            progress=row["progress"] or 0,
            completed_at=row.get("completed_at"),
            created_at=row.get("created_at"),
        )
