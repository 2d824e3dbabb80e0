from datetime import datetime, timezone

from coursepay.application.interfaces.enrollment_repo import EnrollmentRepo
from coursepay.domain.entities.enrollment import Enrollment


class InMemoryEnrollmentRepo(EnrollmentRepo):
    def __init__(self) -> None:
        self._items: dict[tuple[str, str], Enrollment] = {}
        self._next_id = 1

    async def ensure_enrolled(self, user_id: str, course_id: str) -> bool:
        key = (user_id, course_id)
        if key in self._items:
            return False
        self._items[key] = Enrollment(
            id=self._next_id,
            user_id=user_id,
            course_id=course_id,
            progress=0,
            created_at=datetime.now(timezone.utc),
        )
        self._next_id += 1
        return True

    async def get(self, user_id: str, course_id: str) -> Enrollment | None:
        return self._items.get((user_id, course_id))

    def set_progress(self, user_id: str, course_id: str, progress: int) -> None:
        """Progress is tracked elsewhere; tests use this to simulate completion."""
        enrollment = self._items[(user_id, course_id)]
        enrollment.progress = progress
        if enrollment.is_completed and enrollment.completed_at is None:
            enrollment.completed_at = datetime.now(timezone.utc)
