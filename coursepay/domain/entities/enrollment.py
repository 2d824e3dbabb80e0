"""Enrollment entity - a user's access to a course."""

from dataclasses import dataclass
from datetime import datetime

COMPLETED_PROGRESS = 100


@dataclass
class Enrollment:
    """Identity is the (user_id, course_id) pair; at most one row per pair."""

    user_id: str
    course_id: str
    progress: int = 0
    id: int | None = None
    completed_at: datetime | None = None
    created_at: datetime | None = None

    @property
    def is_completed(self) -> bool:
        return self.progress >= COMPLETED_PROGRESS
