"""Interface EnrollmentRepo - port for the enrollments store."""

from abc import ABC, abstractmethod

from coursepay.domain.entities.enrollment import Enrollment


class EnrollmentRepo(ABC):
    """
    Port for enrollments.

    The store must guarantee at most one enrollment per (user_id, course_id).
    """

    @abstractmethod
    async def ensure_enrolled(self, user_id: str, course_id: str) -> bool:
        """
        Inserts an enrollment with progress 0 if none exists.

        A duplicate-key violation counts as success.

        Returns:
            True if a row was created, False if it already existed.
        """
        raise NotImplementedError

    @abstractmethod
    async def get(self, user_id: str, course_id: str) -> Enrollment | None:
        """
        Fetches the enrollment for a user and course.

        Returns:
            Enrollment or None if the user is not enrolled.
        """
        raise NotImplementedError
