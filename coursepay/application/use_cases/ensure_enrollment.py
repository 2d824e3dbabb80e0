import logging

from coursepay.application.interfaces.enrollment_repo import EnrollmentRepo
from coursepay.application.interfaces.transaction_manager import TransactionManager
from coursepay.application.use_cases.common import store_transaction


class EnsureEnrollmentUseCase:
    """Idempotent enrollment grant; safe to re-run for an already settled intent."""

    def __init__(
        self,
        enrollment_repo: EnrollmentRepo,
        transaction_manager: TransactionManager,
    ) -> None:
        self._enrollment_repo = enrollment_repo
        self._transaction_manager = transaction_manager
        self._logger = logging.getLogger(__name__)

    async def execute(self, user_id: str, course_id: str) -> bool:
        async with store_transaction(self._transaction_manager, "ensure_enrolled"):
            created = await self._enrollment_repo.ensure_enrolled(
                user_id=user_id, course_id=course_id
            )
        if created:
            self._logger.info(
                "Enrollment created",
                extra={"user_id": user_id, "course_id": course_id},
            )
        else:
            self._logger.info(
                "Enrollment already exists, skipping",
                extra={"user_id": user_id, "course_id": course_id},
            )
        return created
