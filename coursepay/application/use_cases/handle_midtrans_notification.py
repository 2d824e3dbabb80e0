import logging
from decimal import Decimal, InvalidOperation

from coursepay.api.schemas.payments import MidtransNotification, WebhookAck
from coursepay.application.interfaces.payment_repo import PaymentRepo
from coursepay.application.interfaces.transaction_manager import TransactionManager
from coursepay.application.use_cases.common import store_transaction
from coursepay.application.use_cases.ensure_enrollment import EnsureEnrollmentUseCase
from coursepay.domain.entities.payment_intent import PaymentIntent
from coursepay.domain.errors import (
    MisconfiguredError,
    PaymentIntentNotFoundError,
    UnauthenticatedError,
    ValidationError,
)
from coursepay.domain.signature import verify_signature
from coursepay.domain.value_objects.transaction_signal import TransactionSignal


class HandleMidtransNotificationUseCase:
    """
    Applies a gateway notification to the stored payment intent.

    Step 1 moves the intent status; step 2 grants the enrollment. They run in
    separate transactions. Step 2 re-runs for an intent that is already settled,
    so a re-delivered notification repairs a crash between the two steps.
    """

    def __init__(
        self,
        payment_repo: PaymentRepo,
        ensure_enrollment: EnsureEnrollmentUseCase,
        transaction_manager: TransactionManager,
        server_key: str | None,
    ) -> None:
        self._payment_repo = payment_repo
        self._ensure_enrollment = ensure_enrollment
        self._transaction_manager = transaction_manager
        self._server_key = server_key
        self._logger = logging.getLogger(__name__)

    async def execute(self, raw_body: bytes) -> WebhookAck:
        notification = self._parse(raw_body)

        if not notification.signature_key:
            raise UnauthenticatedError("Missing signature_key in notification")
        if not self._server_key:
            raise MisconfiguredError("MIDTRANS_SERVER_KEY")
        if not verify_signature(
            order_id=notification.order_id or "",
            status_code=notification.status_code or "",
            gross_amount=notification.gross_amount or "",
            server_key=self._server_key,
            signature_key=notification.signature_key,
        ):
            raise UnauthenticatedError("Invalid signature")

        order_id = notification.order_id
        if not order_id:
            raise ValidationError("order_id", "missing from notification")

        signal = TransactionSignal.from_notification(
            transaction_status=notification.transaction_status,
            fraud_status=notification.fraud_status,
        )

        async with store_transaction(self._transaction_manager, "transition_status"):
            intent = await self._payment_repo.transition_status(
                order_id=order_id, target=signal.target_status
            )
        if intent is None:
            raise PaymentIntentNotFoundError(order_id)

        self._warn_on_amount_mismatch(intent, notification)
        self._logger.info(
            "Midtrans notification processed",
            extra={
                "order_id": order_id,
                "transaction_status": signal.transaction_status.value,
                "fraud_status": signal.fraud_status.value,
                "requested_status": signal.target_status.value,
                "payment_status": intent.status.value,
            },
        )

        if intent.is_settled:
            await self._ensure_enrollment.execute(
                user_id=intent.user_id, course_id=intent.course_id
            )
        return WebhookAck(success=True)

    def _parse(self, raw_body: bytes) -> MidtransNotification:
        if not raw_body:
            raise ValidationError("body", "empty notification body")
        try:
            return MidtransNotification.model_validate_json(raw_body)
        except ValueError as exc:
            raise ValidationError("body", "invalid notification payload") from exc

    def _warn_on_amount_mismatch(
        self, intent: PaymentIntent, notification: MidtransNotification
    ) -> None:
        # The stored intent stays authoritative; the mismatch is only reported.
        try:
            notified = Decimal(notification.gross_amount or "")
        except InvalidOperation:
            notified = None
        if notified is None or notified != intent.amount:
            self._logger.warning(
                "Notification amount differs from stored intent amount",
                extra={
                    "order_id": intent.order_id,
                    "stored_amount": str(intent.amount),
                    "notified_amount": notification.gross_amount,
                },
            )
