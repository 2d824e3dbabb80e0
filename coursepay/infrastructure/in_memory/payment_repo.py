from dataclasses import replace
from datetime import datetime, timezone
from decimal import Decimal

from coursepay.application.interfaces.payment_repo import PaymentRepo
from coursepay.domain.entities.payment_intent import PaymentIntent, PaymentStatus


class InMemoryPaymentRepo(PaymentRepo):
    def __init__(self) -> None:
        self._by_id: dict[str, PaymentIntent] = {}
        self._by_order: dict[str, str] = {}

    async def create_pending(
        self,
        payment_id: str,
        user_id: str,
        course_id: str,
        amount: Decimal,
        order_id: str,
    ) -> PaymentIntent:
        if order_id in self._by_order:
            raise ValueError(f"Duplicate order id {order_id}")
        now = datetime.now(timezone.utc)
        record = PaymentIntent(
            id=payment_id,
            user_id=user_id,
            course_id=course_id,
            amount=amount,
            order_id=order_id,
            status=PaymentStatus.PENDING,
            created_at=now,
            updated_at=now,
        )
        self._by_id[record.id] = record
        self._by_order[order_id] = record.id
        return replace(record)

    async def find_by_order_id(self, order_id: str) -> PaymentIntent | None:
        payment_id = self._by_order.get(order_id)
        return replace(self._by_id[payment_id]) if payment_id else None

    async def attach_gateway_transaction(
        self,
        payment_id: str,
        gateway_transaction_id: str | None,
        gateway_payment_type: str | None,
    ) -> None:
        record = self._by_id.get(payment_id)
        if record is None:
            return
        record.gateway_transaction_id = gateway_transaction_id
        record.gateway_payment_type = gateway_payment_type
        record.updated_at = datetime.now(timezone.utc)

    async def transition_status(
        self,
        order_id: str,
        target: PaymentStatus,
    ) -> PaymentIntent | None:
        payment_id = self._by_order.get(order_id)
        if payment_id is None:
            return None
        record = self._by_id[payment_id]
        next_status = record.next_status(target)
        if next_status != record.status:
            record.status = next_status
            record.updated_at = datetime.now(timezone.utc)
        return replace(record)
