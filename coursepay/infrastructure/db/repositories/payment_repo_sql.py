from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from coursepay.application.interfaces.payment_repo import PaymentRepo
from coursepay.domain.entities.payment_intent import PaymentIntent, PaymentStatus
from coursepay.infrastructure.db.tables import payments


class PaymentRepoSQL(PaymentRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create_pending(
        self,
        payment_id: str,
        user_id: str,
        course_id: str,
        amount: Decimal,
        order_id: str,
    ) -> PaymentIntent:
        now = datetime.now(timezone.utc)
        stmt = insert(payments).values(
            id=payment_id,
            user_id=user_id,
            course_id=course_id,
            amount=amount,
            order_id=order_id,
            status=PaymentStatus.PENDING.value,
            created_at=now,
            updated_at=now,
        )
        await self._session.execute(stmt)
        return PaymentIntent(
            id=payment_id,
            user_id=user_id,
            course_id=course_id,
            amount=amount,
            order_id=order_id,
            status=PaymentStatus.PENDING,
            created_at=now,
            updated_at=now,
        )

    async def find_by_order_id(self, order_id: str) -> PaymentIntent | None:
        stmt = select(payments).where(payments.c.order_id == order_id)
        result = await self._session.execute(stmt)
        row = result.mappings().first()
        return self._map_payment(row) if row else None

    async def attach_gateway_transaction(
        self,
        payment_id: str,
        gateway_transaction_id: str | None,
        gateway_payment_type: str | None,
    ) -> None:
        stmt = (
            update(payments)
            .where(payments.c.id == payment_id)
            .values(
                gateway_transaction_id=gateway_transaction_id,
                gateway_payment_type=gateway_payment_type,
                updated_at=datetime.now(timezone.utc),
            )
        )
        await self._session.execute(stmt)

    async def transition_status(
        self,
        order_id: str,
        target: PaymentStatus,
    ) -> PaymentIntent | None:
        # Single conditional update: concurrent deliveries cannot both leave pending.
        if target != PaymentStatus.PENDING:
            stmt = (
                update(payments)
                .where(
                    payments.c.order_id == order_id,
                    payments.c.status == PaymentStatus.PENDING.value,
                )
                .values(status=target.value, updated_at=datetime.now(timezone.utc))
            )
            await self._session.execute(stmt)
        return await self.find_by_order_id(order_id)

    def _map_payment(self, row) -> PaymentIntent:
        return PaymentIntent(
            id=row["id"],
            user_id=row["user_id"],
            course_id=row["course_id"],
            amount=Decimal(row["amount"]),
            order_id=row["order_id"],
            status=PaymentStatus(row["status"]),
            gateway_transaction_id=row.get("gateway_transaction_id"),
            gateway_payment_type=row.get("gateway_payment_type"),
            created_at=row.get("created_at"),
            updated_at=row.get("updated_at"),
        )
