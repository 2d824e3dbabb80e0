from decimal import Decimal

from coursepay.domain.entities.payment_intent import PaymentIntent, PaymentStatus


class PaymentRepo:
    async def create_pending(
        self,
        payment_id: str,
        user_id: str,
        course_id: str,
        amount: Decimal,
        order_id: str,
    ) -> PaymentIntent:
        raise NotImplementedError

    async def find_by_order_id(self, order_id: str) -> PaymentIntent | None:
        raise NotImplementedError

    async def attach_gateway_transaction(
        self,
        payment_id: str,
        gateway_transaction_id: str | None,
        gateway_payment_type: str | None,
    ) -> None:
        raise NotImplementedError

    async def transition_status(
        self,
        order_id: str,
        target: PaymentStatus,
    ) -> PaymentIntent | None:
        """
        Atomically moves a pending intent to `target`.

        Terminal intents are left untouched. Returns the intent as stored after
        the update, or None when no intent has this order id.
        """
        raise NotImplementedError
