from decimal import Decimal
from uuid import uuid4

from coursepay.application.interfaces.payment_gateway import (
    ChargeResult,
    CustomerDetails,
    PaymentGateway,
)


class StubMidtransGateway(PaymentGateway):
    """Accepts every charge and records it for inspection."""

    def __init__(self) -> None:
        self.charges: list[dict] = []

    async def charge(
        self,
        order_id: str,
        amount: Decimal,
        customer: CustomerDetails,
    ) -> ChargeResult:
        transaction_id = str(uuid4())
        self.charges.append(
            {"order_id": order_id, "amount": amount, "customer": customer}
        )
        return ChargeResult(
            transaction_id=transaction_id,
            payment_type="gopay",
            payment_url=f"https://api.sandbox.midtrans.com/v2/gopay/{transaction_id}/qr-code",
        )
