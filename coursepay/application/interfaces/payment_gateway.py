from dataclasses import dataclass
from decimal import Decimal


@dataclass
class CustomerDetails:
    first_name: str
    email: str | None = None


@dataclass
class ChargeResult:
    transaction_id: str
    payment_type: str | None
    payment_url: str | None


class PaymentGateway:
    async def charge(
        self,
        order_id: str,
        amount: Decimal,
        customer: CustomerDetails,
    ) -> ChargeResult:
        """
        Creates a transaction with the payment provider.

        Raises:
            GatewayError: when the provider is unreachable or rejects the charge.
        """
        raise NotImplementedError
