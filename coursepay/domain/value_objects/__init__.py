"""Domain value objects."""

from coursepay.domain.value_objects.order_id import OrderId
from coursepay.domain.value_objects.transaction_signal import (
    FraudStatus,
    GatewayTransactionStatus,
    TransactionSignal,
)

__all__ = [
    "FraudStatus",
    "GatewayTransactionStatus",
    "OrderId",
    "TransactionSignal",
]
