"""Value Object TransactionSignal - gateway notification vocabulary.

Midtrans reports a `transaction_status` and, for card captures, a `fraud_status`.
Both are translated here, once, into the internal three-state PaymentStatus so
the rest of the service never compares gateway strings.
"""

from dataclasses import dataclass
from enum import Enum

from coursepay.domain.entities.payment_intent import PaymentStatus


class GatewayTransactionStatus(str, Enum):
    CAPTURE = "capture"
    SETTLEMENT = "settlement"
    PENDING = "pending"
    AUTHORIZE = "authorize"
    DENY = "deny"
    CANCEL = "cancel"
    EXPIRE = "expire"
    FAILURE = "failure"
    REFUND = "refund"
    PARTIAL_REFUND = "partial_refund"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: str | None) -> "GatewayTransactionStatus":
        if not value:
            return cls.UNKNOWN
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.UNKNOWN


class FraudStatus(str, Enum):
    ACCEPT = "accept"
    CHALLENGE = "challenge"
    DENY = "deny"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: str | None) -> "FraudStatus":
        if not value:
            return cls.UNKNOWN
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.UNKNOWN


_FAILED_STATUSES = frozenset(
    {
        GatewayTransactionStatus.CANCEL,
        GatewayTransactionStatus.DENY,
        GatewayTransactionStatus.EXPIRE,
    }
)


@dataclass(frozen=True)
class TransactionSignal:
    """
    Immutable view of what the gateway says happened to a transaction.

    Attributes:
        transaction_status: Parsed gateway transaction status.
        fraud_status: Parsed fraud screening result (UNKNOWN when absent).
    """

    transaction_status: GatewayTransactionStatus
    fraud_status: FraudStatus = FraudStatus.UNKNOWN

    @classmethod
    def from_notification(
        cls, transaction_status: str | None, fraud_status: str | None
    ) -> "TransactionSignal":
        return cls(
            transaction_status=GatewayTransactionStatus.parse(transaction_status),
            fraud_status=FraudStatus.parse(fraud_status),
        )

    @property
    def target_status(self) -> PaymentStatus:
        """
        Internal status this signal asks for.

        A capture that did not pass fraud screening, and any vocabulary with no
        internal counterpart, leaves the intent pending.
        """
        if self.transaction_status == GatewayTransactionStatus.CAPTURE:
            if self.fraud_status == FraudStatus.ACCEPT:
                return PaymentStatus.SETTLEMENT
            return PaymentStatus.PENDING
        if self.transaction_status == GatewayTransactionStatus.SETTLEMENT:
            return PaymentStatus.SETTLEMENT
        if self.transaction_status in _FAILED_STATUSES:
            return PaymentStatus.FAILED
        return PaymentStatus.PENDING

