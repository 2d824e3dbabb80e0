"""PaymentIntent entity - a course payment awaiting gateway confirmation."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum


class PaymentStatus(str, Enum):
    """Internal payment statuses."""

    PENDING = "pending"
    SETTLEMENT = "settlement"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (PaymentStatus.SETTLEMENT, PaymentStatus.FAILED)


@dataclass
class PaymentIntent:
    """
    A payment intent for one course purchased by one user.

    The amount is validated against the course price when the intent is created
    and is never re-validated afterwards. Only the webhook handler moves the
    status, and only out of `pending`.
    """

    id: str
    user_id: str
    course_id: str
    amount: Decimal
    order_id: str
    status: PaymentStatus = PaymentStatus.PENDING
    gateway_transaction_id: str | None = None
    gateway_payment_type: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_settled(self) -> bool:
        return self.status == PaymentStatus.SETTLEMENT

    @property
    def is_final(self) -> bool:
        return self.status.is_terminal

    def next_status(self, target: PaymentStatus) -> PaymentStatus:
        """Status after applying `target`; terminal statuses never change."""
        if self.is_final:
            return self.status
        return target
