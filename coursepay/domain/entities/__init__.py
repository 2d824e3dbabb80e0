"""Domain entities."""

from coursepay.domain.entities.certificate import Certificate
from coursepay.domain.entities.enrollment import COMPLETED_PROGRESS, Enrollment
from coursepay.domain.entities.payment_intent import PaymentIntent, PaymentStatus

__all__ = [
    "Certificate",
    "COMPLETED_PROGRESS",
    "Enrollment",
    "PaymentIntent",
    "PaymentStatus",
]
