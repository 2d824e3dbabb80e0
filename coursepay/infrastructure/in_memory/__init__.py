"""In-memory implementations for local runs and tests."""

from coursepay.infrastructure.in_memory.certificate_repo import InMemoryCertificateRepo
from coursepay.infrastructure.in_memory.course_repo import InMemoryCourseRepo
from coursepay.infrastructure.in_memory.enrollment_repo import InMemoryEnrollmentRepo
from coursepay.infrastructure.in_memory.payment_gateway import StubMidtransGateway
from coursepay.infrastructure.in_memory.payment_repo import InMemoryPaymentRepo
from coursepay.infrastructure.in_memory.profile_repo import InMemoryProfileRepo
from coursepay.infrastructure.in_memory.transaction_manager import NoopTransactionManager

__all__ = [
    # Repositories
    "InMemoryPaymentRepo",
    "InMemoryEnrollmentRepo",
    "InMemoryCourseRepo",
    "InMemoryProfileRepo",
    "InMemoryCertificateRepo",
    # Gateways
    "StubMidtransGateway",
    # Infrastructure
    "NoopTransactionManager",
]
