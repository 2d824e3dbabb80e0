"""Ports of the application layer."""

from coursepay.application.interfaces.certificate_repo import (
    CertificateNumberGenerator,
    CertificateRepo,
)
from coursepay.application.interfaces.clock import Clock, FakeClock, SystemClock
from coursepay.application.interfaces.course_repo import CourseRecord, CourseRepo
from coursepay.application.interfaces.enrollment_repo import EnrollmentRepo
from coursepay.application.interfaces.identity_provider import IdentityProvider, UserIdentity
from coursepay.application.interfaces.order_id_generator import (
    FakeOrderIdGenerator,
    OrderIdGenerator,
    RealOrderIdGenerator,
)
from coursepay.application.interfaces.payment_gateway import (
    ChargeResult,
    CustomerDetails,
    PaymentGateway,
)
from coursepay.application.interfaces.payment_repo import PaymentRepo
from coursepay.application.interfaces.profile_repo import ProfileRecord, ProfileRepo
from coursepay.application.interfaces.transaction_manager import TransactionManager

__all__ = [
    # Repositories
    "PaymentRepo",
    "EnrollmentRepo",
    "CourseRepo",
    "CourseRecord",
    "ProfileRepo",
    "ProfileRecord",
    "CertificateRepo",
    # Gateways
    "PaymentGateway",
    "ChargeResult",
    "CustomerDetails",
    "IdentityProvider",
    "UserIdentity",
    # Infrastructure
    "TransactionManager",
    # Utilities
    "Clock",
    "SystemClock",
    "FakeClock",
    "OrderIdGenerator",
    "RealOrderIdGenerator",
    "FakeOrderIdGenerator",
    "CertificateNumberGenerator",
]
