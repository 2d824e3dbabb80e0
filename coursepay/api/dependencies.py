from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from coursepay.api.deps import AsyncSessionLocal
from coursepay.application.interfaces.order_id_generator import RealOrderIdGenerator
from coursepay.application.use_cases.create_payment_intent import CreatePaymentIntentUseCase
from coursepay.application.use_cases.ensure_enrollment import EnsureEnrollmentUseCase
from coursepay.application.use_cases.handle_midtrans_notification import (
    HandleMidtransNotificationUseCase,
)
from coursepay.application.use_cases.issue_certificate import IssueCertificateUseCase
from coursepay.application.use_cases.verify_certificate import VerifyCertificateUseCase
from coursepay.config import Settings, get_settings
from coursepay.infrastructure.auth.jwt_identity_provider import JWTIdentityProvider
from coursepay.infrastructure.db.repositories.certificate_repo_sql import CertificateRepoSQL
from coursepay.infrastructure.db.repositories.course_repo_sql import CourseRepoSQL
from coursepay.infrastructure.db.repositories.enrollment_repo_sql import EnrollmentRepoSQL
from coursepay.infrastructure.db.repositories.payment_repo_sql import PaymentRepoSQL
from coursepay.infrastructure.db.repositories.profile_repo_sql import ProfileRepoSQL
from coursepay.infrastructure.db.transaction_manager import SQLAlchemyTransactionManager
from coursepay.infrastructure.gateways.midtrans_gateway import MidtransGateway
from coursepay.infrastructure.in_memory import (
    InMemoryCertificateRepo,
    InMemoryCourseRepo,
    InMemoryEnrollmentRepo,
    InMemoryPaymentRepo,
    InMemoryProfileRepo,
    NoopTransactionManager,
    StubMidtransGateway,
)
from coursepay.infrastructure.services.certificate_number_generator import (
    RandomCertificateNumberGenerator,
)


async def get_session(settings: Settings = Depends(get_settings)) -> AsyncSession | None:
    if settings.use_in_memory:
        yield None
        return
    async with AsyncSessionLocal() as session:
        yield session


@lru_cache(maxsize=1)
def _in_memory_bundle():
    return {
        "payment_repo": InMemoryPaymentRepo(),
        "enrollment_repo": InMemoryEnrollmentRepo(),
        "course_repo": InMemoryCourseRepo(),
        "profile_repo": InMemoryProfileRepo(),
        "certificate_repo": InMemoryCertificateRepo(),
        "payment_gateway": StubMidtransGateway(),
        "tx_manager": NoopTransactionManager(),
    }


def _build_use_cases(settings: Settings, components: dict) -> dict:
    tx_manager = components["tx_manager"]
    identity_provider = JWTIdentityProvider(
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
    )
    ensure_enrollment = EnsureEnrollmentUseCase(
        enrollment_repo=components["enrollment_repo"],
        transaction_manager=tx_manager,
    )
    return {
        "create_payment": CreatePaymentIntentUseCase(
            payment_repo=components["payment_repo"],
            course_repo=components["course_repo"],
            profile_repo=components["profile_repo"],
            payment_gateway=components["payment_gateway"],
            identity_provider=identity_provider,
            order_id_generator=RealOrderIdGenerator(),
            transaction_manager=tx_manager,
        ),
        "handle_midtrans_notification": HandleMidtransNotificationUseCase(
            payment_repo=components["payment_repo"],
            ensure_enrollment=ensure_enrollment,
            transaction_manager=tx_manager,
            server_key=settings.midtrans_server_key,
        ),
        "ensure_enrollment": ensure_enrollment,
        "issue_certificate": IssueCertificateUseCase(
            certificate_repo=components["certificate_repo"],
            enrollment_repo=components["enrollment_repo"],
            course_repo=components["course_repo"],
            profile_repo=components["profile_repo"],
            number_generator=RandomCertificateNumberGenerator(),
            identity_provider=identity_provider,
            transaction_manager=tx_manager,
            verify_base_url=settings.certificate_verify_base_url,
            qr_service_url=settings.qr_service_url,
        ),
        "verify_certificate": VerifyCertificateUseCase(
            certificate_repo=components["certificate_repo"],
            course_repo=components["course_repo"],
            profile_repo=components["profile_repo"],
            transaction_manager=tx_manager,
            verify_base_url=settings.certificate_verify_base_url,
        ),
    }


def get_use_cases(
    settings: Settings = Depends(get_settings),
    session: AsyncSession | None = Depends(get_session),
):
    if settings.use_in_memory:
        return _build_use_cases(settings, _in_memory_bundle())

    if not session:
        raise RuntimeError("DB session not available")

    return _build_use_cases(
        settings,
        {
            "payment_repo": PaymentRepoSQL(session),
            "enrollment_repo": EnrollmentRepoSQL(session),
            "course_repo": CourseRepoSQL(session),
            "profile_repo": ProfileRepoSQL(session),
            "certificate_repo": CertificateRepoSQL(session),
            "payment_gateway": MidtransGateway(
                server_key=settings.midtrans_server_key,
                is_production=settings.midtrans_is_production,
                timeout_seconds=settings.midtrans_timeout_seconds,
            ),
            "tx_manager": SQLAlchemyTransactionManager(session),
        },
    )
