import uuid
from decimal import Decimal

import pytest

from coursepay.api.schemas.certificates import IssueCertificateRequest
from coursepay.application.interfaces.certificate_repo import CertificateNumberGenerator
from coursepay.application.interfaces.course_repo import CourseRecord
from coursepay.application.interfaces.identity_provider import IdentityProvider, UserIdentity
from coursepay.application.use_cases.issue_certificate import (
    EXISTING_CERTIFICATE_MESSAGE,
    IssueCertificateUseCase,
)
from coursepay.domain.entities.certificate import Certificate
from coursepay.domain.errors import StoreUnavailableError
from coursepay.infrastructure.in_memory import (
    InMemoryCertificateRepo,
    InMemoryCourseRepo,
    InMemoryEnrollmentRepo,
    InMemoryProfileRepo,
    NoopTransactionManager,
)

USER = UserIdentity(id="6f1b2c9e-7d3a-4a51-9c1e-2b7f0d8e4a10", email="grad@example.com")
COURSE_ID = str(uuid.uuid4())


class StaticIdentityProvider(IdentityProvider):
    async def resolve(self, token: str) -> UserIdentity | None:
        return USER if token == "good-token" else None


class FixedNumberGenerator(CertificateNumberGenerator):
    def __init__(self, number: str = "CERT-202610-AAAA1111"):
        self.number = number

    async def next_number(self) -> str:
        return self.number


class LateReadCertificateRepo(InMemoryCertificateRepo):
    """The first pair lookup misses a certificate another request already stored."""

    def __init__(self, stored: Certificate | None) -> None:
        super().__init__()
        self._stale_reads = 1
        if stored is not None:
            self._by_number[stored.certificate_number] = stored
            self._by_pair[(stored.user_id, stored.course_id)] = stored.certificate_number

    async def find_by_user_and_course(self, user_id, course_id):
        if self._stale_reads:
            self._stale_reads -= 1
            return None
        return await super().find_by_user_and_course(user_id, course_id)


def _use_case(certificate_repo, number_generator=None):
    course_repo = InMemoryCourseRepo()
    course_repo.add(CourseRecord(id=COURSE_ID, title="Applied Statistics", price=Decimal("250000")))
    enrollment_repo = InMemoryEnrollmentRepo()
    return IssueCertificateUseCase(
        certificate_repo=certificate_repo,
        enrollment_repo=enrollment_repo,
        course_repo=course_repo,
        profile_repo=InMemoryProfileRepo(),
        number_generator=number_generator or FixedNumberGenerator(),
        identity_provider=StaticIdentityProvider(),
        transaction_manager=NoopTransactionManager(),
        verify_base_url="https://courses.example.com/verify",
        qr_service_url="https://qr.example.com/v1/create-qr-code/",
    )


async def _completed(use_case: IssueCertificateUseCase) -> None:
    await use_case._enrollment_repo.ensure_enrolled(USER.id, COURSE_ID)
    use_case._enrollment_repo.set_progress(USER.id, COURSE_ID, 100)


@pytest.mark.asyncio
async def test_issues_new_certificate():
    use_case = _use_case(InMemoryCertificateRepo())
    await _completed(use_case)

    response = await use_case.execute("Bearer good-token", IssueCertificateRequest(course_id=COURSE_ID))

    assert response.message is None
    assert response.certificate.certificate_number == "CERT-202610-AAAA1111"
    assert response.certificate.course_title == "Applied Statistics"


@pytest.mark.asyncio
async def test_concurrent_issue_returns_the_stored_certificate():
    stored = Certificate(
        id=7,
        user_id=USER.id,
        course_id=COURSE_ID,
        certificate_number="CERT-202610-BBBB2222",
        qr_code_url="https://qr.example.com/v1/create-qr-code/?data=x",
    )
    use_case = _use_case(LateReadCertificateRepo(stored))
    await _completed(use_case)

    response = await use_case.execute("Bearer good-token", IssueCertificateRequest(course_id=COURSE_ID))

    assert response.success is True
    assert response.message == EXISTING_CERTIFICATE_MESSAGE
    assert response.certificate.certificate_number == "CERT-202610-BBBB2222"
    assert response.certificate.id == 7


@pytest.mark.asyncio
async def test_number_collision_without_stored_pair_is_a_store_failure():
    other = Certificate(
        id=3,
        user_id=str(uuid.uuid4()),
        course_id=COURSE_ID,
        certificate_number="CERT-202610-AAAA1111",
        qr_code_url="https://qr.example.com/v1/create-qr-code/?data=y",
    )
    use_case = _use_case(LateReadCertificateRepo(other))
    await _completed(use_case)

    with pytest.raises(StoreUnavailableError):
        await use_case.execute("Bearer good-token", IssueCertificateRequest(course_id=COURSE_ID))
