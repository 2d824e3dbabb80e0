import logging
from urllib.parse import quote

from coursepay.api.schemas.certificates import (
    CertificateBody,
    IssueCertificateRequest,
    IssueCertificateResponse,
)
from coursepay.application.interfaces.certificate_repo import (
    CertificateNumberGenerator,
    CertificateRepo,
)
from coursepay.application.interfaces.clock import Clock, SystemClock
from coursepay.application.interfaces.course_repo import CourseRepo
from coursepay.application.interfaces.enrollment_repo import EnrollmentRepo
from coursepay.application.interfaces.identity_provider import IdentityProvider
from coursepay.application.interfaces.profile_repo import ProfileRepo
from coursepay.application.interfaces.transaction_manager import TransactionManager
from coursepay.application.use_cases.common import authenticate, store_transaction
from coursepay.domain.entities.certificate import Certificate
from coursepay.domain.errors import (
    CourseNotCompletedError,
    CourseNotFoundError,
    EnrollmentNotFoundError,
    StoreUnavailableError,
)

QR_IMAGE_SIZE = "400x400"
EXISTING_CERTIFICATE_MESSAGE = "Certificate already exists"


def build_verification_url(base_url: str, certificate_number: str) -> str:
    return f"{base_url.rstrip('/')}/{certificate_number}"


def build_qr_code_url(qr_service_url: str, verification_url: str) -> str:
    return f"{qr_service_url}?size={QR_IMAGE_SIZE}&data={quote(verification_url, safe='')}"


class IssueCertificateUseCase:
    """
    Issues the completion certificate of a course to the calling user.

    At most one certificate exists per (user, course); asking again returns the
    stored one.
    """

    def __init__(
        self,
        certificate_repo: CertificateRepo,
        enrollment_repo: EnrollmentRepo,
        course_repo: CourseRepo,
        profile_repo: ProfileRepo,
        number_generator: CertificateNumberGenerator,
        identity_provider: IdentityProvider,
        transaction_manager: TransactionManager,
        verify_base_url: str,
        qr_service_url: str,
        clock: Clock | None = None,
    ) -> None:
        self._certificate_repo = certificate_repo
        self._enrollment_repo = enrollment_repo
        self._course_repo = course_repo
        self._profile_repo = profile_repo
        self._number_generator = number_generator
        self._identity_provider = identity_provider
        self._transaction_manager = transaction_manager
        self._verify_base_url = verify_base_url
        self._qr_service_url = qr_service_url
        self._clock = clock or SystemClock()
        self._logger = logging.getLogger(__name__)

    async def execute(
        self,
        authorization: str | None,
        request: IssueCertificateRequest,
    ) -> IssueCertificateResponse:
        user = await authenticate(self._identity_provider, authorization)

        async with store_transaction(self._transaction_manager, "issue_certificate"):
            course = await self._course_repo.get_by_id(request.course_id)
            if not course:
                raise CourseNotFoundError(request.course_id)

            enrollment = await self._enrollment_repo.get(user.id, course.id)
            if enrollment is None:
                raise EnrollmentNotFoundError(user.id, course.id)
            if not enrollment.is_completed:
                raise CourseNotCompletedError(course.id, enrollment.progress)

            profile = await self._profile_repo.get_by_id(user.id)
            user_name = profile.full_name if profile else None

            existing = await self._certificate_repo.find_by_user_and_course(user.id, course.id)
            if existing:
                return self._existing(existing, course.title, user_name)

            certificate_number = await self._number_generator.next_number()
            verification_url = build_verification_url(self._verify_base_url, certificate_number)
            certificate = await self._certificate_repo.create(
                Certificate(
                    user_id=user.id,
                    course_id=course.id,
                    certificate_number=certificate_number,
                    qr_code_url=build_qr_code_url(self._qr_service_url, verification_url),
                    issued_at=self._clock.now(),
                )
            )
            if certificate is None:
                # Another request stored the pair first.
                existing = await self._certificate_repo.find_by_user_and_course(user.id, course.id)
                if existing is None:
                    raise StoreUnavailableError(
                        "issue_certificate", f"certificate number {certificate_number} already taken"
                    )
                return self._existing(existing, course.title, user_name)

        self._logger.info(
            "Certificate issued",
            extra={
                "certificate_number": certificate.certificate_number,
                "user_id": user.id,
                "course_id": course.id,
            },
        )
        return IssueCertificateResponse(
            success=True,
            certificate=self._body(certificate, course.title, user_name),
        )

    def _existing(
        self,
        certificate: Certificate,
        course_title: str | None,
        user_name: str | None,
    ) -> IssueCertificateResponse:
        self._logger.info(
            "Certificate already issued",
            extra={"certificate_number": certificate.certificate_number},
        )
        return IssueCertificateResponse(
            success=True,
            certificate=self._body(certificate, course_title, user_name),
            message=EXISTING_CERTIFICATE_MESSAGE,
        )

    def _body(
        self,
        certificate: Certificate,
        course_title: str | None,
        user_name: str | None,
    ) -> CertificateBody:
        return CertificateBody(
            id=certificate.id,
            user_id=certificate.user_id,
            course_id=certificate.course_id,
            certificate_number=certificate.certificate_number,
            qr_code_url=certificate.qr_code_url,
            issued_at=certificate.issued_at,
            course_title=course_title,
            user_name=user_name,
            verification_url=build_verification_url(
                self._verify_base_url, certificate.certificate_number
            ),
        )
