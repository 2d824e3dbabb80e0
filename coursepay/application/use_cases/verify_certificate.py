from coursepay.api.schemas.certificates import CertificateBody, VerifyCertificateResponse
from coursepay.application.interfaces.certificate_repo import CertificateRepo
from coursepay.application.interfaces.course_repo import CourseRepo
from coursepay.application.interfaces.profile_repo import ProfileRepo
from coursepay.application.interfaces.transaction_manager import TransactionManager
from coursepay.application.use_cases.common import store_transaction
from coursepay.application.use_cases.issue_certificate import build_verification_url


class VerifyCertificateUseCase:
    """Public lookup of a certificate by its number."""

    def __init__(
        self,
        certificate_repo: CertificateRepo,
        course_repo: CourseRepo,
        profile_repo: ProfileRepo,
        transaction_manager: TransactionManager,
        verify_base_url: str,
    ) -> None:
        self._certificate_repo = certificate_repo
        self._course_repo = course_repo
        self._profile_repo = profile_repo
        self._transaction_manager = transaction_manager
        self._verify_base_url = verify_base_url

    async def execute(self, certificate_number: str) -> VerifyCertificateResponse:
        async with store_transaction(self._transaction_manager, "verify_certificate"):
            certificate = await self._certificate_repo.find_by_number(certificate_number)
            if certificate is None:
                return VerifyCertificateResponse(valid=False)
            course = await self._course_repo.get_by_id(certificate.course_id)
            profile = await self._profile_repo.get_by_id(certificate.user_id)

        return VerifyCertificateResponse(
            valid=True,
            certificate=CertificateBody(
                id=certificate.id,
                user_id=certificate.user_id,
                course_id=certificate.course_id,
                certificate_number=certificate.certificate_number,
                qr_code_url=certificate.qr_code_url,
                issued_at=certificate.issued_at,
                course_title=course.title if course else None,
                user_name=profile.full_name if profile else None,
                verification_url=build_verification_url(
                    self._verify_base_url, certificate.certificate_number
                ),
            ),
        )
