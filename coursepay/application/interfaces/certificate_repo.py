from coursepay.domain.entities.certificate import Certificate


class CertificateRepo:
    async def find_by_user_and_course(self, user_id: str, course_id: str) -> Certificate | None:
        raise NotImplementedError

    async def find_by_number(self, certificate_number: str) -> Certificate | None:
        raise NotImplementedError

    async def create(self, certificate: Certificate) -> Certificate | None:
        """Stores `certificate`; None when the pair or number is already taken."""
        raise NotImplementedError


class CertificateNumberGenerator:
    async def next_number(self) -> str:
        raise NotImplementedError
