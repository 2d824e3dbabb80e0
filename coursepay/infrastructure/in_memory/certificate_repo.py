from coursepay.application.interfaces.certificate_repo import CertificateRepo
from coursepay.domain.entities.certificate import Certificate


class InMemoryCertificateRepo(CertificateRepo):
    def __init__(self) -> None:
        self._by_number: dict[str, Certificate] = {}
        self._by_pair: dict[tuple[str, str], str] = {}
        self._next_id = 1

    async def find_by_user_and_course(self, user_id: str, course_id: str) -> Certificate | None:
        number = self._by_pair.get((user_id, course_id))
        return self._by_number.get(number) if number else None

    async def find_by_number(self, certificate_number: str) -> Certificate | None:
        return self._by_number.get(certificate_number)

    async def create(self, certificate: Certificate) -> Certificate | None:
        key = (certificate.user_id, certificate.course_id)
        if key in self._by_pair or certificate.certificate_number in self._by_number:
            return None
        certificate.id = self._next_id
        self._next_id += 1
        self._by_number[certificate.certificate_number] = certificate
        self._by_pair[key] = certificate.certificate_number
        return certificate
