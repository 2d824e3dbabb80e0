from sqlalchemy import insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from coursepay.application.interfaces.certificate_repo import CertificateRepo
from coursepay.domain.entities.certificate import Certificate
from coursepay.infrastructure.db.tables import certificates


class CertificateRepoSQL(CertificateRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_user_and_course(self, user_id: str, course_id: str) -> Certificate | None:
        stmt = select(certificates).where(
            certificates.c.user_id == user_id,
            certificates.c.course_id == course_id,
        )
        return await self._first(stmt)

    async def find_by_number(self, certificate_number: str) -> Certificate | None:
        stmt = select(certificates).where(
            certificates.c.certificate_number == certificate_number
        )
        return await self._first(stmt)

    async def create(self, certificate: Certificate) -> Certificate | None:
        stmt = insert(certificates).values(
            user_id=certificate.user_id,
            course_id=certificate.course_id,
            certificate_number=certificate.certificate_number,
            qr_code_url=certificate.qr_code_url,
            issued_at=certificate.issued_at,
        )
        try:
            async with self._session.begin_nested():
                result = await self._session.execute(stmt)
        except IntegrityError:
            return None
        certificate.id = result.inserted_primary_key[0]
        return certificate

    async def _first(self, stmt) -> Certificate | None:
        result = await self._session.execute(stmt)
        row = result.mappings().first()
        if not row:
            return None
        return Certificate(
            id=row["id"],
            user_id=row["user_id"],
            course_id=row["course_id"],
            certificate_number=row["certificate_number"],
            qr_code_url=row["qr_code_url"],
            issued_at=row.get("issued_at"),
        )
