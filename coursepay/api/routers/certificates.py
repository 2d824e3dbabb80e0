from fastapi import APIRouter, Depends, Header, status

from coursepay.api.dependencies import get_use_cases
from coursepay.api.errors import domain_error_response
from coursepay.api.schemas.certificates import (
    IssueCertificateRequest,
    IssueCertificateResponse,
    VerifyCertificateResponse,
)
from coursepay.api.schemas.payments import ErrorResponse
from coursepay.domain.errors import DomainError

router = APIRouter()


@router.post(
    "/certificates",
    response_model=IssueCertificateResponse,
    status_code=status.HTTP_200_OK,
    responses={400: {"model": ErrorResponse}},
)
async def issue_certificate(
    payload: IssueCertificateRequest,
    authorization: str | None = Header(default=None),
    use_cases=Depends(get_use_cases),
):
    try:
        return await use_cases["issue_certificate"].execute(
            authorization=authorization,
            request=payload,
        )
    except DomainError as exc:
        return domain_error_response(exc)


@router.get(
    "/certificates/{certificate_number}/verify",
    response_model=VerifyCertificateResponse,
    status_code=status.HTTP_200_OK,
    responses={400: {"model": ErrorResponse}},
)
async def verify_certificate(
    certificate_number: str,
    use_cases=Depends(get_use_cases),
):
    try:
        return await use_cases["verify_certificate"].execute(certificate_number)
    except DomainError as exc:
        return domain_error_response(exc)
