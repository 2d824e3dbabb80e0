from fastapi import APIRouter, Depends, Header, Request, status

from coursepay.api.dependencies import get_use_cases
from coursepay.api.errors import domain_error_response
from coursepay.api.schemas.payments import (
    CreatePaymentRequest,
    CreatePaymentResponse,
    ErrorResponse,
    WebhookAck,
)
from coursepay.domain.errors import DomainError, ErrorKind

router = APIRouter()

WEBHOOK_STATUS_BY_KIND = {
    ErrorKind.UNAUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.MISCONFIGURED: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


@router.post(
    "/payments",
    response_model=CreatePaymentResponse,
    status_code=status.HTTP_200_OK,
    responses={400: {"model": ErrorResponse}},
)
async def create_payment(
    payload: CreatePaymentRequest,
    authorization: str | None = Header(default=None),
    use_cases=Depends(get_use_cases),
):
    try:
        return await use_cases["create_payment"].execute(
            authorization=authorization,
            request=payload,
        )
    except DomainError as exc:
        return domain_error_response(exc)


@router.post(
    "/webhooks/midtrans",
    response_model=WebhookAck,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def midtrans_webhook(
    request: Request,
    use_cases=Depends(get_use_cases),
):
    raw_body = await request.body()
    try:
        return await use_cases["handle_midtrans_notification"].execute(raw_body=raw_body)
    except DomainError as exc:
        return domain_error_response(exc, WEBHOOK_STATUS_BY_KIND)
