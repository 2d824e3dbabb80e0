import logging

from fastapi import status
from fastapi.responses import JSONResponse

from coursepay.domain.errors import DomainError, ErrorKind

logger = logging.getLogger(__name__)


def domain_error_response(
    exc: DomainError,
    status_overrides: dict[ErrorKind, int] | None = None,
) -> JSONResponse:
    """
    Client view of a domain error: `{"error": <mapped message>}`.

    Everything else about the error is logged only. Kinds missing from
    `status_overrides` are answered with 400.
    """
    logger.warning(
        "Request failed with domain error",
        extra={
            "error_code": exc.code,
            "error_kind": exc.kind.value if exc.kind else None,
            "error_message": exc.message,
        },
    )
    status_code = (status_overrides or {}).get(exc.kind, status.HTTP_400_BAD_REQUEST)
    return JSONResponse(status_code=status_code, content={"error": exc.user_message})
