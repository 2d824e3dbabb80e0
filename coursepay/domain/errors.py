"""Domain errors for the course payments service."""

from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of failure categories surfaced by the service."""

    UNAUTHENTICATED = "UNAUTHENTICATED"
    VALIDATION = "VALIDATION"
    NOT_FOUND = "NOT_FOUND"
    PRICE_MISMATCH = "PRICE_MISMATCH"
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"
    GATEWAY_UNAVAILABLE = "GATEWAY_UNAVAILABLE"
    MISCONFIGURED = "MISCONFIGURED"
    NOT_ENROLLED = "NOT_ENROLLED"
    COURSE_NOT_COMPLETED = "COURSE_NOT_COMPLETED"


DEFAULT_USER_MESSAGE = (
    "An unexpected error occurred. Please contact support if the issue persists."
)


def user_message_for(kind: ErrorKind | None) -> str:
    """
    Returns the client-facing message for an error kind.

    Internal error text never reaches the client; unknown or missing kinds fall
    through to the generic retry-later message.
    """
    match kind:
        case ErrorKind.UNAUTHENTICATED:
            return "Authentication required. Please log in."
        case ErrorKind.VALIDATION:
            return "Invalid request. Please try again."
        case ErrorKind.NOT_FOUND:
            return "The selected course or order does not exist or is not available."
        case ErrorKind.PRICE_MISMATCH:
            return "The payment amount does not match the course price."
        case ErrorKind.STORE_UNAVAILABLE:
            return "Payment processing is temporarily unavailable. Please try again later."
        case ErrorKind.GATEWAY_UNAVAILABLE:
            return "Payment provider is temporarily unavailable. Please try again later."
        case ErrorKind.MISCONFIGURED:
            return "Server configuration error"
        case ErrorKind.NOT_ENROLLED:
            return (
                "Unable to generate certificate. "
                "Please ensure you are enrolled in this course."
            )
        case ErrorKind.COURSE_NOT_COMPLETED:
            return (
                "Certificate requires 100% course completion. "
                "Please finish all course materials."
            )
        case _:
            return DEFAULT_USER_MESSAGE


class DomainError(Exception):
    """Base class for every domain error."""

    kind: ErrorKind | None = None

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    @property
    def user_message(self) -> str:
        return user_message_for(self.kind)


# === Authentication / configuration ===


class UnauthenticatedError(DomainError):
    """Missing or invalid bearer credential, or a bad webhook signature."""

    kind = ErrorKind.UNAUTHENTICATED

    def __init__(self, reason: str):
        super().__init__(message=reason, code="UNAUTHENTICATED")
        self.reason = reason


class MisconfiguredError(DomainError):
    """A required secret is not configured on the server."""

    kind = ErrorKind.MISCONFIGURED

    def __init__(self, setting: str):
        super().__init__(message=f"{setting} not configured", code="MISCONFIGURED")
        self.setting = setting


# === Validation ===


class ValidationError(DomainError):
    """Malformed input."""

    kind = ErrorKind.VALIDATION

    def __init__(self, field: str, message: str):
        super().__init__(
            message=f"Validation failed on '{field}': {message}",
            code="VALIDATION_ERROR",
        )
        self.field = field


# === Lookups ===


class CourseNotFoundError(DomainError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, course_id: str):
        super().__init__(message=f"Course not found: {course_id}", code="COURSE_NOT_FOUND")
        self.course_id = course_id


class PaymentIntentNotFoundError(DomainError):
    """No intent matches the order id; the gateway and the store are out of sync."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, order_id: str):
        super().__init__(
            message=f"Payment intent not found for order {order_id}",
            code="PAYMENT_NOT_FOUND",
        )
        self.order_id = order_id


class EnrollmentNotFoundError(DomainError):
    kind = ErrorKind.NOT_ENROLLED

    def __init__(self, user_id: str, course_id: str):
        super().__init__(
            message=f"Enrollment not found for user {user_id} in course {course_id}",
            code="ENROLLMENT_NOT_FOUND",
        )
        self.user_id = user_id
        self.course_id = course_id


class CourseNotCompletedError(DomainError):
    kind = ErrorKind.COURSE_NOT_COMPLETED

    def __init__(self, course_id: str, progress: int):
        super().__init__(
            message=f"Course {course_id} not completed yet: progress {progress}%",
            code="COURSE_NOT_COMPLETED",
        )
        self.course_id = course_id
        self.progress = progress


# === Payments ===


class PriceMismatchError(DomainError):
    """The requested amount differs from the course's authoritative price."""

    kind = ErrorKind.PRICE_MISMATCH

    def __init__(self, course_id: str, expected: object, received: object):
        super().__init__(
            message=(
                f"Price mismatch for course {course_id}: "
                f"expected {expected}, received {received}"
            ),
            code="PRICE_MISMATCH",
        )
        self.course_id = course_id
        self.expected = expected
        self.received = received


class StoreUnavailableError(DomainError):
    kind = ErrorKind.STORE_UNAVAILABLE

    def __init__(self, operation: str, detail: str | None = None):
        super().__init__(
            message=f"Store operation '{operation}' failed: {detail}",
            code="STORE_UNAVAILABLE",
        )
        self.operation = operation


class GatewayError(DomainError):
    """
    The payment provider rejected or could not process a charge.

    `provider_payload` is kept for server-side logging only.
    """

    kind = ErrorKind.GATEWAY_UNAVAILABLE

    def __init__(
        self,
        message: str,
        http_status: int | None = None,
        provider_payload: object | None = None,
    ):
        super().__init__(message=message, code="GATEWAY_ERROR")
        self.http_status = http_status
        self.provider_payload = provider_payload
