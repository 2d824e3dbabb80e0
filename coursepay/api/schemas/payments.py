from decimal import Decimal
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


def parse_course_id(value: Any) -> str:
    """Checks the UUID format and returns the id exactly as sent."""
    if not isinstance(value, str):
        raise ValueError("Invalid course ID format")
    try:
        UUID(value)
    except ValueError:
        raise ValueError("Invalid course ID format") from None
    return value


class CreatePaymentRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    course_id: str = Field(alias="courseId")
    amount: Decimal

    @field_validator("course_id", mode="before")
    @classmethod
    def validate_course_id(cls, value: Any) -> str:
        return parse_course_id(value)

    @field_validator("amount")
    @classmethod
    def validate_amount(cls, value: Decimal) -> Decimal:
        if value <= 0:
            raise ValueError("Amount must be positive")
        if value < 1:
            raise ValueError("Amount must be at least 1")
        if value != value.to_integral_value():
            raise ValueError("Amount must be a whole number")
        return value


class CreatePaymentResponse(BaseModel):
    success: bool = True
    payment_url: str | None = None
    order_id: str
    transaction_id: str | None = None


class MidtransNotification(BaseModel):
    """Subset of the Midtrans HTTP notification this service reads."""

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    order_id: str | None = None
    status_code: str | None = None
    gross_amount: str | None = None
    signature_key: str | None = None
    transaction_status: str | None = None
    fraud_status: str | None = None
    transaction_id: str | None = None
    payment_type: str | None = None


class WebhookAck(BaseModel):
    success: bool = True


class ErrorResponse(BaseModel):
    error: str
