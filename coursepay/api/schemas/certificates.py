from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from coursepay.api.schemas.payments import parse_course_id


class IssueCertificateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    course_id: str = Field(alias="courseId")

    @field_validator("course_id", mode="before")
    @classmethod
    def validate_course_id(cls, value: Any) -> str:
        return parse_course_id(value)


class CertificateBody(BaseModel):
    id: int | None = None
    user_id: str
    course_id: str
    certificate_number: str
    qr_code_url: str
    issued_at: datetime | None = None
    course_title: str | None = None
    user_name: str | None = None
    verification_url: str | None = None


class IssueCertificateResponse(BaseModel):
    success: bool = True
    certificate: CertificateBody
    message: str | None = None


class VerifyCertificateResponse(BaseModel):
    valid: bool
    certificate: CertificateBody | None = None
