"""Certificate entity."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Certificate:
    user_id: str
    course_id: str
    certificate_number: str
    qr_code_url: str
    id: int | None = None
    issued_at: datetime | None = None
