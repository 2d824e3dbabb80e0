from dataclasses import dataclass
from decimal import Decimal


@dataclass
class CourseRecord:
    id: str
    title: str
    price: Decimal
    is_free: bool = False
    status: str = "published"


class CourseRepo:
    async def get_by_id(self, course_id: str) -> CourseRecord | None:
        raise NotImplementedError
