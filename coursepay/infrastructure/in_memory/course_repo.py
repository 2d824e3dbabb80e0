from coursepay.application.interfaces.course_repo import CourseRecord, CourseRepo


class InMemoryCourseRepo(CourseRepo):
    def __init__(self) -> None:
        self._items: dict[str, CourseRecord] = {}

    def add(self, course: CourseRecord) -> None:
        self._items[course.id] = course

    async def get_by_id(self, course_id: str) -> CourseRecord | None:
        return self._items.get(course_id)
