from coursepay.application.interfaces.profile_repo import ProfileRecord, ProfileRepo


class InMemoryProfileRepo(ProfileRepo):
    def __init__(self) -> None:
        self._items: dict[str, ProfileRecord] = {}

    def add(self, profile: ProfileRecord) -> None:
        self._items[profile.id] = profile

    async def get_by_id(self, user_id: str) -> ProfileRecord | None:
        return self._items.get(user_id)
