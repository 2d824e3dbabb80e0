from dataclasses import dataclass


@dataclass
class ProfileRecord:
    id: str
    full_name: str | None = None


class ProfileRepo:
    async def get_by_id(self, user_id: str) -> ProfileRecord | None:
        raise NotImplementedError
