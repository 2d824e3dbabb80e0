"""Interface IdentityProvider - resolves bearer credentials to users."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class UserIdentity:
    id: str
    email: str | None = None


class IdentityProvider(ABC):
    """Port for bearer credential resolution."""

    @abstractmethod
    async def resolve(self, token: str) -> UserIdentity | None:
        """
        Resolves a bearer token to the user it was issued for.

        Returns:
            UserIdentity, or None if the token is invalid, expired or unknown.
        """
        raise NotImplementedError
