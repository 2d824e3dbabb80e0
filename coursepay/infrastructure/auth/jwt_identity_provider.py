import logging

from jose import JWTError, jwt

from coursepay.application.interfaces.identity_provider import IdentityProvider, UserIdentity

logger = logging.getLogger(__name__)


class JWTIdentityProvider(IdentityProvider):
    """Resolves HS256-signed access tokens; the user id is the `sub` claim."""

    def __init__(self, secret: str | None, algorithm: str = "HS256") -> None:
        self._secret = secret
        self._algorithm = algorithm

    async def resolve(self, token: str) -> UserIdentity | None:
        if not self._secret:
            logger.error("JWT secret not configured; rejecting bearer token")
            return None
        try:
            claims = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except JWTError as exc:
            logger.info("Bearer token rejected", extra={"reason": str(exc)})
            return None
        subject = claims.get("sub")
        if not subject:
            return None
        return UserIdentity(id=str(subject), email=claims.get("email"))
