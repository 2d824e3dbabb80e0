import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from coursepay.application.interfaces.identity_provider import IdentityProvider, UserIdentity
from coursepay.application.interfaces.transaction_manager import TransactionManager
from coursepay.domain.errors import DomainError, StoreUnavailableError, UnauthenticatedError

logger = logging.getLogger(__name__)

BEARER_SCHEME = "bearer"


async def authenticate(
    identity_provider: IdentityProvider,
    authorization: str | None,
) -> UserIdentity:
    if not authorization:
        raise UnauthenticatedError("Missing authorization header")
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != BEARER_SCHEME or not token.strip():
        raise UnauthenticatedError("Malformed authorization header")
    user = await identity_provider.resolve(token.strip())
    if user is None:
        raise UnauthenticatedError("Unauthorized")
    return user


@asynccontextmanager
async def store_transaction(
    transaction_manager: TransactionManager,
    operation: str,
) -> AsyncIterator[None]:
    """
    Runs a block inside a store transaction.

    Failures other than domain errors surface as StoreUnavailableError so
    storage internals never leave the application layer.
    """
    try:
        async with transaction_manager.start():
            yield
    except DomainError:
        raise
    except Exception as exc:
        logger.error(
            "Store operation failed",
            exc_info=exc,
            extra={"operation": operation},
        )
        raise StoreUnavailableError(operation, str(exc)) from exc
