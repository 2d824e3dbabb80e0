"""Value Object OrderId - externally visible payment order identifier."""

import secrets
from dataclasses import dataclass
from datetime import datetime

ORDER_PREFIX = "ORDER"
USER_FRAGMENT_LENGTH = 8
RANDOM_SUFFIX_BYTES = 3
# Midtrans rejects order ids longer than 50 characters.
MAX_ORDER_ID_LENGTH = 50


@dataclass(frozen=True)
class OrderId:
    """
    Immutable order id sent to the gateway.

    Format: ORDER-<epoch millis>-<first 8 chars of user id>-<6 random hex chars>.
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("order_id cannot be empty")
        if len(self.value) > MAX_ORDER_ID_LENGTH:
            raise ValueError(f"order_id exceeds {MAX_ORDER_ID_LENGTH} characters: {len(self.value)}")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls, user_id: str, now: datetime) -> "OrderId":
        """Builds a fresh order id for `user_id` at instant `now`."""
        millis = int(now.timestamp() * 1000)
        fragment = user_id.replace("-", "")[:USER_FRAGMENT_LENGTH]
        suffix = secrets.token_hex(RANDOM_SUFFIX_BYTES)
        return cls(value=f"{ORDER_PREFIX}-{millis}-{fragment}-{suffix}")
