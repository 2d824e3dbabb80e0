"""Interface OrderIdGenerator - port for payment order id generation."""

import uuid
from abc import ABC, abstractmethod

from coursepay.application.interfaces.clock import Clock, SystemClock
from coursepay.domain.value_objects.order_id import OrderId


class OrderIdGenerator(ABC):
    """
    Port for generating identifiers of new payment intents.

    Allows injecting predictable implementations in tests.
    """

    @abstractmethod
    def generate_order_id(self, user_id: str) -> str:
        """
        Generates a fresh, never reused order id for `user_id`.

        Returns:
            String accepted by the gateway as `transaction_details.order_id`.
        """
        raise NotImplementedError

    @abstractmethod
    def generate_payment_id(self) -> str:
        """
        Generates the internal id of a payment intent.

        Returns:
            UUID v4 string.
        """
        raise NotImplementedError


class RealOrderIdGenerator(OrderIdGenerator):
    """Timestamp + user fragment + random suffix."""

    def __init__(self, clock: Clock | None = None):
        self._clock = clock or SystemClock()

    def generate_order_id(self, user_id: str) -> str:
        return str(OrderId.generate(user_id=user_id, now=self._clock.now()))

    def generate_payment_id(self) -> str:
        return str(uuid.uuid4())


class FakeOrderIdGenerator(OrderIdGenerator):
    """
    Fake implementation for tests.

    Generates predictable, still unique values.
    """

    def __init__(self, prefix: str = "ORDER-TEST"):
        self._prefix = prefix
        self._order_counter = 0
        self._payment_counter = 0

    def generate_order_id(self, user_id: str) -> str:
        self._order_counter += 1
        return f"{self._prefix}-{user_id[:8]}-{self._order_counter:04d}"

    def generate_payment_id(self) -> str:
        self._payment_counter += 1
        hex_value = f"{self._payment_counter:032x}"
        return f"{hex_value[:8]}-{hex_value[8:12]}-{hex_value[12:16]}-{hex_value[16:20]}-{hex_value[20:]}"
