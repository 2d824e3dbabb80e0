"""
Circuit breaker for the payment gateway.

States:
- CLOSED: requests pass through
- OPEN: too many consecutive failures, requests fail immediately
- HALF_OPEN: one trial request decides whether the circuit closes again
"""

import logging

from pybreaker import CircuitBreaker, CircuitBreakerError, CircuitBreakerListener

logger = logging.getLogger(__name__)


class StateChangeLogger(CircuitBreakerListener):
    def __init__(self, name: str):
        self.name = name

    def state_change(self, cb, old_state, new_state):
        logger.warning(
            "Circuit breaker state changed",
            extra={
                "breaker_name": self.name,
                "old_state": old_state.name if old_state else None,
                "new_state": new_state.name,
            },
        )


midtrans_breaker = CircuitBreaker(
    fail_max=5,
    reset_timeout=60,
    name="midtrans_circuit_breaker",
    listeners=[StateChangeLogger("midtrans")],
)


__all__ = [
    "midtrans_breaker",
    "CircuitBreakerError",
]
