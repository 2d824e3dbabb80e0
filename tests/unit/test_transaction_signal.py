from decimal import Decimal

import pytest

from coursepay.domain.entities.payment_intent import PaymentIntent, PaymentStatus
from coursepay.domain.value_objects.transaction_signal import (
    FraudStatus,
    GatewayTransactionStatus,
    TransactionSignal,
)


def _intent(status: PaymentStatus) -> PaymentIntent:
    return PaymentIntent(
        id="pay-1",
        user_id="user-1",
        course_id="course-1",
        amount=Decimal("100000"),
        order_id="ORDER-1",
        status=status,
    )


@pytest.mark.parametrize(
    ("transaction_status", "fraud_status", "expected"),
    [
        ("capture", "accept", PaymentStatus.SETTLEMENT),
        ("capture", "challenge", PaymentStatus.PENDING),
        ("capture", None, PaymentStatus.PENDING),
        ("settlement", None, PaymentStatus.SETTLEMENT),
        ("cancel", None, PaymentStatus.FAILED),
        ("deny", None, PaymentStatus.FAILED),
        ("expire", None, PaymentStatus.FAILED),
        ("pending", None, PaymentStatus.PENDING),
        ("authorize", None, PaymentStatus.PENDING),
        ("refund", None, PaymentStatus.PENDING),
        ("something-new", None, PaymentStatus.PENDING),
        (None, None, PaymentStatus.PENDING),
    ],
)
def test_target_status(transaction_status, fraud_status, expected):
    signal = TransactionSignal.from_notification(transaction_status, fraud_status)
    assert signal.target_status == expected


@pytest.mark.parametrize("transaction_status", ["settlement", "cancel", "pending"])
def test_pending_intent_moves_to_target(transaction_status):
    signal = TransactionSignal.from_notification(transaction_status, None)
    intent = _intent(PaymentStatus.PENDING)
    assert intent.next_status(signal.target_status) == signal.target_status


@pytest.mark.parametrize("current", [PaymentStatus.SETTLEMENT, PaymentStatus.FAILED])
@pytest.mark.parametrize("transaction_status", ["settlement", "cancel", "expire", "pending"])
def test_terminal_status_never_changes(current, transaction_status):
    signal = TransactionSignal.from_notification(transaction_status, None)
    assert _intent(current).next_status(signal.target_status) == current


def test_vocabulary_is_parsed_case_insensitively():
    signal = TransactionSignal.from_notification(" Capture ", "ACCEPT")
    assert signal.transaction_status == GatewayTransactionStatus.CAPTURE
    assert signal.fraud_status == FraudStatus.ACCEPT


def test_unknown_vocabulary_maps_to_unknown():
    signal = TransactionSignal.from_notification("chargeback", "maybe")
    assert signal.transaction_status == GatewayTransactionStatus.UNKNOWN
    assert signal.fraud_status == FraudStatus.UNKNOWN
