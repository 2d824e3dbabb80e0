import asyncio

from coursepay.config import get_settings
from coursepay.domain.entities.payment_intent import PaymentStatus
from coursepay.main import app
from tests.factories import make_settings, signed_notification

WEBHOOK_URL = "/api/v1/webhooks/midtrans"


def _status(bundle, order_id: str) -> PaymentStatus:
    intent = asyncio.run(bundle["payment_repo"].find_by_order_id(order_id))
    return intent.status


def _enrolled(bundle, user_id: str, course_id: str) -> bool:
    return asyncio.run(bundle["enrollment_repo"].get(user_id, course_id)) is not None


def test_settlement_marks_paid_and_enrolls(client, bundle, create_payment, user_id, course):
    order_id = create_payment()["order_id"]

    res = client.post(WEBHOOK_URL, json=signed_notification(order_id, "settlement"))

    assert res.status_code == 200
    assert res.json() == {"success": True}
    assert _status(bundle, order_id) == PaymentStatus.SETTLEMENT
    assert _enrolled(bundle, user_id, course.id)


def test_capture_with_accepted_fraud_check_settles(client, bundle, create_payment, user_id, course):
    order_id = create_payment()["order_id"]

    res = client.post(WEBHOOK_URL, json=signed_notification(order_id, "capture", "accept"))

    assert res.status_code == 200
    assert _status(bundle, order_id) == PaymentStatus.SETTLEMENT
    assert _enrolled(bundle, user_id, course.id)


def test_capture_under_fraud_challenge_stays_pending(client, bundle, create_payment, user_id, course):
    order_id = create_payment()["order_id"]

    res = client.post(WEBHOOK_URL, json=signed_notification(order_id, "capture", "challenge"))

    assert res.status_code == 200
    assert _status(bundle, order_id) == PaymentStatus.PENDING
    assert not _enrolled(bundle, user_id, course.id)


def test_pending_notification_changes_nothing(client, bundle, create_payment, user_id, course):
    order_id = create_payment()["order_id"]

    res = client.post(WEBHOOK_URL, json=signed_notification(order_id, "pending"))

    assert res.status_code == 200
    assert _status(bundle, order_id) == PaymentStatus.PENDING
    assert not _enrolled(bundle, user_id, course.id)


def test_expire_fails_payment_and_later_settlement_is_ignored(
    client, bundle, create_payment, user_id, course
):
    order_id = create_payment()["order_id"]

    assert client.post(WEBHOOK_URL, json=signed_notification(order_id, "expire")).status_code == 200
    assert _status(bundle, order_id) == PaymentStatus.FAILED

    late = client.post(WEBHOOK_URL, json=signed_notification(order_id, "settlement"))
    assert late.status_code == 200
    assert _status(bundle, order_id) == PaymentStatus.FAILED
    assert not _enrolled(bundle, user_id, course.id)


def test_settled_payment_ignores_later_cancel(client, bundle, create_payment):
    order_id = create_payment()["order_id"]
    client.post(WEBHOOK_URL, json=signed_notification(order_id, "settlement"))

    res = client.post(WEBHOOK_URL, json=signed_notification(order_id, "cancel"))

    assert res.status_code == 200
    assert _status(bundle, order_id) == PaymentStatus.SETTLEMENT


def test_duplicate_settlement_enrolls_once(client, bundle, create_payment, user_id, course):
    order_id = create_payment()["order_id"]
    notification = signed_notification(order_id, "settlement")

    first = client.post(WEBHOOK_URL, json=notification)
    second = client.post(WEBHOOK_URL, json=notification)

    assert first.status_code == 200
    assert second.status_code == 200
    assert list(bundle["enrollment_repo"]._items) == [(user_id, course.id)]


def test_redelivery_repairs_missing_enrollment(client, bundle, create_payment, user_id, course):
    order_id = create_payment()["order_id"]
    # Status moved but the enrollment step never ran.
    asyncio.run(bundle["payment_repo"].transition_status(order_id, PaymentStatus.SETTLEMENT))
    assert not _enrolled(bundle, user_id, course.id)

    res = client.post(WEBHOOK_URL, json=signed_notification(order_id, "settlement"))

    assert res.status_code == 200
    assert _enrolled(bundle, user_id, course.id)


def test_missing_signature_key_is_unauthorized(client, bundle, create_payment):
    order_id = create_payment()["order_id"]
    notification = signed_notification(order_id, "settlement")
    del notification["signature_key"]

    res = client.post(WEBHOOK_URL, json=notification)

    assert res.status_code == 401
    assert res.json() == {"error": "Authentication required. Please log in."}
    assert _status(bundle, order_id) == PaymentStatus.PENDING


def test_invalid_signature_is_rejected_before_any_change(client, bundle, create_payment, user_id, course):
    order_id = create_payment()["order_id"]
    notification = signed_notification(order_id, "settlement", server_key="wrong-key")

    res = client.post(WEBHOOK_URL, json=notification)

    assert res.status_code == 401
    assert _status(bundle, order_id) == PaymentStatus.PENDING
    assert not _enrolled(bundle, user_id, course.id)


def test_tampered_amount_breaks_signature(client, bundle, create_payment):
    order_id = create_payment()["order_id"]
    notification = signed_notification(order_id, "settlement")
    notification["gross_amount"] = "1.00"

    res = client.post(WEBHOOK_URL, json=notification)

    assert res.status_code == 401
    assert _status(bundle, order_id) == PaymentStatus.PENDING


def test_missing_server_key_is_a_server_error(client, create_payment):
    order_id = create_payment()["order_id"]
    app.dependency_overrides[get_settings] = lambda: make_settings(midtrans_server_key=None)

    res = client.post(WEBHOOK_URL, json=signed_notification(order_id, "settlement"))

    assert res.status_code == 500
    assert res.json() == {"error": "Server configuration error"}


def test_malformed_body_is_bad_request(client):
    res = client.post(
        WEBHOOK_URL,
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json() == {"error": "Invalid request. Please try again."}


def test_unknown_order_is_bad_request(client):
    res = client.post(WEBHOOK_URL, json=signed_notification("ORDER-0-unknown-000000", "settlement"))

    assert res.status_code == 400
    assert res.json() == {
        "error": "The selected course or order does not exist or is not available."
    }


def test_numeric_fields_are_read_as_strings(client, bundle, create_payment):
    order_id = create_payment()["order_id"]
    notification = signed_notification(order_id, "settlement", gross_amount="100000")
    notification["gross_amount"] = 100000
    notification["status_code"] = 200

    res = client.post(WEBHOOK_URL, json=notification)

    assert res.status_code == 200
    assert _status(bundle, order_id) == PaymentStatus.SETTLEMENT
