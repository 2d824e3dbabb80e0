import uuid
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from jose import jwt

from coursepay.config import Settings
from coursepay.domain.signature import compute_signature

TEST_JWT_SECRET = "test-jwt-secret"
TEST_SERVER_KEY = "SB-Mid-server-TEST"
COURSE_PRICE = Decimal("100000")
VERIFY_BASE_URL = "https://academy.example.com/certificates/verify"


def make_settings(**overrides) -> Settings:
    values = {
        "use_in_memory": True,
        "jwt_secret": TEST_JWT_SECRET,
        "midtrans_server_key": TEST_SERVER_KEY,
        "certificate_verify_base_url": VERIFY_BASE_URL,
    }
    values.update(overrides)
    return Settings(**values)


def make_token(
    user_id: str,
    email: str | None = "student@example.com",
    secret: str = TEST_JWT_SECRET,
    expires_in: timedelta = timedelta(hours=1),
) -> str:
    claims = {
        "sub": user_id,
        "email": email,
        "exp": datetime.now(timezone.utc) + expires_in,
    }
    return jwt.encode(claims, secret, algorithm="HS256")


def signed_notification(
    order_id: str,
    transaction_status: str,
    fraud_status: str | None = None,
    gross_amount: str = "100000.00",
    status_code: str = "200",
    server_key: str = TEST_SERVER_KEY,
) -> dict:
    payload = {
        "order_id": order_id,
        "status_code": status_code,
        "gross_amount": gross_amount,
        "transaction_status": transaction_status,
        "transaction_id": str(uuid.uuid4()),
        "payment_type": "gopay",
        "signature_key": compute_signature(order_id, status_code, gross_amount, server_key),
    }
    if fraud_status is not None:
        payload["fraud_status"] = fraud_status
    return payload
