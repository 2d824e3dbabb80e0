import asyncio
import logging
from decimal import Decimal
from typing import Any

import httpx

from coursepay.application.interfaces.payment_gateway import (
    ChargeResult,
    CustomerDetails,
    PaymentGateway,
)
from coursepay.domain.errors import GatewayError
from coursepay.infrastructure.circuit_breaker import CircuitBreakerError, midtrans_breaker

logger = logging.getLogger(__name__)

SANDBOX_BASE_URL = "https://api.sandbox.midtrans.com"
PRODUCTION_BASE_URL = "https://api.midtrans.com"
CHARGE_PATH = "/v2/charge"
DEFAULT_PAYMENT_TYPE = "gopay"
QR_ACTION_NAME = "generate-qr-code"


def _is_success(status_code: Any) -> bool:
    try:
        return 200 <= int(status_code) < 300
    except (TypeError, ValueError):
        return False


def payment_url_from(body: dict[str, Any]) -> str | None:
    """URL of the QR action, falling back to `redirect_url`."""
    for action in body.get("actions") or []:
        if isinstance(action, dict) and action.get("name") == QR_ACTION_NAME:
            return action.get("url")
    return body.get("redirect_url")


class MidtransGateway(PaymentGateway):
    def __init__(
        self,
        server_key: str | None,
        is_production: bool = False,
        timeout_seconds: float = 10.0,
        payment_type: str = DEFAULT_PAYMENT_TYPE,
    ) -> None:
        """
        Midtrans Core API client.

        Args:
            server_key: Merchant server key, sent as the Basic auth username.
            is_production: Selects the production host instead of the sandbox.
            timeout_seconds: Request timeout; a timed out charge is reported as
                a gateway failure and the intent stays pending.
            payment_type: Midtrans payment type of the charge.
        """
        self._server_key = server_key
        self._base_url = PRODUCTION_BASE_URL if is_production else SANDBOX_BASE_URL
        self._timeout = timeout_seconds
        self._payment_type = payment_type

    async def charge(
        self,
        order_id: str,
        amount: Decimal,
        customer: CustomerDetails,
    ) -> ChargeResult:
        if not self._server_key:
            raise GatewayError("Midtrans server key not configured")
        if amount != amount.to_integral_value():
            raise GatewayError("Midtrans requires an integral gross_amount")

        payload: dict[str, Any] = {
            "payment_type": self._payment_type,
            "transaction_details": {
                "order_id": order_id,
                "gross_amount": int(amount),
            },
            "customer_details": {
                "first_name": customer.first_name,
                "email": customer.email,
            },
        }

        try:
            # httpx sync client in a worker thread; the breaker tracks its failures.
            response = await asyncio.to_thread(midtrans_breaker.call, self._post_charge, payload)
        except CircuitBreakerError as exc:
            logger.error(
                "Midtrans circuit breaker is open - service unavailable",
                extra={"order_id": order_id, "circuit_state": str(exc)},
            )
            raise GatewayError("Midtrans circuit breaker open") from exc
        except httpx.TimeoutException as exc:
            logger.warning(
                "Midtrans request timeout",
                extra={"order_id": order_id, "timeout": self._timeout},
            )
            raise GatewayError("Midtrans request timed out") from exc
        except httpx.HTTPError as exc:
            logger.error("Midtrans HTTP error", exc_info=exc, extra={"order_id": order_id})
            raise GatewayError(f"Midtrans HTTP error: {exc}") from exc

        try:
            body = response.json()
        except ValueError:
            body = None

        if not _is_success(response.status_code) or not isinstance(body, dict):
            raise GatewayError(
                "Midtrans charge failed",
                http_status=response.status_code,
                provider_payload=body if body is not None else response.text,
            )
        # Midtrans reports rejections with HTTP 200 and a non-2xx status_code.
        if "status_code" in body and not _is_success(body["status_code"]):
            raise GatewayError(
                body.get("status_message") or "Midtrans charge rejected",
                http_status=response.status_code,
                provider_payload=body,
            )

        transaction_id = body.get("transaction_id")
        if not transaction_id:
            raise GatewayError(
                "Midtrans response without transaction_id",
                http_status=response.status_code,
                provider_payload=body,
            )

        return ChargeResult(
            transaction_id=transaction_id,
            payment_type=body.get("payment_type"),
            payment_url=payment_url_from(body),
        )

    def _post_charge(self, payload: dict[str, Any]) -> httpx.Response:
        with httpx.Client(timeout=self._timeout) as client:
            response = client.post(
                f"{self._base_url}{CHARGE_PATH}",
                json=payload,
                auth=(self._server_key, ""),
                headers={"Accept": "application/json"},
            )
        # 5xx responses count as breaker failures.
        if response.status_code >= 500:
            raise GatewayError(
                "Midtrans server error",
                http_status=response.status_code,
                provider_payload=response.text,
            )
        return response
