"""Datatrans REST client via requests; creates TWINT sessions and reads their status."""
import logging
from typing import Any, Optional

import requests

from songkiosk.config import GatewaySettings
from songkiosk.core.errors import GatewayError
from songkiosk.models.payment import GatewaySession

logger = logging.getLogger(__name__)


def _error_body(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


class DatatransGateway:
    """Payment gateway backed by the Datatrans transactions API.

    Every failure (network, timeout, non-2xx, unexpected body) surfaces as
    GatewayError so callers never see requests exceptions.
    """

    def __init__(self, settings: GatewaySettings, session: Optional[requests.Session] = None) -> None:
        self._settings = settings
        self._session = session or requests.Session()
        self._session.auth = (settings.merchant_id, settings.api_key)
        self._session.headers.update({"Content-Type": "application/json"})

    def create_session(
        self,
        amount: int,
        currency: str,
        correlation_id: str,
        method_hint: str,
    ) -> GatewaySession:
        """Start a payment; correlation_id goes out as Datatrans refno."""
        data = self._request(
            "POST",
            "/v1/transactions",
            json={
                "currency": currency,
                "amount": amount,
                "refno": correlation_id,
                "paymentMethods": [method_hint],
                "autoSettle": True,
            },
        )
        transaction_id = data.get("transactionId")
        detail = data.get("detail")
        twint = detail.get("twint") if isinstance(detail, dict) else None
        qr_code = twint.get("qrCode") if isinstance(twint, dict) else None
        if not transaction_id or not isinstance(qr_code, str) or not qr_code:
            logger.warning("Datatrans init for %s returned no transaction id or QR data: %s", correlation_id, data)
            raise GatewayError("Failed to initiate TWINT payment. QR data missing.")
        return GatewaySession(session_id=str(transaction_id), scannable_payload=qr_code)

    def get_session_status(self, session_id: str) -> str:
        """Raw provider status, e.g. 'initialized', 'authorized', 'settled', 'canceled'."""
        data = self._request("GET", f"/v1/transactions/{session_id}")
        status = data.get("status")
        if not isinstance(status, str) or not status:
            raise GatewayError("Payment provider returned no status.")
        return status

    def close(self) -> None:
        self._session.close()

    def _request(self, method: str, path: str, **kwargs: Any) -> dict:
        url = f"{self._settings.api_url.rstrip('/')}{path}"
        try:
            response = self._session.request(method, url, timeout=self._settings.timeout_sec, **kwargs)
        except requests.RequestException as e:
            logger.warning("Datatrans %s %s failed: %s", method, path, e)
            raise GatewayError("Payment provider unreachable.") from e
        if not response.ok:
            logger.warning(
                "Datatrans %s %s answered %s: %s", method, path, response.status_code, _error_body(response)
            )
            raise GatewayError(f"Payment provider error ({response.status_code}).")
        try:
            data = response.json()
        except ValueError as e:
            raise GatewayError("Payment provider returned invalid JSON.") from e
        if not isinstance(data, dict):
            raise GatewayError("Payment provider returned an unexpected response.")
        return data
