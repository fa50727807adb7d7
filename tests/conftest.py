import threading
from typing import Dict, List, Union

import pytest
from fastapi.testclient import TestClient

from songkiosk.api.app import app as fastapi_app
from songkiosk.api.state import AppState, get_state
from songkiosk.config import GatewaySettings
from songkiosk.core.errors import GatewayError
from songkiosk.core.ledger import TransactionLedger
from songkiosk.core.payment_workflow import PaymentWorkflow
from songkiosk.core.request_store import RequestStore
from songkiosk.models.payment import GatewaySession

ADMIN_KEY = "dj-key"
QR_PNG_BASE64 = "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="


class FakeGateway:
    """Scripted stand-in for DatatransGateway.

    Set statuses[session_id] to a provider status string or to an exception
    instance to raise it on the next status lookup.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._counter = 0
        self.create_calls: List[dict] = []
        self.status_calls: List[str] = []
        self.statuses: Dict[str, Union[str, Exception]] = {}
        self.create_error: Union[Exception, None] = None

    def create_session(self, amount, currency, correlation_id, method_hint):
        with self._lock:
            self.create_calls.append(
                {"amount": amount, "currency": currency, "correlation_id": correlation_id, "method_hint": method_hint}
            )
            if self.create_error is not None:
                raise self.create_error
            self._counter += 1
            session_id = f"dt-{self._counter}"
            self.statuses.setdefault(session_id, "initialized")
        return GatewaySession(session_id=session_id, scannable_payload=QR_PNG_BASE64)

    def get_session_status(self, session_id):
        with self._lock:
            self.status_calls.append(session_id)
            status = self.statuses.get(session_id)
        if isinstance(status, Exception):
            raise status
        if status is None:
            raise GatewayError("Payment provider error (404).")
        return status


@pytest.fixture
def settings() -> GatewaySettings:
    return GatewaySettings(
        api_url="https://api.sandbox.datatrans.com",
        merchant_id="1100000000",
        api_key="test-api-key",
    )


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def ledger() -> TransactionLedger:
    return TransactionLedger()


@pytest.fixture
def store() -> RequestStore:
    return RequestStore()


@pytest.fixture
def workflow(ledger, store, gateway, settings) -> PaymentWorkflow:
    return PaymentWorkflow(ledger, store, gateway, settings)


@pytest.fixture
def state(settings, gateway) -> AppState:
    return AppState(settings=settings, gateway=gateway, admin_secret_key=ADMIN_KEY)


@pytest.fixture
def client(state):
    fastapi_app.dependency_overrides[get_state] = lambda: state
    try:
        yield TestClient(fastapi_app)
    finally:
        fastapi_app.dependency_overrides.pop(get_state, None)
