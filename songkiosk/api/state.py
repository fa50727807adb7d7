"""Shared application state (injected into routes)."""
from typing import Optional

from songkiosk.config import ADMIN_SECRET_KEY, GatewaySettings, gateway_settings_from_env
from songkiosk.core.datatrans_client import DatatransGateway
from songkiosk.core.ledger import TransactionLedger
from songkiosk.core.payment_workflow import PaymentWorkflow
from songkiosk.core.request_store import RequestStore


class AppState:
    """Owns the in-memory ledger and request store for the process lifetime."""

    def __init__(
        self,
        settings: Optional[GatewaySettings] = None,
        gateway=None,
        admin_secret_key: str = ADMIN_SECRET_KEY,
    ) -> None:
        self.settings = settings or gateway_settings_from_env()
        self.admin_secret_key = admin_secret_key
        self.ledger = TransactionLedger()
        self.store = RequestStore()
        self.gateway = gateway if gateway is not None else DatatransGateway(self.settings)
        self.workflow = PaymentWorkflow(self.ledger, self.store, self.gateway, self.settings)

    def close(self) -> None:
        close = getattr(self.gateway, "close", None)
        if close is not None:
            close()


_state: Optional[AppState] = None


def get_state() -> AppState:
    global _state
    if _state is None:
        _state = AppState()
    return _state
