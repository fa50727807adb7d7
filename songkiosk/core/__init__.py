"""Core services: payment ledger, request store, Datatrans gateway, workflow."""
from songkiosk.core.datatrans_client import DatatransGateway
from songkiosk.core.ledger import TransactionLedger
from songkiosk.core.payment_workflow import PaymentWorkflow
from songkiosk.core.request_store import RequestStore

__all__ = ["DatatransGateway", "PaymentWorkflow", "RequestStore", "TransactionLedger"]
