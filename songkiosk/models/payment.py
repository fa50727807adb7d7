"""Payment attempt state: status, captured song payload, ledger entry."""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


class PaymentStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self is not PaymentStatus.PENDING


@dataclass(frozen=True)
class SongPayload:
    """Song submission captured at initiation, before payment is confirmed."""
    song_title: str
    requester_name: Optional[str] = None


@dataclass
class TransactionEntry:
    """Ledger row for one payment attempt, keyed by our own reference.

    Only the ledger mutates status, provider_status and consumed.
    """
    reference: str
    gateway_session_id: str
    payload: SongPayload
    created_at: datetime
    status: PaymentStatus = PaymentStatus.PENDING
    provider_status: Optional[str] = None
    consumed: bool = False


@dataclass(frozen=True)
class GatewaySession:
    """What the gateway hands back when a payment session is created."""
    session_id: str
    scannable_payload: str


@dataclass(frozen=True)
class PaymentInitiation:
    reference: str
    gateway_session_id: str
    qr_payload: str


@dataclass(frozen=True)
class StatusResult:
    status: PaymentStatus
    message: str
    retryable: bool = field(default=False)
