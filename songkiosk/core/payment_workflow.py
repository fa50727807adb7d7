"""Pay-then-submit workflow: initiate payment, poll status, submit the song once."""
import logging
import uuid
from datetime import datetime, timezone
from typing import Optional

from songkiosk.config import GatewaySettings
from songkiosk.core.errors import ConfigurationError, GatewayError, ValidationError
from songkiosk.core.ledger import TransactionLedger
from songkiosk.core.payment_status import map_provider_status, status_message
from songkiosk.core.request_store import RequestStore
from songkiosk.models.payment import (
    PaymentInitiation,
    PaymentStatus,
    SongPayload,
    StatusResult,
    TransactionEntry,
)
from songkiosk.models.song import SongRequest

logger = logging.getLogger(__name__)

RETRY_MESSAGE = "Could not reach the payment provider. Retrying..."


class PaymentWorkflow:
    """Ties an anonymous payment session to exactly one song submission.

    gateway needs create_session(amount, currency, correlation_id, method_hint)
    and get_session_status(session_id) (see DatatransGateway). No ledger lock
    is held while the gateway is called.
    """

    def __init__(
        self,
        ledger: TransactionLedger,
        store: RequestStore,
        gateway,
        settings: GatewaySettings,
    ) -> None:
        self._ledger = ledger
        self._store = store
        self._gateway = gateway
        self._settings = settings

    def initiate(self, requester_name: Optional[str], song_title: Optional[str]) -> PaymentInitiation:
        """Create a gateway session and a pending ledger entry for this song."""
        title = (song_title or "").strip()
        if not title:
            raise ValidationError("Song title is required.")
        if not self._settings.is_configured:
            raise ConfigurationError("Payment gateway not configured.")
        payload = SongPayload(song_title=title, requester_name=(requester_name or "").strip() or None)

        reference = str(uuid.uuid4())
        session = self._gateway.create_session(
            amount=self._settings.amount,
            currency=self._settings.currency,
            correlation_id=reference,
            method_hint=self._settings.payment_method,
        )
        self._ledger.insert(
            TransactionEntry(
                reference=reference,
                gateway_session_id=session.session_id,
                payload=payload,
                created_at=datetime.now(timezone.utc),
            )
        )
        logger.info("Payment %s initiated for %r (session %s)", reference, title, session.session_id)
        return PaymentInitiation(
            reference=reference,
            gateway_session_id=session.session_id,
            qr_payload=session.scannable_payload,
        )

    def check_status(self, reference: str) -> StatusResult:
        """Cached if terminal, otherwise asks the gateway. GatewayError leaves the entry pending."""
        entry = self._ledger.get(reference)
        if entry.status.is_terminal:
            return StatusResult(entry.status, status_message(entry.status, entry.provider_status))

        provider_status = self._gateway.get_session_status(entry.gateway_session_id)
        stored = self._ledger.resolve(reference, map_provider_status(provider_status), provider_status)
        return StatusResult(stored.status, status_message(stored.status, stored.provider_status))

    def poll_status(self, reference: str) -> StatusResult:
        """check_status for poll loops: a gateway failure reads as retryable pending."""
        try:
            return self.check_status(reference)
        except GatewayError as e:
            logger.warning("Status check for %s failed, still pending: %s", reference, e)
            return StatusResult(PaymentStatus.PENDING, RETRY_MESSAGE, retryable=True)

    def submit(self, reference: str) -> SongRequest:
        """Turn a paid entry into a queued song. Only the first call per reference succeeds."""
        entry = self._ledger.consume(reference)
        song = SongRequest(
            id=str(uuid.uuid4()),
            song_title=entry.payload.song_title,
            requester_name=entry.payload.requester_name,
            submitted_at=entry.created_at,
            origin_reference=entry.reference,
            gateway_session_id=entry.gateway_session_id,
        )
        return self._store.add(song)
