"""In-memory ledger of payment attempts keyed by internal reference."""
import logging
import threading
from dataclasses import replace
from typing import Dict, Optional

from songkiosk.core.errors import NotFoundError, PaymentNotConfirmedError
from songkiosk.models.payment import PaymentStatus, TransactionEntry

logger = logging.getLogger(__name__)


class TransactionLedger:
    """Owns every TransactionEntry; all reads return copies.

    A single lock serializes access. Status only moves pending -> paid/failed
    (compare-and-set in resolve) and an entry is consumed at most once.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, TransactionEntry] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def insert(self, entry: TransactionEntry) -> None:
        """Add a new entry. References are never reused."""
        with self._lock:
            if entry.reference in self._entries:
                raise ValueError(f"Duplicate payment reference {entry.reference}")
            self._entries[entry.reference] = replace(entry)

    def get(self, reference: str) -> TransactionEntry:
        with self._lock:
            return replace(self._require(reference))

    def resolve(
        self,
        reference: str,
        status: PaymentStatus,
        provider_status: Optional[str] = None,
    ) -> TransactionEntry:
        """Record a status seen at the provider; returns the entry as stored afterwards.

        Only a pending entry changes. If another caller already wrote a
        terminal status, that one is kept.
        """
        with self._lock:
            entry = self._require(reference)
            if entry.status is PaymentStatus.PENDING:
                entry.provider_status = provider_status
                if status.is_terminal:
                    entry.status = status
                    logger.info("Payment %s resolved: %s (%s)", reference, status.value, provider_status)
            return replace(entry)

    def consume(self, reference: str) -> TransactionEntry:
        """Atomically check paid + unconsumed and mark consumed."""
        with self._lock:
            entry = self._require(reference)
            if entry.status is not PaymentStatus.PAID:
                raise PaymentNotConfirmedError("Payment not confirmed for this request.")
            if entry.consumed:
                raise PaymentNotConfirmedError("A song was already submitted for this payment.")
            entry.consumed = True
            return replace(entry)

    def _require(self, reference: str) -> TransactionEntry:
        entry = self._entries.get(reference)
        if entry is None:
            raise NotFoundError("Invalid payment reference.")
        return entry
