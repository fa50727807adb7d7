"""Map Datatrans transaction status vocabulary to pending / paid / failed."""
from typing import Optional

from songkiosk.models.payment import PaymentStatus

# Datatrans: authorized with autoSettle=true moves on to settled, then transmitted
PAID_PROVIDER_STATUSES = frozenset({"settled", "authorized", "transmitted"})
FAILED_PROVIDER_STATUSES = frozenset({"failed", "canceled", "expired"})


def map_provider_status(provider_status: Optional[str]) -> PaymentStatus:
    """Anything not clearly paid or failed (initialized, challenge_required, ...) stays pending."""
    normalized = (provider_status or "").strip().lower()
    if normalized in PAID_PROVIDER_STATUSES:
        return PaymentStatus.PAID
    if normalized in FAILED_PROVIDER_STATUSES:
        return PaymentStatus.FAILED
    return PaymentStatus.PENDING


def status_message(status: PaymentStatus, provider_status: Optional[str] = None) -> str:
    """Human-readable line for the kiosk screen."""
    shown = (provider_status or "").strip() or status.value
    if status is PaymentStatus.PAID:
        return "Payment successful!"
    if status is PaymentStatus.FAILED:
        return f"Payment {shown}."
    return f"Payment {shown}. Waiting..."
