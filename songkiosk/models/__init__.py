"""Data models for payment attempts and song requests."""
from songkiosk.models.payment import (
    GatewaySession,
    PaymentInitiation,
    PaymentStatus,
    SongPayload,
    StatusResult,
    TransactionEntry,
)
from songkiosk.models.song import PublicSongRequest, SongRequest

__all__ = [
    "GatewaySession",
    "PaymentInitiation",
    "PaymentStatus",
    "SongPayload",
    "StatusResult",
    "TransactionEntry",
    "PublicSongRequest",
    "SongRequest",
]
