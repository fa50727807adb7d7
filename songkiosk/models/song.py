"""Submitted song requests and their public projection."""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class SongRequest:
    """A paid, submitted request; only played ever changes (false -> true)."""
    id: str
    song_title: str
    requester_name: Optional[str]
    submitted_at: datetime
    origin_reference: str
    gateway_session_id: str
    played: bool = False


@dataclass(frozen=True)
class PublicSongRequest:
    """Queue view: no payment identifiers."""
    id: str
    song_title: str
    requester_name: Optional[str]
    submitted_at: datetime
    played: bool
