"""Read projections over the request store for the DJ and the public queue."""
from typing import List

from songkiosk.core.request_store import RequestStore
from songkiosk.models.song import PublicSongRequest, SongRequest


def list_requests(store: RequestStore) -> List[SongRequest]:
    """All requests, newest first."""
    return sorted(store.all(), key=lambda s: s.submitted_at, reverse=True)


def list_queue(store: RequestStore) -> List[PublicSongRequest]:
    """Unplayed first, oldest first within each group."""
    songs = sorted(store.all(), key=lambda s: (s.played, s.submitted_at))
    return [
        PublicSongRequest(
            id=s.id,
            song_title=s.song_title,
            requester_name=s.requester_name,
            submitted_at=s.submitted_at,
            played=s.played,
        )
        for s in songs
    ]


def mark_played(store: RequestStore, song_id: str) -> SongRequest:
    return store.mark_played(song_id)
