"""In-memory store of submitted song requests."""
import logging
import threading
from dataclasses import replace
from typing import List

from songkiosk.core.errors import NotFoundError
from songkiosk.models.song import SongRequest

logger = logging.getLogger(__name__)


class RequestStore:
    """Song requests in submission order. Never deletes during process lifetime."""

    def __init__(self) -> None:
        self._songs: List[SongRequest] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._songs)

    def add(self, song: SongRequest) -> SongRequest:
        with self._lock:
            self._songs.append(replace(song))
        logger.info("Song request saved: %r by %r (id %s)", song.song_title, song.requester_name, song.id)
        return song

    def all(self) -> List[SongRequest]:
        """Snapshot of all requests, in submission order."""
        with self._lock:
            return [replace(s) for s in self._songs]

    def mark_played(self, song_id: str) -> SongRequest:
        """Set played; no-op if it already is. Raises NotFoundError for unknown ids."""
        with self._lock:
            song = self._require(song_id)
            if not song.played:
                song.played = True
                logger.info("Song marked as played: %s (ID: %s)", song.song_title, song_id)
            return replace(song)

    def _require(self, song_id: str) -> SongRequest:
        for s in self._songs:
            if s.id == song_id:
                return s
        raise NotFoundError("Song not found")
