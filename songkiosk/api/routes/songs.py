"""Song list for the DJ, public queue, and mark-played."""
import secrets
from typing import Optional

from fastapi import APIRouter, Depends, Header, HTTPException

from songkiosk.api.state import AppState, get_state
from songkiosk.core.queue_views import list_queue, list_requests, mark_played
from songkiosk.models.song import PublicSongRequest, SongRequest

router = APIRouter()


def song_to_dict(s: SongRequest) -> dict:
    return {
        "id": s.id,
        "name": s.requester_name,
        "songTitle": s.song_title,
        "timestamp": s.submitted_at.isoformat(),
        "played": s.played,
        "transactionId": s.gateway_session_id,
    }


def _public_to_dict(s: PublicSongRequest) -> dict:
    return {
        "id": s.id,
        "name": s.requester_name,
        "songTitle": s.song_title,
        "timestamp": s.submitted_at.isoformat(),
        "played": s.played,
    }


def require_admin_key(
    key: Optional[str] = None,
    x_admin_key: Optional[str] = Header(None),
    state: AppState = Depends(get_state),
) -> None:
    """DJ endpoints: admin key as ?key= or X-Admin-Key. No key configured means no access."""
    provided = key or x_admin_key or ""
    expected = state.admin_secret_key or ""
    if not expected or not secrets.compare_digest(provided.encode(), expected.encode()):
        raise HTTPException(status_code=403, detail="Forbidden: Invalid secret key.")


@router.get("", dependencies=[Depends(require_admin_key)])
def get_songs(state: AppState = Depends(get_state)):
    """All requests, newest first."""
    return [song_to_dict(s) for s in list_requests(state.store)]


@router.get("/queue")
def get_queue(state: AppState = Depends(get_state)):
    """Public queue: unplayed first, oldest first."""
    return [_public_to_dict(s) for s in list_queue(state.store)]


@router.put("/mark-played/{song_id}", dependencies=[Depends(require_admin_key)])
def put_mark_played(song_id: str, state: AppState = Depends(get_state)):
    song = mark_played(state.store, song_id)
    return {"message": "Song marked as played", "song": song_to_dict(song)}
