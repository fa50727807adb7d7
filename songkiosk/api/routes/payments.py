"""Payment initiation, status polling and song submission."""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from songkiosk.api.routes.songs import song_to_dict
from songkiosk.api.state import AppState, get_state

router = APIRouter()


class InitiatePaymentBody(BaseModel):
    name: Optional[str] = None
    songTitle: Optional[str] = None


class SubmitSongBody(BaseModel):
    internalRefno: Optional[str] = None


@router.post("/initiate-payment")
def initiate_payment(body: InitiatePaymentBody, state: AppState = Depends(get_state)):
    """Start a TWINT payment; the kiosk shows qrCodeData (base64 PNG) and then polls."""
    init = state.workflow.initiate(body.name, body.songTitle)
    return {
        "internalRefno": init.reference,
        "datatransTransactionId": init.gateway_session_id,
        "qrCodeData": init.qr_payload,
    }


@router.get("/check-payment-status")
def check_payment_status(internalRefno: Optional[str] = None, state: AppState = Depends(get_state)):
    """Current status; provider hiccups come back as retryable pending."""
    if not internalRefno:
        raise HTTPException(status_code=400, detail="Invalid reference.")
    result = state.workflow.poll_status(internalRefno)
    return {"status": result.status.value, "message": result.message, "retryable": result.retryable}


@router.post("/submit-song", status_code=201)
def submit_song(body: SubmitSongBody, state: AppState = Depends(get_state)):
    """Queue the song paid for by internalRefno. Works once per payment."""
    if not body.internalRefno:
        raise HTTPException(status_code=400, detail="Invalid reference for submission.")
    song = state.workflow.submit(body.internalRefno)
    return {"message": "Song request submitted successfully!", "request": song_to_dict(song)}
