"""Liveness and gateway configuration check."""
from fastapi import APIRouter, Depends

from songkiosk.api.state import AppState, get_state

router = APIRouter()


@router.get("")
def health(state: AppState = Depends(get_state)):
    return {"ok": True, "gateway_configured": state.settings.is_configured}
