"""Recent success / error notices from store calls."""
from dataclasses import asdict

from fastapi import APIRouter, Depends

from frencircle.api.state import AppState, get_state

router = APIRouter()


@router.get("/")
def list_notices(state: AppState = Depends(get_state)):
    return [asdict(n) for n in state.notices()]
