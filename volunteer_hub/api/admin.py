from typing import Any, Dict

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..core.errors import StorageError
from ..core.logging import logger
from ..schemas import EventUpdate, PasswordBody
from ..services.signup import SignupService
from .deps import get_signup_service


router = APIRouter()


@router.post("/verify")
async def verify_organizer(
    payload: PasswordBody,
    service: SignupService = Depends(get_signup_service),
) -> Dict[str, Any]:
    """Check the organizer password."""
    service.verify_organizer(payload.password)
    return {"success": True}


@router.put("/event", response_model=None)
async def update_event(
    payload: EventUpdate,
    service: SignupService = Depends(get_signup_service),
) -> Dict[str, Any]:
    """Replace the active event with the one supplied by the organizer."""
    try:
        service.update_event(payload.password, payload.event)
    except StorageError as exc:
        logger.error(f"Failed to update event: {exc.message}")
        return JSONResponse({"error": "Failed to update event"}, status_code=500)

    return {"success": True}
