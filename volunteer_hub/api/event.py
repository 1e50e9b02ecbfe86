from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..core.errors import StorageError
from ..core.logging import logger
from ..services.signup import SignupService
from .deps import get_signup_service


router = APIRouter()


@router.get("/event", response_model=None)
async def get_event(service: SignupService = Depends(get_signup_service)) -> Optional[Dict[str, Any]]:
    """Get the active event, or null when none is stored."""
    try:
        return service.get_event()
    except StorageError as exc:
        logger.error(f"Failed to load event: {exc.message}")
        return JSONResponse({"error": "Failed to load event"}, status_code=500)
