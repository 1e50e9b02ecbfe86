from typing import Any, Dict, List, Optional

from fastapi import APIRouter, BackgroundTasks, Depends
from fastapi.responses import JSONResponse

from ..core.errors import StorageError
from ..core.logging import logger
from ..schemas import GateCodeBody, VolunteerCreate
from ..services.notifications import EmailService
from ..services.signup import SignupService
from .deps import get_email_service, get_signup_service


router = APIRouter()


@router.get("/volunteers", response_model=None)
async def list_volunteers(service: SignupService = Depends(get_signup_service)) -> List[Dict[str, Any]]:
    """Get every stored signup."""
    try:
        return service.list_volunteers()
    except StorageError as exc:
        logger.error(f"Failed to load volunteers: {exc.message}")
        return JSONResponse({"error": "Failed to load volunteers"}, status_code=500)


@router.post("/volunteers", response_model=None)
async def create_volunteer(
    payload: VolunteerCreate,
    background_tasks: BackgroundTasks,
    service: SignupService = Depends(get_signup_service),
    email_service: EmailService = Depends(get_email_service),
) -> Dict[str, Any]:
    """Sign a volunteer up for a task. Requires the gate code."""
    try:
        signup = service.create_volunteer(
            name=payload.name,
            email=payload.email,
            phone=payload.phone,
            task=payload.task,
            notes=payload.notes,
            gate_code=payload.gate_code,
        )
    except StorageError as exc:
        logger.error(f"Error adding volunteer: {exc.message}")
        return JSONResponse({"error": "Failed to add volunteer"}, status_code=500)

    # Emails go out after the response; their outcome is only logged.
    background_tasks.add_task(
        email_service.notify_signup, signup.event, signup.volunteer, list(signup.volunteers)
    )

    return {"success": True, "volunteer": signup.volunteer}


@router.delete("/volunteers/{volunteer_id}", response_model=None)
async def delete_volunteer(
    volunteer_id: str,
    payload: Optional[GateCodeBody] = None,
    service: SignupService = Depends(get_signup_service),
) -> Dict[str, Any]:
    """Remove a signup. Unknown ids still succeed."""
    gate_code = payload.gate_code if payload else None
    try:
        service.delete_volunteer(volunteer_id, gate_code)
    except StorageError as exc:
        logger.error(f"Error removing volunteer {volunteer_id}: {exc.message}")
        return JSONResponse({"error": "Failed to remove volunteer"}, status_code=500)

    return {"success": True}
