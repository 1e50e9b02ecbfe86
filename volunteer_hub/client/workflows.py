from typing import Any, Callable, Dict, Optional

import requests

from ..core.logging import logger

IDLE = "IDLE"
AWAITING_GATE_CODE = "AWAITING_GATE_CODE"
AWAITING_DELETE_GATE_CODE = "AWAITING_DELETE_GATE_CODE"

REQUIRED_FIELDS = ("name", "email", "task")
MISSING_FIELDS_MESSAGE = "Please fill in all required fields."
INVALID_GATE_CODE_MESSAGE = "Invalid gate code. Please try again."
DELETE_FAILED_MESSAGE = "Error removing volunteer. Please try again."

Callback = Callable[[], Any]


def _field(value: Any) -> str:
    return value if isinstance(value, str) else ""


class SignupWorkflow:
    """Signup form -> gate code prompt -> submitted.

    The draft lives on the workflow instance between the form and the gate
    code prompt and is dropped on success or when the prompt is closed.
    """

    def __init__(self, client, on_success: Optional[Callback] = None):
        self.client = client
        self.on_success = on_success
        self.state = IDLE
        self.draft: Optional[Dict[str, str]] = None
        self.error: Optional[str] = None
        self.gate_code_error = False
        self.gate_code_input = ""
        self.last_volunteer: Optional[Dict[str, Any]] = None

    def submit_form(self, form: Dict[str, Any]) -> str:
        draft = {
            "name": _field(form.get("name")),
            "email": _field(form.get("email")),
            "phone": _field(form.get("phone")),
            "task": _field(form.get("task")),
            "notes": _field(form.get("notes")),
        }

        if not all(draft[f] for f in REQUIRED_FIELDS):
            self.error = MISSING_FIELDS_MESSAGE
            self.draft = None
            self.state = IDLE
            logger.info("[signup-form] STATE=IDLE ACCEPTED=False")
            return self.state

        self.draft = draft
        self.error = None
        self.gate_code_error = False
        self.gate_code_input = ""
        self.state = AWAITING_GATE_CODE
        logger.info(f"[signup-form] STATE={self.state} task='{draft['task']}'")
        return self.state

    def submit_gate_code(self, gate_code: str) -> str:
        if self.state != AWAITING_GATE_CODE or not self.draft:
            return self.state

        self.gate_code_input = gate_code
        try:
            result = self.client.create_volunteer(self.draft, gate_code)
        except (requests.RequestException, ValueError) as exc:
            logger.error(f"Signup failed: {exc}")
            self.gate_code_error = True
            self.gate_code_input = ""
            return self.state

        if isinstance(result, dict) and result.get("success"):
            self.last_volunteer = result.get("volunteer")
            self._reset()
            if self.on_success:
                self.on_success()
            return self.state

        # Wrong code: keep the draft so the user can retry
        self.gate_code_error = True
        self.gate_code_input = ""
        return self.state

    def close(self) -> str:
        self._reset()
        return self.state

    def _reset(self) -> None:
        self.state = IDLE
        self.draft = None
        self.error = None
        self.gate_code_error = False
        self.gate_code_input = ""


class DeleteWorkflow:
    """Remove button -> gate code prompt -> removed."""

    def __init__(self, client, on_success: Optional[Callback] = None):
        self.client = client
        self.on_success = on_success
        self.state = IDLE
        self.pending_id: Optional[str] = None
        self.pending_name: Optional[str] = None
        self.pending_task: Optional[str] = None
        self.alert: Optional[str] = None

    def open(self, volunteer: Dict[str, Any]) -> str:
        self.pending_id = volunteer.get("id")
        self.pending_name = volunteer.get("name")
        self.pending_task = volunteer.get("task")
        self.alert = None
        self.state = AWAITING_DELETE_GATE_CODE
        return self.state

    def confirm(self, gate_code: str) -> str:
        if self.state != AWAITING_DELETE_GATE_CODE or not self.pending_id:
            return self.state

        try:
            result = self.client.delete_volunteer(self.pending_id, gate_code)
        except (requests.RequestException, ValueError) as exc:
            logger.error(f"Delete failed: {exc}")
            self.alert = DELETE_FAILED_MESSAGE
            return self.state

        if isinstance(result, dict) and result.get("success"):
            self.close()
            if self.on_success:
                self.on_success()
            return self.state

        self.alert = INVALID_GATE_CODE_MESSAGE
        return self.state

    def close(self) -> str:
        self.state = IDLE
        self.pending_id = None
        self.pending_name = None
        self.pending_task = None
        self.alert = None
        return self.state
