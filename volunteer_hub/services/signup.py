import time
from datetime import datetime, timezone
from typing import Any, Dict, List, NamedTuple, Optional

from ..core.errors import StorageError
from ..core.logging import logger
from ..core.security import Authorizer
from ..db.store import EVENTS, VOLUNTEERS, DocumentStore


class Signup(NamedTuple):
    volunteer: Dict[str, Any]
    event: Dict[str, Any]
    volunteers: List[Dict[str, Any]]


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class SignupService:
    def __init__(self, store: DocumentStore, authorizer: Authorizer):
        self.store = store
        self.authorizer = authorizer
        self._last_id = 0

    def get_event(self) -> Optional[Dict[str, Any]]:
        """Return the active event, or None when nothing is persisted."""
        events = self._load_list(EVENTS)
        if not events:
            return None
        return events[0]

    def list_volunteers(self) -> List[Dict[str, Any]]:
        return self._load_list(VOLUNTEERS)

    def create_volunteer(
        self,
        *,
        name: Any,
        email: Any,
        task: Any,
        gate_code: Any,
        phone: Any = None,
        notes: Any = None,
    ) -> Signup:
        """Append a signup and return it with the event and the updated roster.

        Name, email and task are stored as given; an incomplete request
        coming straight to the API is accepted.
        """
        self.authorizer.check_gate_code(gate_code)

        volunteers = self._load_list(VOLUNTEERS)
        event = self.get_event()
        if not isinstance(event, dict):
            raise StorageError("No active event to sign up for")

        volunteer = {
            "id": self._next_id(volunteers),
            "name": name,
            "email": email,
            "phone": phone or "",
            "task": task,
            "notes": notes or "",
            "signupDate": utc_timestamp(),
            "eventId": event.get("id"),
        }

        volunteers.append(volunteer)
        self.store.put(VOLUNTEERS, volunteers)

        logger.info(f"[signup] volunteer={volunteer['id']} task='{task}' event={volunteer['eventId']}")
        return Signup(volunteer, event, volunteers)

    def delete_volunteer(self, volunteer_id: str, gate_code: Any) -> int:
        """Remove every record with ``volunteer_id``; returns how many went."""
        self.authorizer.check_gate_code(gate_code)

        volunteers = self._load_list(VOLUNTEERS)
        remaining = [v for v in volunteers if not (isinstance(v, dict) and v.get("id") == volunteer_id)]
        self.store.put(VOLUNTEERS, remaining)

        removed = len(volunteers) - len(remaining)
        logger.info(f"[signup] delete volunteer={volunteer_id} removed={removed}")
        return removed

    def verify_organizer(self, password: Any) -> None:
        self.authorizer.check_organizer_password(password)

    def update_event(self, password: Any, event: Any) -> None:
        """Replace the whole event document. No merge with the previous one."""
        self.authorizer.check_organizer_password(password)
        self.store.put(EVENTS, [event])

        event_id = event.get("id") if isinstance(event, dict) else None
        logger.info(f"[admin] event replaced id={event_id}")

    def _load_list(self, name: str) -> List[Any]:
        document = self.store.get(name)
        if not isinstance(document, list):
            raise StorageError(f"Document {name} is not a list")
        return document

    def _next_id(self, volunteers: List[Dict[str, Any]]) -> str:
        # Millisecond clock, bumped past anything already handed out or stored.
        taken = {str(v.get("id")) for v in volunteers if isinstance(v, dict)}
        candidate = max(int(time.time() * 1000), self._last_id + 1)
        while str(candidate) in taken:
            candidate += 1
        self._last_id = candidate
        return str(candidate)
