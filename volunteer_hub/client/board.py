import threading
from datetime import datetime
from typing import Any, Dict, List, Optional

import requests

from ..core.config import settings
from ..core.logging import logger
from .api_client import SignupAPIClient
from .roster import TaskProgress, build_roster
from .workflows import DeleteWorkflow, SignupWorkflow


def format_event_date(value: Optional[str]) -> str:
    """'2024-04-15' -> 'Monday, April 15, 2024'. Unparseable dates pass through."""
    if not value:
        return ""
    try:
        day = datetime.strptime(value[:10], "%Y-%m-%d")
    except ValueError:
        return value
    return f"{day:%A}, {day:%B} {day.day}, {day.year}"


class VolunteerBoard:
    """Current event and roster as shown to volunteers.

    Owns one signup and one delete workflow; both reload the roster when
    they succeed. The periodic refresh runs on its own thread and does not
    wait for open workflows.
    """

    def __init__(self, client: Optional[SignupAPIClient] = None, refresh_interval: Optional[float] = None):
        self.client = client or SignupAPIClient(settings.api_base_url)
        self.refresh_interval = refresh_interval if refresh_interval is not None else settings.refresh_interval
        self.event: Optional[Dict[str, Any]] = None
        self.volunteers: List[Dict[str, Any]] = []
        self.signup = SignupWorkflow(self.client, on_success=self.load_volunteers)
        self.delete = DeleteWorkflow(self.client, on_success=self.load_volunteers)
        self._stop = threading.Event()
        self._refresh_thread: Optional[threading.Thread] = None

    def load(self) -> None:
        self.load_event()
        self.load_volunteers()

    def load_event(self) -> bool:
        try:
            self.event = self.client.get_event()
        except (requests.RequestException, ValueError) as exc:
            logger.error(f"Error loading event data: {exc}")
            return False
        return True

    def load_volunteers(self) -> bool:
        try:
            self.volunteers = self.client.list_volunteers()
        except (requests.RequestException, ValueError) as exc:
            logger.error(f"Error loading volunteers: {exc}")
            return False
        return True

    def roster(self) -> List[TaskProgress]:
        return build_roster(self.event, self.volunteers)

    def task_options(self) -> List[str]:
        """Labels for the task picker of the signup form."""
        if not self.event:
            return []
        return [f"{t.get('name')} ({t.get('time')})" for t in self.event.get("tasks") or []]

    def render_text(self) -> str:
        """Plain-text roster for printing."""
        if not self.event:
            return "No event scheduled."

        lines = [
            self.event.get("name", ""),
            f"{format_event_date(self.event.get('date'))} | {self.event.get('time', '')}",
            "",
        ]
        for progress in self.roster():
            lines.append(f"{progress.name} [{progress.label}] {progress.task.get('time', '')}")
            if not progress.volunteers:
                lines.append("  No volunteers yet - be the first!")
            for v in progress.volunteers:
                lines.append(f"  - {v.get('name')} <{v.get('email')}>")
            lines.append("")
        return "\n".join(lines).rstrip() + "\n"

    def start_auto_refresh(self) -> None:
        if self._refresh_thread and self._refresh_thread.is_alive():
            return
        self._stop.clear()
        self._refresh_thread = threading.Thread(
            target=self._refresh_loop, name="volunteer-refresh", daemon=True
        )
        self._refresh_thread.start()

    def stop_auto_refresh(self) -> None:
        self._stop.set()
        if self._refresh_thread:
            self._refresh_thread.join(timeout=5)
            self._refresh_thread = None

    def _refresh_loop(self) -> None:
        while not self._stop.wait(self.refresh_interval):
            if not self.load_volunteers():
                logger.warning("Auto-refresh failed, retrying on next tick")
