from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

EMPTY = "empty"
PARTIAL = "partial"
COMPLETE = "complete"


def classify_fill(count: int, needed: int) -> str:
    """Display hint only; the server accepts signups past ``needed``."""
    if count >= needed:
        return COMPLETE
    if count > 0:
        return PARTIAL
    return EMPTY


@dataclass
class TaskProgress:
    task: Dict[str, Any]
    volunteers: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.task.get("name", "")

    @property
    def needed(self) -> int:
        return int(self.task.get("needed") or 0)

    @property
    def count(self) -> int:
        return len(self.volunteers)

    @property
    def label(self) -> str:
        return f"{self.count}/{self.needed}"

    @property
    def status(self) -> str:
        return classify_fill(self.count, self.needed)


def build_roster(event: Optional[Dict[str, Any]], volunteers: List[Dict[str, Any]]) -> List[TaskProgress]:
    """One entry per task of ``event``, in event order.

    Volunteers are matched on the exact task name; a signup naming no
    existing task shows up nowhere.
    """
    if not event:
        return []
    return [
        TaskProgress(task, [v for v in volunteers if v.get("task") == task.get("name")])
        for task in event.get("tasks") or []
    ]
