"""
Default event seeded on first startup.

Existing documents are never overwritten, so this is safe to run against a
data directory that already holds signups.
"""

from typing import Any, Dict, Optional

from ..core.logging import logger
from .store import EVENTS, VOLUNTEERS, DocumentStore

DEFAULT_ORGANIZER_EMAIL = "glenn@hvscma.com"


def default_event(organizer_email: Optional[str] = None) -> Dict[str, Any]:
    return {
        "id": "spring-cleanup-2024",
        "name": "Spring Cleanup & Maintenance",
        "date": "2024-04-15",
        "time": "9:00 AM - 4:00 PM",
        "description": (
            "Join us for our spring work day! Help maintain our beautiful club facilities "
            "with landscaping, cleaning, and general maintenance tasks."
        ),
        "tasks": [
            {"id": "landscaping", "name": "Landscaping & Grounds", "needed": 6, "time": "9:00 AM - 12:00 PM"},
            {"id": "painting", "name": "Painting & Touch-ups", "needed": 4, "time": "9:00 AM - 3:00 PM"},
            {"id": "cleaning", "name": "Deep Cleaning", "needed": 5, "time": "10:00 AM - 2:00 PM"},
            {"id": "maintenance", "name": "General Maintenance", "needed": 3, "time": "9:00 AM - 4:00 PM"},
            {"id": "setup", "name": "Event Setup/Breakdown", "needed": 4, "time": "8:00 AM - 5:00 PM"},
        ],
        "organizer": {
            "name": "Glenn Fitzgerald",
            "email": organizer_email or DEFAULT_ORGANIZER_EMAIL,
            "phone": "845-222-1400",
        },
    }


def ensure_documents(store: DocumentStore, organizer_email: Optional[str] = None) -> None:
    """Create the event and volunteer documents if they are missing."""
    store.initialize()

    if not store.exists(EVENTS):
        store.put(EVENTS, [default_event(organizer_email)])
        logger.info("Seeded events document with the default event")

    if not store.exists(VOLUNTEERS):
        store.put(VOLUNTEERS, [])
        logger.info("Seeded empty volunteers document")
