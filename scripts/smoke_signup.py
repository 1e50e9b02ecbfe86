"""
Smoke test against a running server: sign up, check the roster, remove.

Usage:
    BASE_URL=http://localhost:3000 GATE_CODE=1957 python scripts/smoke_signup.py

Talks to the API through the display client, so the server must be up.
"""

import os

from volunteer_hub.client.api_client import SignupAPIClient
from volunteer_hub.client.board import VolunteerBoard

BASE_URL = os.environ.get("BASE_URL", "http://localhost:3000")
GATE_CODE = os.environ.get("GATE_CODE", "1957")


def main() -> None:
    board = VolunteerBoard(SignupAPIClient(BASE_URL, timeout=5))
    board.load()
    if not board.event or not board.event.get("tasks"):
        print("No event with tasks on the server, nothing to do.")
        return

    task = board.event["tasks"][0]["name"]
    print(f"### Wrong gate code (401 expected) -> {BASE_URL}")
    print(board.client.create_volunteer({"name": "Smoke Test", "email": "smoke@example.com", "task": task}, "0000"))

    print(f"\n### Signup for '{task}'")
    board.signup.submit_form({"name": "Smoke Test", "email": "smoke@example.com", "task": task})
    board.signup.submit_gate_code(GATE_CODE)
    created = board.signup.last_volunteer
    print(f"Created: {created}")
    print(board.render_text())

    if created:
        print(f"### Removing {created['id']}")
        board.delete.open(created)
        board.delete.confirm(GATE_CODE)
        print(f"Alert: {board.delete.alert}")
        print(board.render_text())


if __name__ == "__main__":
    main()
