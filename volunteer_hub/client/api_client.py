from typing import Any, Dict, List, Optional

import requests

from ..core.logging import logger


class SignupAPIClient:
    """Client for the volunteer signup API."""

    def __init__(self, base_url: str, timeout: int = 30, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()

    def get_event(self) -> Optional[Dict[str, Any]]:
        return self._request("GET", "/api/event", expect_ok=True)

    def list_volunteers(self) -> List[Dict[str, Any]]:
        volunteers = self._request("GET", "/api/volunteers", expect_ok=True)
        if not isinstance(volunteers, list):
            raise ValueError("API response must be a list of volunteers")
        return volunteers

    def create_volunteer(self, draft: Dict[str, Any], gate_code: str) -> Dict[str, Any]:
        """
        Submit a signup draft with the gate code.

        Returns:
            The response body: ``{"success": True, "volunteer": ...}`` or
            ``{"error": ...}`` when the server refused the request.

        Raises:
            requests.RequestException: If the server could not be reached
            ValueError: If the response body is not JSON
        """
        return self._request("POST", "/api/volunteers", json={**draft, "gateCode": gate_code})

    def delete_volunteer(self, volunteer_id: str, gate_code: str) -> Dict[str, Any]:
        return self._request("DELETE", f"/api/volunteers/{volunteer_id}", json={"gateCode": gate_code})

    def verify_organizer(self, password: str) -> Dict[str, Any]:
        return self._request("POST", "/api/admin/verify", json={"password": password})

    def update_event(self, password: str, event: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", "/api/admin/event", json={"password": password, "event": event})

    def _request(self, method: str, path: str, expect_ok: bool = False, **kwargs) -> Any:
        try:
            response = self.session.request(
                method,
                f"{self.base_url}{path}",
                timeout=self.timeout,
                **kwargs
            )
            if expect_ok:
                response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            logger.error(f"{method} {path} failed: {e}")
            raise
