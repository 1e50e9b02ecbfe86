from typing import Any

from .errors import Unauthorized
from .logging import logger


class Authorizer:
    """Capability checked by the signup service before any mutation."""

    def check_gate_code(self, code: Any) -> None:
        raise NotImplementedError

    def check_organizer_password(self, password: Any) -> None:
        raise NotImplementedError


class SharedSecretAuthorizer(Authorizer):
    """Fixed shared secrets compared by plain equality."""

    def __init__(self, gate_code: str, organizer_password: str):
        self.gate_code = gate_code
        self.organizer_password = organizer_password

    def check_gate_code(self, code: Any) -> None:
        if not isinstance(code, str) or code != self.gate_code:
            logger.warning("Rejected request with invalid gate code")
            raise Unauthorized("Invalid gate code")

    def check_organizer_password(self, password: Any) -> None:
        if not isinstance(password, str) or password != self.organizer_password:
            logger.warning("Rejected organizer request with invalid password")
            raise Unauthorized("Invalid password")
