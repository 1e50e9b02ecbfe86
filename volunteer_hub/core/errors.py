from fastapi import Request
from fastapi.responses import JSONResponse


class SignupError(Exception):
    """Base error carrying the HTTP status and the message shown to callers."""

    status_code = 500

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)
        self.message = message


class Unauthorized(SignupError):
    status_code = 401


class StorageError(SignupError):
    status_code = 500


class NotificationError(SignupError):
    """Raised by the email transport. Never rendered to HTTP callers."""


async def signup_error_handler(request: Request, exc: SignupError) -> JSONResponse:
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)
