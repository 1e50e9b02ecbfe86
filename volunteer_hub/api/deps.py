from fastapi import Request

from ..services.notifications import EmailService
from ..services.signup import SignupService


def get_signup_service(request: Request) -> SignupService:
    """Dependency to get the signup service built at startup."""
    return request.app.state.signup_service


def get_email_service(request: Request) -> EmailService:
    return request.app.state.email_service
