from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import Settings, settings as default_settings
from .core.errors import SignupError, signup_error_handler
from .core.logging import logger
from .core.security import SharedSecretAuthorizer
from .db.seed import ensure_documents
from .db.store import build_store, describe_store
from .services.notifications import EmailService
from .services.signup import SignupService
from .api import admin, event, volunteers


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or default_settings

    store = build_store(settings)
    authorizer = SharedSecretAuthorizer(settings.volunteer_gate_code, settings.organizer_password)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting Volunteer Hub...")
        logger.info(f"Environment: {settings.environment}")
        try:
            ensure_documents(store, settings.organizer_email)
            logger.info(f"Data documents ready ({describe_store(store)})")
        except SignupError as e:
            logger.error(f"Error initializing data documents: {e.message}")
            raise
        logger.info(f"Email configured: {bool(settings.email_user)}")
        yield
        logger.info("Shutting down Volunteer Hub...")

    app = FastAPI(
        title="Volunteer Hub",
        description="Volunteer signup for club work days",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.signup_service = SignupService(store, authorizer)
    app.state.email_service = EmailService(settings)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(SignupError, signup_error_handler)

    # Include routers
    app.include_router(event.router, prefix="/api", tags=["event"])
    app.include_router(volunteers.router, prefix="/api", tags=["volunteers"])
    app.include_router(admin.router, prefix="/api/admin", tags=["admin"])

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    return app


app = create_application()


def run() -> None:
    import uvicorn

    uvicorn.run(
        "volunteer_hub.main:app",
        host="0.0.0.0",
        port=default_settings.port,
        reload=default_settings.environment == "development",
        log_level=default_settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
