from typing import Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Storage
    storage_backend: str = "json"
    data_dir: str = "./data"
    database_url: str = "sqlite:///./volunteer_hub.db"

    # Shared secrets
    volunteer_gate_code: str = "1957"
    organizer_password: str = "5791"

    # Outbound email
    email_host: str = "smtp.gmail.com"
    email_port: int = 587
    email_user: Optional[str] = None
    email_pass: Optional[str] = None
    organizer_email: Optional[str] = None

    # Application
    debug: bool = False
    log_level: str = "INFO"
    port: int = 3000

    # Display client
    api_base_url: str = "http://localhost:3000"
    refresh_interval: float = 30.0

    # Environment
    environment: str = "development"

    class Config:
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()
