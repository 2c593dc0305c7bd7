from pathlib import Path
from pydantic import SecretStr
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    db_path: Path = Path.home() / "JobBoard" / "jobboard.sqlite"
    api_prefix: str = "/api"
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"
    job_refresh_seconds: int = 30
    cors_origins: list[str] = ["http://localhost:3000"]

    # Single admin identity, supplied through JOBBOARD_ADMIN_USERNAME and
    # JOBBOARD_ADMIN_PASSWORD. Unset means no login succeeds.
    admin_username: str | None = None
    admin_password: SecretStr | None = None
    session_ttl_seconds: int = 60 * 60 * 24  # 24 hours
    session_cookie_name: str = "jobboard_session"
    session_cookie_secure: bool = False

    resend_api_key: SecretStr | None = None
    resend_api_url: str = "https://api.resend.com/emails"
    mail_from: str = "Euro Asia Global <onboarding@resend.dev>"
    admin_email: str | None = None
    mail_timeout_seconds: float = 10.0

    model_config = {"env_prefix": "JOBBOARD_"}


settings = Settings()
