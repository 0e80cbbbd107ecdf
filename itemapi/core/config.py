"""
Application configuration.

Loads settings from environment variables and .env file.
Settings are built once at startup and passed explicitly to the
application factory. No other module reads the process environment.
"""

from pathlib import Path
from typing import Optional

from pydantic import AliasChoices, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

PRODUCTION = "production"
REQUIRED_VARIABLES = ("NODE_ENV", "PORT", "DATABASE_URL", "JWT_SECRET")


class ConfigurationError(Exception):
    """Raised when the environment cannot produce valid settings."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        node_env: Runtime mode (development, production, test).
        port: TCP port the server binds to.
        host: Interface the server binds to.
        database_url: SQLAlchemy URL of the item store. MONGODB_URI is
            accepted as an alias.
        jwt_secret: Secret shared with the upstream token issuer.
        jwt_expiration: Token lifetime in seconds.
        redis_url: Optional Redis URL.
        log_level: Logging level (debug, info, warning, error).
        enable_cors: Install the CORS middleware.
        allowed_origins: Comma-separated list of CORS origins.
        upload_path: Directory for uploaded files, created at startup.
        max_file_size: Maximum upload size in bytes.
        max_request_size_bytes: Maximum JSON request body size.
        rate_limit: Per-client request budget, in limits notation.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    project_name: str = "Item API"
    version: str = "1.0.0"

    node_env: str = Field(..., min_length=1)
    port: int
    host: str = "localhost"
    database_url: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("database_url", "mongodb_uri"),
    )
    jwt_secret: str = Field(..., min_length=1)
    jwt_expiration: int = 3600
    redis_url: Optional[str] = None
    log_level: str = "info"
    enable_cors: bool = True
    allowed_origins: str = "http://localhost:3000"
    upload_path: str = "./uploads"
    max_file_size: int = 10_485_760  # 10 MiB
    max_request_size_bytes: int = 10_485_760  # 10 MiB
    rate_limit: str = "100 per 15 minutes"

    @property
    def is_production(self) -> bool:
        """Whether the process runs in production mode."""
        return self.node_env.lower() == PRODUCTION

    @property
    def debug(self) -> bool:
        """Diagnostics (stack traces, docs, test routes) are on outside production."""
        return not self.is_production

    @property
    def cors_origins(self) -> list[str]:
        """Return the allowed CORS origins as a list."""
        origins = [o.strip() for o in self.allowed_origins.split(",") if o.strip()]
        return origins or ["http://localhost:3000"]


def _env_name(location: tuple) -> str:
    field = str(location[0]) if location else "unknown"
    if field == "mongodb_uri":
        field = "database_url"
    return field.upper()


def load_settings() -> Settings:
    """Build settings from the environment.

    Returns:
        A frozen Settings instance.

    Raises:
        ConfigurationError: If a required variable is missing or empty,
            or a variable cannot be parsed.
    """
    try:
        return Settings()
    except ValidationError as exc:
        missing: list[str] = []
        invalid: list[str] = []
        for issue in exc.errors():
            name = _env_name(issue.get("loc", ()))
            if issue.get("type") in ("missing", "string_too_short"):
                missing.append(name)
            else:
                invalid.append(name)

        parts = []
        if missing:
            ordered = [v for v in REQUIRED_VARIABLES if v in missing]
            ordered += [v for v in missing if v not in ordered]
            parts.append(f"Missing required environment variables: {', '.join(ordered)}")
        if invalid:
            parts.append(f"Invalid environment variables: {', '.join(invalid)}")
        raise ConfigurationError("; ".join(parts)) from exc


def ensure_upload_path(settings: Settings) -> Path:
    """Create the upload directory if it does not exist yet."""
    path = Path(settings.upload_path)
    path.mkdir(parents=True, exist_ok=True)
    return path
