from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from permissions_dashboard.models.view import DashboardArgs

BASE_DIR = Path.cwd()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Dashboard settings with validation.

    Values come from environment variables or a .env file in the working
    directory. Every field has a default so the dashboard starts with no
    configuration at all.

    The grpc_* and datastore_engine fields are display values: they are
    rendered verbatim into the example commands on the page and nothing else
    acts on them.
    """

    # HTTP server settings
    dashboard_host: str = Field(default="127.0.0.1", min_length=1, description="Dashboard bind host")
    dashboard_port: int = Field(default=8080, ge=1, le=65535, description="Dashboard bind port")
    shutdown_timeout: float = Field(default=10.0, gt=0, description="Graceful shutdown bound in seconds")

    # Display values for the example commands
    grpc_addr: str = Field(default="localhost:50051", min_length=1, description="gRPC endpoint shown in commands")
    grpc_no_tls: bool = Field(default=False, description="Whether the gRPC endpoint runs without TLS")
    datastore_engine: str = Field(default="memory", min_length=1, description="Datastore engine label")

    # Backing store
    datastore_file: Path | None = Field(default=None, description="JSON file backing the store")

    # Page behaviour
    analytics_tag: str | None = Field(default=None, description="Google Analytics tag id (e.g. 'G-XXXXXXX')")
    error_status_passthrough: bool = Field(
        default=False,
        description="Respond to errors with the exception's HTTP status instead of 200",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Root log level")
    log_file: Path | None = Field(default=None, description="JSON log file path")

    model_config = SettingsConfigDict(
        env_file=Path(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator("dashboard_host", "grpc_addr", "datastore_engine", mode="after")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Ensure display and bind values are not whitespace only."""
        v = v.strip()
        if not v:
            raise ValueError("value cannot be empty")
        return v

    @field_validator("analytics_tag", mode="after")
    @classmethod
    def validate_analytics_tag(cls, v: str | None) -> str | None:
        """Treat a blank analytics tag as unset."""
        if v is None:
            return None
        return v.strip() or None

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log_level names a standard logging level."""
        v = v.strip().upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return v

    @property
    def dashboard_args(self) -> DashboardArgs:
        """Display values handed to the page template."""
        return DashboardArgs(
            grpc_addr=self.grpc_addr,
            grpc_no_tls=self.grpc_no_tls,
            datastore_engine=self.datastore_engine,
        )


# Singleton settings instance (cached for performance)
_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get singleton Settings instance.

    Returns:
        Cached Settings instance
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
