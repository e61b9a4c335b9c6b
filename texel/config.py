"""Configuration and constants for the Texel design rule service.

Includes configuration for:
- Database connection (DatabaseSettings with DB_ prefix)
- HTTP API server (ApiServerConfig with API_ prefix)

Configuration can be overridden via:
1. Environment variables (e.g., DB_URL=sqlite:///data/texel.db, API_PORT=9000)
2. .env file in the current directory
3. Default values in code
"""

from dataclasses import dataclass

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


@dataclass(frozen=True)
class ServiceConstants:
    """Fixed identifiers of the service. Not configurable.

    All attributes are immutable (frozen=True prevents modification).
    """

    # Project created at startup so a fresh database can be used right away
    SEED_PROJECT_ID: str = "feedface-cafe-beef-feed-facecafebeef"

    # Tracing header propagated through request logs
    REQUEST_ID_HEADER: str = "x-request-id"


# Module-level singleton for service constants
CONSTANTS = ServiceConstants()


class DatabaseSettings(BaseSettings):
    """Database connection configuration.

    Environment variables:
    - DB_URL: SQLAlchemy database URL (default: sqlite:///tmp/texel.db)
    - DB_RESET_ON_START: Drop and recreate all tables at startup (default: true)
    - DB_POOL_SIZE: Connections kept in the pool for server databases (default: 5)
    - DB_ECHO: Log every SQL statement (default: false)
    """

    model_config = SettingsConfigDict(
        env_prefix="DB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    url: str = Field(default="sqlite:///tmp/texel.db", description="SQLAlchemy database URL")
    reset_on_start: bool = Field(
        default=True,
        description="Drop and recreate all tables at startup (local development)",
    )
    pool_size: int = Field(default=5, ge=1, description="Connection pool size")
    echo: bool = Field(default=False, description="Enable SQLAlchemy statement logging")

    @field_validator("url")
    @classmethod
    def must_not_be_empty(cls, v: str) -> str:
        if not v or not v.strip():
            msg = "Database URL cannot be empty"
            raise ValueError(msg)
        return v


class ApiServerConfig(BaseSettings):
    """Configuration for the HTTP API server.

    Can be overridden via environment variables with API_ prefix:
    - API_HOST (default: 0.0.0.0)
    - API_PORT (default: 8080)
    """

    model_config = SettingsConfigDict(
        env_prefix="API_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = Field(default="0.0.0.0", description="Interface the API server binds to")
    port: int = Field(default=8080, ge=1, le=65535, description="Port for the API server")
