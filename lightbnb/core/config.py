"""
Configuration Settings.

This module defines the application configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.

The PostgreSQL variables keep the names used by the LightBnB web app
(``DB_USER``, ``DB_HOST``, ``DB_NAME``, ``DB_PASS``, ``DB_PORT``) so an existing
``.env`` file keeps working.
"""

from typing import Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# =====================================================================
# Database Configuration Models
# =====================================================================


class PostgreSQLConfig(BaseModel):
    """PostgreSQL database configuration."""

    db: str = Field(default="lightbnb", alias="DB_NAME", description="PostgreSQL database name")
    user: str = Field(default="vagrant", alias="DB_USER", description="PostgreSQL database user")
    password: str = Field(default="123", alias="DB_PASS", description="PostgreSQL database password")
    host: str = Field(default="localhost", alias="DB_HOST", description="PostgreSQL database host address")
    port: int = Field(default=5432, alias="DB_PORT", description="PostgreSQL database port number")

    model_config = {"populate_by_name": True}

    @property
    def url(self) -> str:
        """Async connection URL built from the individual parameters."""
        return f"postgresql+asyncpg://{self.user}:{self.password}@{self.host}:{self.port}/{self.db}"


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Application settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    # =====================================================================
    # Pydantic Configuration
    # =====================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    # =====================================================================
    # Logging Configuration
    # =====================================================================
    log_level: str = Field(
        default="INFO",
        description="LightBnB logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="LIGHTBNB_LOG_LEVEL",
    )

    # =====================================================================
    # Database Configuration
    # =====================================================================
    database_url: Optional[str] = Field(
        default=None,
        description="Full database URL; overrides the individual DB_* variables when set",
        alias="DATABASE_URL",
    )
    db_name: str = Field(default="lightbnb", alias="DB_NAME")
    db_user: str = Field(default="vagrant", alias="DB_USER")
    db_pass: str = Field(default="123", alias="DB_PASS")
    db_host: str = Field(default="localhost", alias="DB_HOST")
    db_port: int = Field(default=5432, alias="DB_PORT")

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def postgres(self) -> PostgreSQLConfig:
        """Get PostgreSQL configuration from environment variables."""
        return PostgreSQLConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def resolved_database_url(self) -> str:
        """The URL the connection pool should use."""
        return self.database_url or self.postgres.url


settings = Settings()
