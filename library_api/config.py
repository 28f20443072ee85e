"""
Application Configuration Module

This module uses Pydantic Settings for type-safe configuration management.

Only two values come from the outside world for the database: the
credentials, read from the DBUSER and DBPASS environment variables.
Where the database lives (host, port, schema name) is fixed and described
by DatabaseConfig with documented defaults.

PATTERN: Settings Singleton
===========================
A single Settings instance is cached using @lru_cache, so the environment
and the .env file are read once and every module shares the same values.

Usage:
    from library_api.config import get_settings

    settings = get_settings()
    print(settings.database.url)
"""

from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class DatabaseConfig(BaseModel):
    """
    Connection parameters for the library database.

    Defaults:
    - driver: mysql+pymysql (MySQL through the PyMySQL DBAPI)
    - host: localhost
    - port: 3306
    - name: library

    The credentials are the only values supplied at runtime.
    """

    model_config = ConfigDict(frozen=True)

    driver: str = "mysql+pymysql"
    host: str = "localhost"
    port: int = 3306
    name: str = "library"
    user: str = ""
    password: str = Field(default="", repr=False)

    @property
    def url(self) -> URL:
        """
        Build the SQLAlchemy URL for this database.

        URL.create() escapes the credentials, so passwords containing
        '@' or '/' are safe.
        """
        return URL.create(
            self.driver,
            username=self.user or None,
            password=self.password or None,
            host=self.host,
            port=self.port,
            database=self.name,
        )


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Pydantic Settings automatically:
    1. Reads from environment variables (case-insensitive)
    2. Falls back to .env file if env var not found
    3. Validates types and raises errors for invalid values
    """

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------
    app_name: str = Field(
        default="Library Catalog API",
        description="Application name displayed in docs and logs"
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode (SQL echo, auto-reload)"
    )
    host: str = Field(
        default="localhost",
        description="Host to bind the server to"
    )
    port: int = Field(
        default=8080,
        description="Port to bind the server to"
    )

    # -------------------------------------------------------------------------
    # Database Credentials
    # -------------------------------------------------------------------------
    db_user: str = Field(
        default="",
        validation_alias="DBUSER",
        description="Database user name"
    )
    db_password: str = Field(
        default="",
        validation_alias="DBPASS",
        repr=False,
        description="Database password"
    )

    # -------------------------------------------------------------------------
    # Logging Settings
    # -------------------------------------------------------------------------
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------
    @property
    def database(self) -> DatabaseConfig:
        """Database configuration: fixed location plus runtime credentials."""
        return DatabaseConfig(user=self.db_user, password=self.db_password)

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Validate that log_level is a valid Python logging level.

        Args:
            v: The value to validate

        Returns:
            The validated value (uppercase)

        Raises:
            ValueError: If log level is invalid
        """
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v.upper()


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    First call creates the Settings instance (reading the environment and
    .env); later calls return the same instance. Tests that change the
    environment call get_settings.cache_clear() first.

    Returns:
        Cached Settings instance
    """
    return Settings()
