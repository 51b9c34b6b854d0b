"""
Core configuration settings for the Kasir API.
"""
from typing import List, Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Application
    app_name: str = "Kasir API"
    debug: bool = False
    api_prefix: str = "/api"
    host: str = "0.0.0.0"
    port: int = 5000
    cors_origins: List[str] = ["*"]

    # Database
    database_url: Optional[str] = None
    db_host: str = "localhost"
    db_port: int = 5432
    db_name: str = "kasir"
    db_user: str = "postgres"
    db_password: str = ""
    database_pool_size: int = 20
    database_max_overflow: int = 30

    # Credentials
    jwt_secret: str = "change-me"
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 8 * 60

    # First admin account, created on startup when the users table is empty
    admin_username: Optional[str] = None
    admin_password: Optional[str] = None
    admin_name: str = "Administrator"

    # Dashboard
    low_stock_threshold: int = 10
    low_stock_limit: int = 10

    # Logging
    log_level: str = "INFO"

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, v):
        if v is not None and not v.startswith(("postgresql", "postgres://", "sqlite")):
            raise ValueError("Database URL must be a PostgreSQL or SQLite connection string")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        v = v.upper()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return v

    @property
    def sqlalchemy_database_uri(self) -> str:
        """Explicit DATABASE_URL wins over the individual DB_* parameters."""
        if self.database_url:
            return self.database_url
        return (
            f"postgresql://{self.db_user}:{self.db_password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
