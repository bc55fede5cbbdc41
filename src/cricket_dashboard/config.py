"""Configuration management for the cricket stats dashboard."""

from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Database configuration settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    url_override: Optional[str] = Field(default=None, validation_alias="DB_URL")
    backend: str = Field(default="sqlite", validation_alias="DB_BACKEND")
    path: str = Field(default="data/cricket_stats.db", validation_alias="DB_PATH")
    host: str = Field(default="localhost", validation_alias="DB_HOST")
    port: int = Field(default=3306, validation_alias="DB_PORT")
    name: str = Field(default="cricket_stats", validation_alias="DB_NAME")
    user: str = Field(default="cricket_user", validation_alias="DB_USER")
    password: str = Field(default="", validation_alias="DB_PASSWORD")
    echo: bool = Field(default=False, validation_alias="DB_ECHO")

    @property
    def url(self) -> str:
        """Get database URL for SQLAlchemy."""
        if self.url_override:
            return self.url_override
        if self.backend.lower() == "mysql":
            return f"mysql+mysqlconnector://{self.user}:{self.password}@{self.host}:{self.port}/{self.name}"
        return f"sqlite:///{self.path}"


class ApiSettings(BaseSettings):
    """HTTP API configuration settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    title: str = Field(default="Cricket Stats Dashboard API", validation_alias="API_TITLE")
    host: str = Field(default="127.0.0.1", validation_alias="API_HOST")
    port: int = Field(default=8000, validation_alias="API_PORT")
    cors_origins_csv: str = Field(default="*", validation_alias="API_CORS_ORIGINS")

    @property
    def cors_origins(self) -> List[str]:
        origins = [o.strip() for o in self.cors_origins_csv.split(",") if o.strip()]
        return origins or ["*"]


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    file: Optional[str] = Field(default=None, validation_alias="LOG_FILE")


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    api: ApiSettings = Field(default_factory=ApiSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# Global settings instance
settings = Settings()
