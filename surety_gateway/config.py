"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SURETY_",
        extra="ignore",
    )

    # Service
    service_name: str = "surety-gateway"
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # API docs
    api_title: str = "Surety Bond 5C Risk Gateway"
    api_version: str = "0.1.0"


settings = Settings()
