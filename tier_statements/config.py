"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="TIER_STATEMENTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Service
    service_name: str = "tier-statements"
    log_level: str = "INFO"

    # Reports
    currency_symbol: str = "$"

    # HTTP API
    max_lines_per_request: int = 10_000


settings = Settings()
