"""
Configuration management for the travel savings planner.
Holds the currency conversion constant and the savings-window policy.
"""
from pydantic import Field
from pydantic_settings import BaseSettings
from typing import Literal, Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server Configuration
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = True
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    # Currency
    default_currency: Literal["USD", "KRW"] = "USD"
    krw_exchange_rate: int = 1315  # 1 USD in KRW

    # Planner behaviour
    default_origin: Optional[str] = None
    # "clamp": a trip less than a month away saves over one month
    # "reject": raise ZeroSavingsWindowError instead
    short_window_policy: Literal["clamp", "reject"] = "clamp"
    price_trend_months: int = Field(12, ge=1)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


# Global settings instance
settings = Settings()
