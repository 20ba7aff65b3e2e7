"""Configuration management for the kitchen workflow engine."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="KITCHEN_",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: Literal["development", "staging", "production"] = Field(
        default="development"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: Literal["json", "text"] = Field(default="json", description="Log format")

    # Admission control
    max_concurrent_orders: int = Field(
        default=20, ge=1, description="Max confirmed/preparing orders in the kitchen"
    )
    staff_per_active_orders: int = Field(
        default=3, ge=1, description="Active orders one staff member can cover"
    )
    complex_orders_per_senior: int = Field(
        default=2, ge=1, description="Complex orders one senior cook can cover"
    )

    # Order value thresholds
    high_value_order_threshold: float = Field(
        default=100.0, ge=0, description="Orders above this need senior staff"
    )
    vip_order_threshold: float = Field(
        default=150.0, ge=0, description="Orders above this are handled as VIP"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v_upper


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
