"""Configuration management using Pydantic Settings."""

from decimal import Decimal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tour_pricing.models.enums import Currency


class Settings(BaseSettings):
    """Application settings with environment and .env file support."""

    model_config = SettingsConfigDict(
        env_prefix="PRICING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Currency pair used by quotations when the caller does not name one
    default_base_currency: Currency = Field(
        default=Currency.TRY, description="Currency supplier costs are denominated in"
    )
    default_target_currency: Currency = Field(
        default=Currency.EUR, description="Currency sell prices are quoted in"
    )

    # Tax and display
    default_vat_rate: Decimal = Field(
        default=Decimal("20"), ge=0, description="VAT rate (percent) for quotations"
    )
    default_locale: str = Field(
        default="en_US", description="Locale used for currency display strings"
    )

    # General settings
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Logging level")


# Singleton instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get settings singleton instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings singleton (useful for testing)."""
    global _settings
    _settings = None
