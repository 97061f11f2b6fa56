"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Only the shell (main.py, routes) reads Settings; core receives plain values
    - get_settings() is cached (lru_cache): single instance per process
    - Discount tiers validated to [0, 100] before any rule is built

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults reproduce the shop's published prices: works with no .env at all
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from dvdshop.core.pricing import PricingConfig


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Pricing
    standard_price: float = Field(20.0, ge=0)
    special_price: float = Field(15.0, ge=0)
    currency: str = "EUR"
    currency_symbol: str = "€"

    # Discount tiers (percent)
    two_episodes_discount: float = Field(10, ge=0, le=100)
    three_episodes_discount: float = Field(20, ge=0, le=100)

    # API
    host: str = "0.0.0.0"
    port: int = Field(8000, ge=1, le=65535)
    max_items: int = Field(1000, ge=1)
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    def pricing_config(self) -> PricingConfig:
        return PricingConfig(
            standard_price=self.standard_price,
            special_price=self.special_price,
            currency=self.currency,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
