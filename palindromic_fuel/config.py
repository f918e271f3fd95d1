import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Palindromic fuel configuration."""

    log_level: str = "WARNING"

    # Tolerance for treating a computed volume as a whole number. Larger
    # prices and volumes accumulate more division error.
    epsilon: float = Field(default=0.01, gt=0, lt=0.5)

    # Search defaults
    max_volume: int = 10000
    search_radius: int = 100
    # Upper bounds on searches accepted from the web API
    max_volume_limit: int = 1_000_000
    # in minor units, i.e. ceil(price * max_volume)
    max_cost_limit: int = 1_000_000_000

    # Console output
    display_limit: int = 50
    currency_symbol: str = "£"
    volume_unit: str = "litres"

    # Web server
    host: str = "127.0.0.1"
    port: int = 8080

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PALINDROMIC_FUEL_",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(settings: Settings) -> None:
    """Configure logging for the command line and the web server."""
    log_level = getattr(logging, settings.log_level.upper(), logging.WARNING)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Set level for our package specifically
    logging.getLogger("palindromic_fuel").setLevel(log_level)

    # Quiet noisy third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("multipart").setLevel(logging.WARNING)
