"""
flockcalc settings
Load from environment variables (FLOCKCALC_ prefix)
"""

import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from flockcalc.display.locale import DisplayLocale


class Settings(BaseSettings):
    """Settings for embedding applications"""

    model_config = SettingsConfigDict(
        env_prefix="FLOCKCALC_",
        env_file=".env",
        extra="ignore",
    )

    # ======================
    # Display
    # ======================
    NUMBER_LOCALE: str = "es_ES"
    USD_LOCALE: str = "en_US"
    DATE_LOCALE: str = "es_ES"
    CURRENCY_SYMBOL: str = "C$"

    # ======================
    # Row collection
    # ======================
    FETCH_MAX_WORKERS: int = Field(default=7, ge=1)

    # ======================
    # Logging
    # ======================
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    def display_locale(self) -> DisplayLocale:
        return DisplayLocale(
            number_locale=self.NUMBER_LOCALE,
            usd_locale=self.USD_LOCALE,
            date_locale=self.DATE_LOCALE,
            currency_symbol=self.CURRENCY_SYMBOL,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Root logging setup for applications that embed flockcalc."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format=settings.LOG_FORMAT,
    )
