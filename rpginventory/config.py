"""
Item engine configuration settings.
"""

from pydantic_settings import BaseSettings
from typing import List

from .core.lore import DEFAULT_PATTERN
from .data.loaders import ITEMS_FILE as DEFAULT_ITEMS_FILE, LANG_FILE as DEFAULT_LANG_FILE


class Settings(BaseSettings):
    """Item engine settings."""

    # Data files
    ITEMS_FILE: str = str(DEFAULT_ITEMS_FILE)
    LANG_FILE: str = str(DEFAULT_LANG_FILE)

    # Lore
    LORE_PATTERN: List[str] = list(DEFAULT_PATTERN)
    SEPARATOR: str = "&8&m-------------------"

    # Logging
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "RPGINV_"


settings = Settings()
