"""Environment-driven settings for the secret tools."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .constants import Region, parse_region


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    region: Region = Region.US


def load_settings():
    """Read LOG_LEVEL and SECRET_REGION, after loading a .env file if present."""
    load_dotenv()
    return Settings(
        log_level=os.getenv("LOG_LEVEL", "WARNING"),
        region=parse_region(os.getenv("SECRET_REGION", "us")),
    )
