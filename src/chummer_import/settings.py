"""
Import run configuration.

Settings are an explicit value passed to importers and parsers. They can be
built directly or loaded from the environment (and a ``.env`` file).
"""

import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

ENV_OVERRIDE = "CHUMMER_IMPORT_OVERRIDE"
ENV_ICON_SET = "CHUMMER_IMPORT_ICON_SET"
ENV_LANGUAGE = "CHUMMER_IMPORT_LANGUAGE"


class ImportSettings(BaseModel):
    """Options for one import run."""

    override_documents: bool = Field(
        default=True,
        description="Replace catalog entries that already exist with the same id",
    )
    icon_set: list[str] | None = Field(
        default=None,
        description="Icon paths offered to the icon picker; no icons are assigned when unset",
    )
    language: str = Field(default="en", description="Language used for category translation")


def _env_flag(value: str | None, default: bool) -> bool:
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def load_settings() -> ImportSettings:
    """Build settings from environment variables, reading ``.env`` if present."""
    if not load_dotenv():
        logger.debug("No .env file found, using process environment")

    icon_env = os.getenv(ENV_ICON_SET, "")
    icons = [path.strip() for path in icon_env.split(",") if path.strip()]

    return ImportSettings(
        override_documents=_env_flag(os.getenv(ENV_OVERRIDE), True),
        icon_set=icons or None,
        language=os.getenv(ENV_LANGUAGE, "en") or "en",
    )
