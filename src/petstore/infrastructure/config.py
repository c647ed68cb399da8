"""Application settings loaded from the environment via pydantic-settings.

Every field can be overridden with a ``PETSTORE_``-prefixed environment
variable (``PETSTORE_DATA_FILE``, ``PETSTORE_LOG_LEVEL`` ...) or a ``.env``
file in the working directory.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_FILE = Path(__file__).resolve().parents[3] / "data" / "inventory.csv"

_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):

    data_file: Path = Field(
        default=_DEFAULT_DATA_FILE,
        description="Delimited file holding the pet inventory",
    )
    delimiter: str = Field(
        default=",",
        min_length=1,
        max_length=1,
        description="Single-character field delimiter of the data file",
    )
    create_data_file: bool = Field(
        default=True,
        description="Create an empty data file if none exists",
    )
    log_level: str = Field(default="INFO", description="Root logging level")

    model_config = SettingsConfigDict(
        env_prefix="PETSTORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v_upper = v.upper()
        if v_upper not in _VALID_LOG_LEVELS:
            logger.warning("Invalid log level %r, using INFO", v)
            return "INFO"
        return v_upper


@lru_cache
def get_settings() -> Settings:
    return Settings()
