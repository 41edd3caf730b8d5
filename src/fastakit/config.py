"""fastakit configuration, read from environment variables."""

import os
from typing import Literal

from pydantic import BaseModel


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "")
    if not raw:
        return default
    return raw.lower() in ("1", "true", "yes")


class ValidationConfig(BaseModel):
    allow_blank_lines: bool = True
    require_sequence: bool = True  # a description must be followed by sequence data


class AppConfig(BaseModel):
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    validation: ValidationConfig = ValidationConfig()


def _build_config() -> AppConfig:
    """Build config from environment variables."""
    return AppConfig(
        log_level=os.environ.get("FASTAKIT_LOG_LEVEL", "WARNING").upper(),
        validation=ValidationConfig(
            allow_blank_lines=_env_flag("FASTAKIT_ALLOW_BLANK_LINES", True),
            require_sequence=_env_flag("FASTAKIT_REQUIRE_SEQUENCE", True),
        ),
    )


config = _build_config()
