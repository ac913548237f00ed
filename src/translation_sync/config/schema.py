"""Configuration schema for translation-sync using a frozen Pydantic model."""

import logging
from pathlib import Path
from typing import ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..translation.deepl_client import DEFAULT_API_ENDPOINT, DEFAULT_TIMEOUT

LogLevelName = Literal["debug", "info", "warn", "warning", "error", "fatal"]


class SyncConfig(BaseModel):
    """
    Settings for one pipeline run.

    Built once from command-line flags and environment variables, then passed
    to the pipeline. The model is frozen; nothing mutates it after start-up.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    LOG_LEVELS: ClassVar[dict[str, int]] = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warn": logging.WARNING,
        "warning": logging.WARNING,
        "error": logging.ERROR,
        "fatal": logging.CRITICAL,
    }

    deepl_api_endpoint: str = Field(
        default=DEFAULT_API_ENDPOINT,
        description="DeepL API endpoint to request translations from",
        pattern=r"^https?://.*",
    )
    deepl_api_key: str = Field(
        default="",
        description="API key for the DeepL API; empty skips auto-translation",
    )
    translation_file: Path = Field(
        default=Path("i18n.yaml"),
        description="File to use for translations",
    )
    output_file: Path = Field(
        default=Path("src/langs/langs.js"),
        description="Where to put rendered translations",
    )
    log_level: LogLevelName = Field(
        default="info",
        description="Log level (debug, info, warn, error, fatal)",
    )
    request_timeout: float = Field(
        default=DEFAULT_TIMEOUT,
        description="Timeout in seconds for a single DeepL request",
        gt=0,
    )
    check: bool = Field(
        default=False,
        description="Only report missing translations, never translate or write",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        """Accept log levels in any case."""
        return v.lower() if isinstance(v, str) else v

    @property
    def logging_level(self) -> int:
        """The standard logging level matching log_level."""
        return self.LOG_LEVELS[self.log_level]
