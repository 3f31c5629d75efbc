"""
Configuration models.

Provides Pydantic models for create-gaarf-wf configuration with validation.
"""

from __future__ import annotations

from typing import Literal

from pydantic import ConfigDict, field_validator

from .base import WorkflowBaseModel

LogLevel = Literal["debug", "info", "warning", "error"]

GAARF_REPO_URL = "https://github.com/google/ads-api-report-fetcher.git"
TRANSCRIPT_FILE = ".create-gaarf-wf-out.log"


class ConfigBaseModel(WorkflowBaseModel):
    """Base model for config sections with relaxed strict mode for TOML loading."""

    model_config = ConfigDict(
        strict=False,  # Allow coercion from TOML and env types
        validate_assignment=True,
        extra="ignore",  # Ignore unknown fields in config files
        populate_by_name=True,
        revalidate_instances="never",
    )


class RunnerConfig(ConfigBaseModel):
    """Command runner configuration section.

    ``diag`` keeps every command's output on screen and implies ``debug``.
    ``debug`` echoes commands and writes the transcript file.
    """

    debug: bool = False
    diag: bool = False
    transcript_file: str = TRANSCRIPT_FILE

    @property
    def is_debug(self) -> bool:
        """Whether commands are echoed and transcribed."""
        return self.debug or self.diag


class MacrosConfig(ConfigBaseModel):
    """Macro discovery configuration section."""

    query_suffix: str = ".sql"
    function_marker: str = "FUNCTIONS"

    @field_validator("query_suffix")
    @classmethod
    def ensure_dot(cls, v: str) -> str:
        """Accept 'sql' as well as '.sql'."""
        return v if v.startswith(".") else f".{v}"


class GcpConfig(ConfigBaseModel):
    """Google Cloud defaults used by the generated scripts."""

    region: str = "us-central1"
    repo_url: str = GAARF_REPO_URL
    gaarf_folder: str = "ads-api-fetcher"


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "warning"
    console: bool = False
    file: bool = False

