"""
Core building blocks for create-gaarf-wf.

This module provides:
- Interface definitions for loggers, presenters and prompters
- Pydantic models for commands, questions and configuration
- Settings loading from TOML files and environment variables
- Custom exception hierarchy
"""

from .exceptions import (
    AnswersFileError,
    ConfigFileError,
    GaarfWfException,
    GcloudAuthError,
    GcloudNotFoundError,
    ProjectNotFoundError,
    ProvisioningError,
)

__all__ = [
    "AnswersFileError",
    "ConfigFileError",
    "GaarfWfException",
    "GcloudAuthError",
    "GcloudNotFoundError",
    "ProjectNotFoundError",
    "ProvisioningError",
]
