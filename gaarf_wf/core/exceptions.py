"""
Custom exception hierarchy for create-gaarf-wf.

Failed external commands are not exceptions: the command runner reports them
through exit codes. These exceptions cover the conditions that abort a run.
"""

from __future__ import annotations


class GaarfWfException(Exception):
    """
    Base exception for all create-gaarf-wf errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (file paths, commands, etc.)
        exit_code: Suggested exit code for CLI (default: 1)
    """

    exit_code: int = 1

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigFileError(GaarfWfException):
    """
    Error reading or parsing a configuration file.

    Raised for TOML parsing errors, file not found, permission errors, etc.
    """

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, context=ctx, cause=cause)


class AnswersFileError(GaarfWfException):
    """Error reading a previously saved answers file."""

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Provisioning Errors
# =============================================================================


class ProvisioningError(GaarfWfException):
    """Base class for errors that stop cloud provisioning."""

    exit_code: int = 255


class GcloudNotFoundError(ProvisioningError):
    """The gcloud CLI (Google Cloud SDK) is not installed or not on PATH."""

    def __init__(
        self,
        message: str = "Could not find gcloud command, please make sure you installed Google Cloud SDK",
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, context=context, cause=cause)


class GcloudAuthError(ProvisioningError):
    """gcloud is installed but has no authenticated account."""

    def __init__(
        self,
        message: str = "Please authenticate in gcloud using 'gcloud auth login'",
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, context=context, cause=cause)


class ProjectNotFoundError(ProvisioningError):
    """A manually entered GCP project could not be described."""

    def __init__(
        self,
        message: str,
        *,
        project_id: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if project_id:
            ctx["project_id"] = project_id
        super().__init__(message, context=ctx, cause=cause)
