"""Configuration loading for create-gaarf-wf."""

from __future__ import annotations

from pathlib import Path

from .core.exceptions import ConfigFileError
from .core.settings import WorkflowSettings, find_config_file, load_settings

__all__ = ["find_config_file", "load_config"]


def load_config(
    config_path: Path | None = None,
    start_dir: str | None = None,
    debug: bool = False,
    diag: bool = False,
) -> WorkflowSettings:
    """
    Load settings and apply command line overrides.

    Args:
        config_path: Explicit path to config file
        start_dir: Directory to start searching from (if config_path not given)
        debug: --debug flag; only turns debugging on, never off
        diag: --diag flag; implies debug

    Returns:
        Settings with all sources merged

    Raises:
        ConfigFileError: If an explicitly given config file cannot be loaded
    """
    settings = load_settings(config_path=config_path, start_dir=start_dir)
    if config_path is not None and settings.config_error:
        raise ConfigFileError(settings.config_error, file_path=str(config_path))

    if debug:
        settings.runner.debug = True
    if diag:
        settings.runner.diag = True
    return settings
