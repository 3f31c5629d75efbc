"""
Pydantic Settings for create-gaarf-wf configuration.

Provides settings loading from TOML files, environment variables, and defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from .models.config import GcpConfig, LoggingConfig, MacrosConfig, RunnerConfig

CONFIG_FILE_NAME = ".create-gaarf-wf.toml"
PYPROJECT_TOOL_KEY = "create-gaarf-wf"


def find_config_file(start_dir: str | None = None) -> Path | None:
    """
    Find .create-gaarf-wf.toml by walking up from start_dir (or cwd).

    A pyproject.toml with a [tool.create-gaarf-wf] table also counts.

    Returns:
        Path to config file, or None if not found.
    """
    start = Path(start_dir) if start_dir else Path.cwd()

    for parent in [start, *list(start.parents)]:
        config_path = parent / CONFIG_FILE_NAME
        if config_path.exists():
            return config_path

        pyproject = parent / "pyproject.toml"
        if pyproject.exists():
            try:
                with open(pyproject, "rb") as f:
                    data = tomllib.load(f)
            except (tomllib.TOMLDecodeError, OSError):
                continue
            if PYPROJECT_TOOL_KEY in data.get("tool", {}):
                return pyproject

    return None


class TomlConfigSource(PydanticBaseSettingsSource):
    """Custom settings source that loads from TOML config files."""

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        config_path: Path | None = None,
        start_dir: str | None = None,
    ):
        super().__init__(settings_cls)
        self._config_path = config_path
        self._start_dir = start_dir
        self._data: dict[str, Any] | None = None
        self.config_file: str | None = None
        self.config_error: str | None = None

    def _load_toml(self) -> dict[str, Any]:
        """Load and cache TOML data."""
        if self._data is not None:
            return self._data

        self._data = {}

        path = self._config_path
        if path is None:
            path = find_config_file(self._start_dir)

        if path is None:
            return self._data

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            self.config_error = f"Failed to parse config file {path}: {e}"
            return self._data
        except OSError as e:
            self.config_error = f"Failed to read config file {path}: {e}"
            return self._data

        if path.name == "pyproject.toml":
            data = data.get("tool", {}).get(PYPROJECT_TOOL_KEY, {})

        self._data = data
        self.config_file = str(path)
        return self._data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Get field value from TOML data."""
        data = self._load_toml()
        return data.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return all TOML data for settings initialization."""
        return self._load_toml()


class WorkflowSettings(BaseSettings):
    """create-gaarf-wf settings with TOML and environment variable support.

    Priority (highest to lowest):
    1. Explicit init values
    2. Environment variables (GAARF_WF_<section>__<field>)
    3. TOML config file (.create-gaarf-wf.toml or pyproject.toml [tool.create-gaarf-wf])
    4. Model defaults
    """

    model_config = {
        "env_prefix": "GAARF_WF_",
        "env_nested_delimiter": "__",
        "extra": "ignore",
        "validate_assignment": True,
    }

    runner: RunnerConfig = Field(default_factory=RunnerConfig)
    macros: MacrosConfig = Field(default_factory=MacrosConfig)
    gcp: GcpConfig = Field(default_factory=GcpConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    # Where the values came from; not configurable
    config_file: str | None = None
    config_error: str | None = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to add TOML loading.

        Note: settings_customise_sources cannot receive the config path, so
        load_settings() hands it over through module-level variables.
        """
        toml_source = TomlConfigSource(
            settings_cls,
            config_path=_current_config_path,
            start_dir=_current_start_dir,
        )
        return (
            init_settings,
            env_settings,
            toml_source,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert settings to a plain nested dict."""
        return {
            "runner": self.runner.model_dump(),
            "macros": self.macros.model_dump(),
            "gcp": self.gcp.model_dump(),
            "logging": self.logging.model_dump(),
        }


# Module-level variables for passing to settings_customise_sources
_current_config_path: Path | None = None
_current_start_dir: str | None = None


def load_settings(config_path: Path | None = None, start_dir: str | None = None) -> WorkflowSettings:
    """Load settings from config file and environment.

    Args:
        config_path: Explicit path to config file
        start_dir: Directory to start searching from (if config_path not given)

    Returns:
        WorkflowSettings instance with all sources merged
    """
    global _current_config_path, _current_start_dir

    _current_config_path = config_path
    _current_start_dir = start_dir

    try:
        settings = WorkflowSettings()

        toml_source = TomlConfigSource(WorkflowSettings, config_path, start_dir)
        toml_source()
        settings.config_file = toml_source.config_file
        settings.config_error = toml_source.config_error
        return settings
    finally:
        _current_config_path = None
        _current_start_dir = None
