"""Application configuration: settings schema and layered loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "DOCSTORE_"


class Settings(BaseModel):
    app_name:         str  = "docstore"
    log_level:        str  = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR)$", description="Log level for CLI runs")
    preserve_created: bool = Field(default=True, description="Keep the stored created timestamp when a document is replaced")


def config_path() -> Path:
    """Config file location: DOCSTORE_CONFIG if set, else config.yaml in the working directory."""
    return Path(os.getenv(f"{ENV_PREFIX}CONFIG") or CONFIG_FILE)


def _file_values(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid {path.name}: expected a mapping of settings")
    return data


def _env_values() -> dict[str, str]:
    """Non-empty DOCSTORE_<FIELD> variables keyed by field name."""
    found = {name: os.getenv(f"{ENV_PREFIX}{name.upper()}") for name in Settings.model_fields}
    return {name: val for name, val in found.items() if val}


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Build Settings from the config file, then env vars, then non-None CLI overrides.

    Raises ValueError for an unreadable config file or invalid values.
    """
    data = _file_values(config_path())
    data.update(_env_values())
    data.update({k: v for k, v in (overrides or {}).items() if v is not None})
    return Settings(**data)
