"""Configuration management."""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config" / "config.yaml"


class Config(BaseModel):
    """Application configuration."""

    db_path: Path = Path("job_applications.db")
    log_level: str = "INFO"
    log_dir: Path = Path("logs")
    lock_timeout: float = Field(default=1.0, ge=0.0)


_config: Optional[Config] = None


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from YAML file.

    An explicitly requested file must exist. When no path is given the
    default location is tried and built-in defaults are used if it is absent.
    """
    global _config

    if _config is not None and config_path is None:
        return _config

    if config_path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            _config = Config()
            return _config
        config_path = DEFAULT_CONFIG_PATH

    if not config_path.exists():
        raise FileNotFoundError(
            f"Config file not found: {config_path}. "
            "Copy config/config.yaml.example to config/config.yaml and adjust it."
        )

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    _config = Config(**data)
    return _config


def get_config() -> Config:
    """Get the loaded configuration."""
    if _config is None:
        return load_config()
    return _config


def reset_config() -> None:
    """Forget the cached configuration."""
    global _config
    _config = None
