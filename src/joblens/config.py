"""Viewer settings persisted as TOML in the user config directory."""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path

import tomli_w
from platformdirs import user_config_dir
from pydantic import ValidationError

from joblens.models import AppConfig

logger = logging.getLogger(__name__)

CONFIG_FILE = "config.toml"


def get_config_dir() -> Path:
    """Directory holding the config file; JOBLENS_CONFIG_DIR wins over the platform default."""
    if override := os.environ.get("JOBLENS_CONFIG_DIR"):
        return Path(override)
    return Path(user_config_dir("joblens"))


def config_path() -> Path:
    return get_config_dir() / CONFIG_FILE


def load_config() -> AppConfig:
    """Read the viewer settings.

    A missing file gives the defaults. A file that cannot be read, is not
    valid TOML, or holds values the model rejects is logged and ignored, so a
    broken config never keeps the viewer from opening. Unknown keys are dropped.
    """
    path = config_path()
    try:
        raw = path.read_bytes()
    except FileNotFoundError:
        return AppConfig()
    except OSError:
        logger.warning("Cannot read config %s, using defaults", path, exc_info=True)
        return AppConfig()

    try:
        data = tomllib.loads(raw.decode())
    except (UnicodeDecodeError, tomllib.TOMLDecodeError):
        logger.warning("Config %s is not valid TOML, using defaults", path, exc_info=True)
        return AppConfig()

    try:
        return AppConfig.model_validate(data)
    except ValidationError as exc:
        logger.warning("Config %s has invalid settings, using defaults: %s", path, exc)
        return AppConfig()


def save_config(config: AppConfig) -> Path:
    """Write the settings, creating the config directory if needed. Returns the file written."""
    path = config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(tomli_w.dumps(config.model_dump(mode="json")))
    return path
