"""Configuration for fzf_wrapped."""

import json
import logging
import os
from pathlib import Path

from pydantic import ValidationError

from fzf_wrapped.models import WrapperSettings

log = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".fzf_wrapped"
CONFIG_FILE = CONFIG_DIR / "config.json"
EXECUTABLE_ENV = "FZF_WRAPPED_EXECUTABLE"


def load_settings(path: Path | None = None) -> WrapperSettings:
    """Load settings from the config file, then apply environment overrides."""
    config_file = path if path is not None else CONFIG_FILE
    settings = WrapperSettings()
    if config_file.exists():
        try:
            data = json.loads(config_file.read_text(encoding="utf-8"))
            settings = WrapperSettings.model_validate(data)
            log.debug("loaded settings from %s", config_file)
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            log.warning("ignoring invalid config file %s: %s", config_file, e)

    override = os.environ.get(EXECUTABLE_ENV, "").strip()
    if override:
        settings = settings.model_copy(update={"executable": override})
    return settings


def get_executable() -> str:
    """Return the fzf executable name or path to launch."""
    return load_settings().executable
