"""
Configuration loader.

Reads an optional YAML file and applies TOKENKIT_* environment overrides.
"""

import os
from collections.abc import Mapping
from pathlib import Path

import yaml
from pydantic import ValidationError

from tokenkit.config.models import TokenConfig

ENV_PREFIX = "TOKENKIT_"
ENV_FIELDS = ("platform", "overlay_dir", "log_level")


def load_config(path: Path | None = None, env: Mapping[str, str] | None = None) -> TokenConfig:
    """
    Load the token configuration.

    File values are read first, then TOKENKIT_PLATFORM, TOKENKIT_OVERLAY_DIR
    and TOKENKIT_LOG_LEVEL override them.
    Raises FileNotFoundError if an explicit path is missing.
    Raises ValueError if the YAML or schema is invalid.
    """
    if env is None:
        env = os.environ

    data: dict = {}
    if path is not None:
        if not path.exists():
            raise FileNotFoundError(f"Config file not found at: {path}")
        try:
            loaded = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML syntax in config file: {e}") from e
        if loaded is not None:
            if not isinstance(loaded, dict):
                raise ValueError(f"Config file {path} must contain a mapping")
            data.update(loaded)

    for field in ENV_FIELDS:
        value = env.get(f"{ENV_PREFIX}{field.upper()}")
        if value:
            data[field] = value

    try:
        return TokenConfig.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Config validation failed:\n{e}") from e
