# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/clientcron/config/loader.py

import logging
import os
import yaml
from pathlib import Path
from pydantic import ValidationError

from ..errors import ConfigurationError
from .models import ClientCronConfig

log = logging.getLogger("clientcron")


def _deep_merge(base: dict, override: dict) -> dict:
    """
    Recursively merge *override* into *base* (mutates base).
    Only overwrites when the override value is non-empty.
    """
    for key, value in override.items():
        if (
            key in base
            and isinstance(base[key], dict)
            and isinstance(value, dict)
        ):
            _deep_merge(base[key], value)
        else:
            if value not in (None, ""):
                base[key] = value
    return base


def _find_overrides_file(config_path: Path) -> Path | None:
    """
    Locate overrides.yaml using this priority:

    1. CLIENTCRON_OVERRIDES_FILE environment variable (explicit override)
    2. overrides.yaml in the same directory as the config
    """
    env = os.environ.get("CLIENTCRON_OVERRIDES_FILE")
    if env:
        p = Path(env)
        if p.is_file():
            return p
        log.warning("CLIENTCRON_OVERRIDES_FILE=%s does not exist, skipping", env)
        return None

    p = config_path.parent / "overrides.yaml"
    if p.is_file():
        return p

    return None


def _load_yaml(path: Path) -> dict:
    """Load a YAML file, expanding ${ENV_VAR} references."""
    raw = path.read_text()
    expanded = os.path.expandvars(raw)
    try:
        data = yaml.safe_load(expanded)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"{path}: invalid YAML: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path}: expected a mapping at top level")
    return data


def load_config(path: str | Path) -> ClientCronConfig:
    """
    Load and validate a clientcron YAML config.

    Per-node overrides are deep-merged before validation. The override
    file is found through ``CLIENTCRON_OVERRIDES_FILE`` or as
    ``overrides.yaml`` next to the config. ``${ENV_VAR}`` placeholders in
    either file are resolved at load time.
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigurationError(f"config file not found: {path}")
    data = _load_yaml(path)

    overrides_path = _find_overrides_file(path)
    if overrides_path:
        log.debug("Merging overrides from %s", overrides_path)
        _deep_merge(data, _load_yaml(overrides_path))
    else:
        log.debug("No overrides.yaml found, using config as is")

    try:
        return ClientCronConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"{path}: {e}") from e
