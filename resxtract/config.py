"""
ResXtract Configuration

Loads extraction settings from built-in defaults, an optional JSON file and
environment variables (a ``.env`` file is honoured via python-dotenv).
"""

import copy
import json
import logging
import os
from pathlib import Path
from typing import Dict, Any, Optional, Union

from dotenv import load_dotenv

from .errors import ConfigError

logger = logging.getLogger(__name__)

# Tesseract language pack used for every recognition
OCR_LANGUAGE = "eng"

DEFAULT_CONFIG: Dict[str, Any] = {
    "pdf": {
        "min_text_length": 10,
        "render_scale": 2.0,
        "max_pages": 1000
    },
    "ocr": {
        "psm": "--psm 6",
        "timeout": 0,
        "max_workers": None,
        "share_engine": True
    }
}

ENV_PREFIX = "RESXTRACT"

# (section, key) -> parser for the matching RESXTRACT_<SECTION>_<KEY> variable
_ENV_PARSERS = {
    ("pdf", "min_text_length"): int,
    ("pdf", "render_scale"): float,
    ("pdf", "max_pages"): int,
    ("ocr", "psm"): str,
    ("ocr", "timeout"): float,
    ("ocr", "max_workers"): int,
    ("ocr", "share_engine"): lambda value: _parse_bool(value),
}


def _parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"not a boolean: {value}")


def load_config(config_path: Optional[Union[str, Path]] = None,
                env_file: Optional[str] = None,
                use_env: bool = True) -> Dict[str, Any]:
    """
    Build the extraction configuration.

    Args:
        config_path: Optional JSON file whose sections override the defaults
        env_file: Optional path to a .env file (default locations otherwise)
        use_env: Apply RESXTRACT_* environment overrides

    Returns:
        Nested configuration dictionary with ``pdf`` and ``ocr`` sections

    Raises:
        ConfigError: If the JSON file exists but cannot be parsed or is not an object
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    if config_path:
        config_path = Path(config_path)
        if config_path.exists():
            try:
                with open(config_path, 'r', encoding='utf-8') as f:
                    file_config = json.load(f)
            except (json.JSONDecodeError, OSError) as e:
                raise ConfigError(f"Invalid configuration file {config_path}: {e}") from e
            if not isinstance(file_config, dict):
                raise ConfigError(f"Invalid configuration file {config_path}: expected a JSON object")
            _merge(config, file_config)
            logger.info(f"Configuration loaded from {config_path}")
        else:
            logger.warning(f"Configuration file not found, using defaults: {config_path}")

    if use_env:
        if env_file:
            load_dotenv(env_file)
        else:
            load_dotenv()
        _apply_env_overrides(config)

    return config


def _merge(base: Dict[str, Any], overrides: Dict[str, Any]):
    """Merge known sections of ``overrides`` into ``base`` in place."""
    for section, values in overrides.items():
        if section in base and isinstance(values, dict):
            base[section].update(values)
        else:
            logger.warning(f"Ignoring unknown configuration section: {section}")


def _apply_env_overrides(config: Dict[str, Any]):
    for (section, key), parser in _ENV_PARSERS.items():
        env_key = f"{ENV_PREFIX}_{section.upper()}_{key.upper()}"
        raw = os.getenv(env_key)
        if raw is None or raw == "":
            continue
        try:
            config[section][key] = parser(raw)
            logger.debug(f"Configuration override from {env_key}: {config[section][key]!r}")
        except ValueError:
            logger.warning(f"Invalid value for {env_key}: {raw}")
