"""Configuration file loading"""

import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional, Any, Union

import yaml

from ..api.exceptions import ConfigError
from ..constants import DEFAULT_CONFIG_FILE, ENV_CONFIG_PATH
from ..models.config import K6Config
from .validation_engine import ValidationEngine

logger = logging.getLogger(__name__)

_QUANTITY_SCHEMA = {
    "type": "object",
    "required": ["cpu", "memory"],
    "properties": {
        "cpu": {"type": "string"},
        "memory": {"type": "string"},
    },
}

CONFIG_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "properties": {
        "namespace": {"type": "string", "minLength": 1},
        "parallelism": {"type": "integer", "minimum": 1},
        "arguments": {"type": "array", "items": {"type": "string"}},
        "cleanup": {"type": "boolean"},
        "quiet": {"type": "boolean"},
        "separate": {"type": "boolean"},
        "runner": {
            "type": "object",
            "required": ["image"],
            "properties": {
                "image": {"type": "string"},
                "resources": {
                    "type": "object",
                    "required": ["limits", "requests"],
                    "properties": {
                        "limits": _QUANTITY_SCHEMA,
                        "requests": _QUANTITY_SCHEMA,
                    },
                },
            },
        },
        "prometheus": {
            "type": "object",
            "required": ["serverUrl"],
            "properties": {
                "serverUrl": {"type": "string"},
                "trendStats": {"type": "array", "items": {"type": "string"}},
            },
        },
    },
}


def resolve_config_path(path: Optional[Union[str, Path]] = None) -> Path:
    """Config path from the argument, ``K6CTL_CONFIG`` or the default name"""
    if path:
        return Path(path)
    return Path(os.environ.get(ENV_CONFIG_PATH, DEFAULT_CONFIG_FILE))


def _parse(config_path: Path, content: str) -> Any:
    if config_path.suffix in ('.yaml', '.yml'):
        try:
            return yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(
                f"Config file '{config_path}' exists but is not valid YAML: {e}"
            ) from e

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Config file '{config_path}' exists but is not valid JSON: {e}"
        ) from e


def load_config(path: Optional[Union[str, Path]] = None) -> K6Config:
    """
    Load and validate the k6ctl configuration

    A missing file is not an error: defaults are returned.

    Args:
        path: Config file path (JSON, or YAML by extension)

    Returns:
        K6Config with defaults filled in

    Raises:
        ConfigError: If the file cannot be parsed or fails validation
    """
    config_path = resolve_config_path(path)

    if not config_path.exists():
        logger.warning(f"Config file '{config_path}' doesn't exist, using default values.")
        return K6Config()

    with open(config_path, 'r', encoding='utf-8') as f:
        content = f.read()

    data = _parse(config_path, content)
    if data is None:
        data = {}

    result = ValidationEngine().validate_config(data, CONFIG_SCHEMA)
    if not result.is_valid:
        raise ConfigError(
            f"Invalid configuration in '{config_path}':\n"
            + "\n".join(f"- {e}" for e in result.errors)
        )

    logger.info(f"Loaded config from '{config_path}'")
    return K6Config.from_dict(data)
