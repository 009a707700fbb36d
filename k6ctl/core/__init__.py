"""Core functionality for k6ctl"""

from .naming import (
    sanitize_name,
    is_valid_resource_name,
    build_archive_filename,
    config_map_name_for,
    MillisClock,
)
from .validation_engine import ValidationEngine, ValidationResult, EnvRules, DEFAULT_ENV_RULES
from .config_loader import load_config, resolve_config_path, CONFIG_SCHEMA
from .env_loader import load_and_validate_env

__all__ = [
    "sanitize_name",
    "is_valid_resource_name",
    "build_archive_filename",
    "config_map_name_for",
    "MillisClock",
    "ValidationEngine",
    "ValidationResult",
    "EnvRules",
    "DEFAULT_ENV_RULES",
    "load_config",
    "resolve_config_path",
    "CONFIG_SCHEMA",
    "load_and_validate_env",
]
