"""Environment file loading and validation"""

import logging
from pathlib import Path
from typing import Dict, Union

from dotenv import dotenv_values

from ..api.exceptions import EnvFileError
from ..constants import DEFAULT_ENV_FILE
from .validation_engine import ValidationEngine, EnvRules, DEFAULT_ENV_RULES

logger = logging.getLogger(__name__)


def load_and_validate_env(env_file_path: Union[str, Path] = DEFAULT_ENV_FILE,
                          rules: EnvRules = DEFAULT_ENV_RULES) -> Dict[str, str]:
    """
    Read and validate a .env file

    Args:
        env_file_path: Path of the .env file, relative to the current directory
        rules: Key and value patterns

    Returns:
        Validated variables

    Raises:
        EnvFileError: If the file is missing, unreadable or has invalid entries
    """
    absolute_path = Path(env_file_path).resolve()

    if not absolute_path.is_file():
        raise EnvFileError(f".env file not found: {absolute_path}")

    try:
        env_vars = dotenv_values(absolute_path, interpolate=False)
    except (OSError, UnicodeDecodeError) as e:
        raise EnvFileError(f"Error reading .env file {absolute_path}: {e}") from e

    result = ValidationEngine().validate_env_vars(env_vars, rules)
    if not result.is_valid:
        raise EnvFileError(
            "Invalid environment variables:\n" + "\n".join(f"- {e}" for e in result.errors),
            result.errors
        )

    logger.debug(f"Loaded {len(env_vars)} variables from {absolute_path}")
    return dict(env_vars)
