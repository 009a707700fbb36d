# k6ctl/core/validation_engine.py
"""Validation engine for configuration, environment and naming checks"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Any, Pattern

import jsonschema

from ..constants import ENV_KEY_PATTERN, ENV_VALUE_PATTERN
from .naming import is_valid_resource_name


@dataclass
class ValidationResult:
    """Validation result container"""
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, message: str) -> None:
        """Add error message"""
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str) -> None:
        """Add warning message"""
        self.warnings.append(message)

    def merge(self, other: 'ValidationResult') -> None:
        """Merge another result into this one"""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        if not other.is_valid:
            self.is_valid = False

    def __str__(self) -> str:
        """String representation"""
        lines = []

        if self.errors:
            lines.append("Errors:")
            for error in self.errors:
                lines.append(f"  ✗ {error}")

        if self.warnings:
            lines.append("Warnings:")
            for warning in self.warnings:
                lines.append(f"  ⚠ {warning}")

        if self.is_valid and not self.errors and not self.warnings:
            lines.append("✓ All validations passed")

        return '\n'.join(lines)


@dataclass
class EnvRules:
    """Patterns an environment file must satisfy"""
    key_pattern: Pattern = ENV_KEY_PATTERN
    value_pattern: Pattern = ENV_VALUE_PATTERN


DEFAULT_ENV_RULES = EnvRules()


class ValidationEngine:
    """Execute various validation operations"""

    def validate_config(self, config: Any,
                        schema: Dict[str, Any]) -> ValidationResult:
        """
        Validate a configuration document against a JSON schema

        Every schema violation is reported, not just the first one.

        Args:
            config: Parsed configuration document
            schema: JSON schema

        Returns:
            ValidationResult
        """
        result = ValidationResult()

        validator = jsonschema.Draft7Validator(schema)
        for error in sorted(validator.iter_errors(config), key=lambda e: [str(p) for p in e.path]):
            location = ".".join(str(p) for p in error.path)
            if location:
                result.add_error(f"{location}: {error.message}")
            else:
                result.add_error(error.message)

        return result

    def validate_env_vars(self, env_vars: Dict[str, Optional[str]],
                          rules: EnvRules = DEFAULT_ENV_RULES) -> ValidationResult:
        """
        Validate parsed environment variables

        Args:
            env_vars: Variable names mapped to values (None for bare keys)
            rules: Key and value patterns

        Returns:
            ValidationResult
        """
        result = ValidationResult()

        for key, value in env_vars.items():
            if not rules.key_pattern.fullmatch(key):
                result.add_error(
                    f'Invalid name: "{key}" (does not match pattern {rules.key_pattern.pattern})'
                )
                continue

            if value is None or value == "":
                result.add_error(f'Variable "{key}" has no value')
                continue

            if not rules.value_pattern.fullmatch(value):
                result.add_error(f'Invalid value in "{key}" (contains disallowed characters)')

        return result

    def validate_resource_name(self, name: str) -> ValidationResult:
        """
        Validate a Kubernetes resource name

        Args:
            name: Resource name to validate

        Returns:
            ValidationResult
        """
        result = ValidationResult()

        if not name:
            result.add_error("Resource name cannot be empty")
            return result

        if not is_valid_resource_name(name):
            result.add_error(
                f"Invalid resource name: '{name}'. "
                "Must be lowercase alphanumeric, '-' or '.', "
                "start and end with an alphanumeric character"
            )

        return result
