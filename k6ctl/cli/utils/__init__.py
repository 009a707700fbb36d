"""CLI utility functions"""

from .output import (
    console,
    format_archive_result,
    format_publish_result,
    format_script_reference,
    format_env_vars,
    print_error,
    print_warning,
)

__all__ = [
    'console',
    'format_archive_result',
    'format_publish_result',
    'format_script_reference',
    'format_env_vars',
    'print_error',
    'print_warning',
]
