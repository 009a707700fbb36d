"""Utility functions for k6ctl"""

from .file_utils import get_file_size, format_size
from .async_utils import run_async

__all__ = [
    "get_file_size",
    "format_size",
    "run_async",
]
