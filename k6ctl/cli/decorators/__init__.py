"""CLI decorators"""

from .errors import handle_errors

__all__ = [
    "handle_errors",
]
