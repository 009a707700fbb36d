"""Command line interface for k6ctl"""

from .main import cli, main

__all__ = ["cli", "main"]
