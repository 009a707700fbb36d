"""Packaging tool backends for k6ctl"""

from .base import PackagingTool
from .k6 import K6Tool

__all__ = [
    "PackagingTool",
    "K6Tool",
]
