# k6ctl/models/__init__.py
"""Data models for k6ctl"""

from .result import ArchiveResult, ConfigMapResult, CapturedOutput
from .config import (
    K6Config,
    RunnerConfig,
    ResourcesConfig,
    ResourceQuantity,
    PrometheusConfig,
)

__all__ = [
    # Result models
    "ArchiveResult",
    "ConfigMapResult",
    "CapturedOutput",

    # Config models
    "K6Config",
    "RunnerConfig",
    "ResourcesConfig",
    "ResourceQuantity",
    "PrometheusConfig",
]
