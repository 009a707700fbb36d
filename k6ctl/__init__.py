"""k6ctl - Package k6 scripts and publish them to Kubernetes.

This tool archives a k6 load-test script with all of its dependencies and
stores the archive as a ConfigMap that the k6-operator can mount.
"""

from .__version__ import __version__, __version_info__, __license__

# Core API
from .api.archiver import Archiver, archive, remove_archive
from .api.publisher import Publisher, publish, retract

# Data models
from .models.result import ArchiveResult, ConfigMapResult, CapturedOutput
from .models.config import K6Config

# Collaborator interfaces
from .tools import PackagingTool, K6Tool
from .cluster import ClusterClient, KubernetesClusterClient

# Exceptions
from .api.exceptions import (
    K6CtlError,
    ArchiveError,
    ScriptNotFoundError,
    OutputDirectoryNotFoundError,
    ToolNotInstalledError,
    ArchiveCreationFailedError,
    PublishError,
    ArchiveNotFoundError,
    ArchiveTooLargeError,
    PublishFailedError,
    RetractFailedError,
    ConfigError,
    EnvFileError,
)

# Utility functions
from .core import sanitize_name, load_config, load_and_validate_env

__all__ = [
    # Version information
    "__version__",
    "__version_info__",
    "__license__",

    # Main classes
    "Archiver",
    "Publisher",

    # Core API functions
    "archive",
    "remove_archive",
    "publish",
    "retract",

    # Data models
    "ArchiveResult",
    "ConfigMapResult",
    "CapturedOutput",
    "K6Config",

    # Collaborators
    "PackagingTool",
    "K6Tool",
    "ClusterClient",
    "KubernetesClusterClient",

    # Exceptions
    "K6CtlError",
    "ArchiveError",
    "ScriptNotFoundError",
    "OutputDirectoryNotFoundError",
    "ToolNotInstalledError",
    "ArchiveCreationFailedError",
    "PublishError",
    "ArchiveNotFoundError",
    "ArchiveTooLargeError",
    "PublishFailedError",
    "RetractFailedError",
    "ConfigError",
    "EnvFileError",

    # Utility functions
    "sanitize_name",
    "load_config",
    "load_and_validate_env",
]
