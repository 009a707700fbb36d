# k6ctl/api/__init__.py
"""API layer for k6ctl"""

from .archiver import Archiver, archive, remove_archive
from .publisher import Publisher, publish, retract, build_config_map
from .exceptions import (
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

__all__ = [
    # Main classes
    "Archiver",
    "Publisher",

    # Convenience functions
    "archive",
    "remove_archive",
    "publish",
    "retract",
    "build_config_map",

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
]
