# k6ctl/core/naming.py
"""Naming helpers shared by the archiver and the publisher

Archive filenames and ConfigMap names go through the same sanitization so
that a ConfigMap name can always be derived back from its archive.
"""

import re
import threading
import time
from pathlib import Path
from typing import Optional

from ..constants import (
    ARCHIVE_PREFIX,
    ARCHIVE_EXTENSION,
    ARCHIVE_FILE_PATTERN,
    RESOURCE_NAME_PATTERN,
    MAX_RESOURCE_NAME_LENGTH,
)

_DISALLOWED_CHARS = re.compile(r"[^a-z0-9.-]")
_EDGE_NON_ALNUM = re.compile(r"^[^a-z0-9]+|[^a-z0-9]+$")
_HYPHEN_RUNS = re.compile(r"-+")
_DOT_RUNS = re.compile(r"\.+")
_EDGE_SEPARATORS = re.compile(r"^[.-]+|[.-]+$")

# Leaves room for the prefix, the millisecond suffix and the extension
MAX_SCRIPT_NAME_LENGTH = 200
FALLBACK_SCRIPT_NAME = "script"


def sanitize_name(text: str) -> str:
    """
    Turn an arbitrary string into a Kubernetes resource-safe name

    The transform is idempotent. The result only contains ``[a-z0-9.-]``,
    never starts or ends with ``-`` or ``.`` and never contains ``--`` or
    ``..``. It may be empty.

    Args:
        text: Any string

    Returns:
        Sanitized name
    """
    sanitized = text.lower()
    sanitized = sanitized.replace("_", "-")
    sanitized = _DISALLOWED_CHARS.sub("-", sanitized)
    sanitized = _EDGE_NON_ALNUM.sub("", sanitized)
    sanitized = _HYPHEN_RUNS.sub("-", sanitized)
    sanitized = _DOT_RUNS.sub(".", sanitized)
    sanitized = _EDGE_SEPARATORS.sub("", sanitized)
    return sanitized


def is_valid_resource_name(name: str) -> bool:
    """Check a name against Kubernetes object naming rules"""
    if not name or len(name) > MAX_RESOURCE_NAME_LENGTH:
        return False
    if "--" in name or ".." in name:
        return False
    return RESOURCE_NAME_PATTERN.fullmatch(name) is not None


class MillisClock:
    """Epoch-millisecond source that never hands out the same value twice"""

    def __init__(self):
        self._last = 0
        self._lock = threading.Lock()

    def next(self) -> int:
        with self._lock:
            millis = int(time.time() * 1000)
            if millis <= self._last:
                millis = self._last + 1
            self._last = millis
            return millis


_default_clock = MillisClock()


def script_stem(script_path: str) -> str:
    """Sanitized script base name without extension, never empty"""
    name = sanitize_name(Path(script_path).stem)[:MAX_SCRIPT_NAME_LENGTH]
    name = _EDGE_SEPARATORS.sub("", name)
    return name or FALLBACK_SCRIPT_NAME


def build_archive_filename(script_path: str,
                           millis: Optional[int] = None,
                           clock: Optional[MillisClock] = None) -> str:
    """
    Build the archive filename for a script

    Args:
        script_path: Source script path
        millis: Explicit epoch-millisecond suffix
        clock: Clock used when no suffix is given

    Returns:
        ``archive-<sanitized-name>-<epoch-millis>.tar``
    """
    if millis is None:
        millis = (clock or _default_clock).next()

    return ARCHIVE_FILE_PATTERN.format(
        prefix=ARCHIVE_PREFIX,
        name=script_stem(script_path),
        millis=millis,
        ext=ARCHIVE_EXTENSION,
    )


def config_map_name_for(archive_filename: str) -> str:
    """Derive the ConfigMap name from an archive filename"""
    return sanitize_name(Path(archive_filename).stem)
