"""Result models for operations"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Any


@dataclass(frozen=True)
class CapturedOutput:
    """Captured output of one packaging tool invocation"""

    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def success(self) -> bool:
        """Check if the tool exited successfully"""
        return self.returncode == 0


@dataclass(frozen=True)
class ArchiveResult:
    """Result of an archive operation

    The archive file exists on disk when the result is handed out.
    """

    archive_path: str
    script_path: str

    @property
    def archive_filename(self) -> str:
        return Path(self.archive_path).name

    @property
    def script_filename(self) -> str:
        return Path(self.script_path).name

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "archive_path": self.archive_path,
            "archive_filename": self.archive_filename,
            "script_path": self.script_path,
            "script_filename": self.script_filename,
        }


@dataclass(frozen=True)
class ConfigMapResult:
    """Result of a publish operation"""

    namespace: str
    config_map_name: str
    archive_path: str

    @property
    def archive_filename(self) -> str:
        return Path(self.archive_path).name

    def script_reference(self) -> Dict[str, str]:
        """Reference a TestRun uses to mount the published script"""
        return {
            "name": self.config_map_name,
            "file": self.archive_filename,
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "namespace": self.namespace,
            "config_map_name": self.config_map_name,
            "archive_path": self.archive_path,
            "archive_filename": self.archive_filename,
        }
