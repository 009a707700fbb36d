# k6ctl/tools/base.py
"""Packaging tool abstract base class"""

from abc import ABC, abstractmethod
from pathlib import Path

from ..models.result import CapturedOutput


class PackagingTool(ABC):
    """Abstract base class for external script packaging tools"""

    name: str = "packaging tool"

    @abstractmethod
    async def probe(self) -> bool:
        """
        Check that the tool can be invoked

        Returns:
            True if the tool answered its version probe
        """
        pass

    @abstractmethod
    async def archive(self, source: Path, destination: Path) -> CapturedOutput:
        """
        Bundle a script and its dependencies into a single file

        Args:
            source: Script path
            destination: Archive file to produce

        Returns:
            Captured output of the invocation
        """
        pass
