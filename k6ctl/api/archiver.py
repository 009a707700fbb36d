"""Archiver API for script packaging operations"""

import logging
from pathlib import Path
from typing import Optional, Union

from ..core.naming import MillisClock, build_archive_filename
from ..models import ArchiveResult
from ..tools import PackagingTool, K6Tool
from .exceptions import (
    ScriptNotFoundError,
    OutputDirectoryNotFoundError,
    ToolNotInstalledError,
    ArchiveCreationFailedError,
)

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class Archiver:
    """Archiver class for bundling k6 scripts into portable archives"""

    def __init__(self,
                 tool: Optional[PackagingTool] = None,
                 clock: Optional[MillisClock] = None):
        """
        Initialize archiver

        Args:
            tool: Packaging tool, ``k6`` by default
            clock: Millisecond clock used for archive names
        """
        self.tool = tool or K6Tool()
        self.clock = clock

    async def archive(self,
                      script_path: PathLike,
                      output_directory: Optional[PathLike] = None) -> ArchiveResult:
        """
        Archive a script with all of its dependencies

        Args:
            script_path: Source script path
            output_directory: Directory for the archive, current directory if omitted

        Returns:
            ArchiveResult: Result pointing at an existing archive file

        Raises:
            ScriptNotFoundError: If the script does not exist
            OutputDirectoryNotFoundError: If the output directory does not exist
            ToolNotInstalledError: If the packaging tool cannot be invoked
            ArchiveCreationFailedError: If the tool failed or produced no file
        """
        script = Path(script_path)
        if not script.is_file():
            raise ScriptNotFoundError(str(script_path))

        if output_directory is not None:
            output_dir = Path(output_directory)
            if not output_dir.is_dir():
                raise OutputDirectoryNotFoundError(str(output_directory))
        else:
            output_dir = Path(".")

        if not await self.tool.probe():
            raise ToolNotInstalledError(self.tool.name)

        archive_path = output_dir / build_archive_filename(str(script), clock=self.clock)

        try:
            output = await self.tool.archive(script.resolve(), archive_path)
        except OSError as e:
            raise ArchiveCreationFailedError(str(archive_path), str(e)) from e

        if not output.success or not archive_path.is_file():
            raise ArchiveCreationFailedError(str(archive_path), output.stderr.strip())

        logger.debug(f"Archive created at: {archive_path}")

        return ArchiveResult(
            archive_path=str(archive_path),
            script_path=str(script_path)
        )


def remove_archive(archive_result: ArchiveResult) -> bool:
    """
    Delete the archive file behind a result

    Args:
        archive_result: Result of a previous archive call

    Returns:
        True if a file was removed, False if it was already gone
    """
    try:
        Path(archive_result.archive_path).unlink()
    except FileNotFoundError:
        return False

    logger.debug(f"Removed archive: {archive_result.archive_path}")
    return True


# Convenience function
async def archive(script_path: PathLike,
                  output_directory: Optional[PathLike] = None,
                  tool: Optional[PackagingTool] = None) -> ArchiveResult:
    """
    Archive a script (convenience function)

    Args:
        script_path: Source script path
        output_directory: Directory for the archive
        tool: Packaging tool override

    Returns:
        ArchiveResult: Archiving result
    """
    archiver = Archiver(tool)
    return await archiver.archive(script_path, output_directory)
