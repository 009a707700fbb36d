"""k6 CLI packaging tool"""

import asyncio
import logging
import shutil
from pathlib import Path
from typing import List, Optional

from .base import PackagingTool
from ..constants import K6_BINARY
from ..models.result import CapturedOutput

logger = logging.getLogger(__name__)


class K6Tool(PackagingTool):
    """Runs ``k6 archive`` as a subprocess"""

    name = K6_BINARY

    def __init__(self, binary: Optional[str] = None, verbose: bool = False):
        """
        Initialize k6 tool

        Args:
            binary: k6 executable name or path
            verbose: Pass ``-v`` to ``k6 archive``
        """
        self.binary = binary or K6_BINARY
        self.verbose = verbose

    def build_archive_command(self, source: Path, destination: Path) -> List[str]:
        """Command line for archiving ``source`` into ``destination``"""
        cmd = [self.binary, "archive"]
        if self.verbose:
            cmd.append("-v")
        cmd.extend(["-O", str(destination), str(source)])
        return cmd

    async def probe(self) -> bool:
        if shutil.which(self.binary) is None:
            logger.debug(f"{self.binary} not found on PATH")
            return False

        try:
            output = await self._run([self.binary, "version"])
        except OSError as e:
            logger.debug(f"{self.binary} version probe failed: {e}")
            return False

        logger.debug(f"{self.binary} version: {output.stdout.strip()}")
        return output.success

    async def archive(self, source: Path, destination: Path) -> CapturedOutput:
        cmd = self.build_archive_command(source, destination)
        logger.debug(f"Archiving script with command: {' '.join(cmd)}")

        output = await self._run(cmd)

        if output.stdout:
            logger.debug(f"k6 stdout: {output.stdout}")
        if output.stderr:
            logger.debug(f"k6 stderr: {output.stderr}")

        return output

    async def _run(self, cmd: List[str]) -> CapturedOutput:
        """Run a command and capture its output"""
        process = await asyncio.create_subprocess_exec(
            *cmd,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE
        )

        try:
            stdout, stderr = await process.communicate()
        except asyncio.CancelledError:
            if process.returncode is None:
                process.kill()
                await process.wait()
            raise

        return CapturedOutput(
            returncode=process.returncode,
            stdout=stdout.decode(errors="replace"),
            stderr=stderr.decode(errors="replace")
        )
