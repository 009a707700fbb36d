import shutil
import tempfile
import unittest
from pathlib import Path

from k6ctl.api import Archiver, remove_archive
from k6ctl.api.exceptions import (
    ArchiveCreationFailedError,
    OutputDirectoryNotFoundError,
    ScriptNotFoundError,
    ToolNotInstalledError,
)
from k6ctl.core.naming import MillisClock

from tests.fakes import FakeTool

SAMPLES_DIR = Path(__file__).parent / "samples"


class TestArchiver(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.temp_dir = Path(tempfile.mkdtemp())
        self.script = self.temp_dir / "k6_script_sample_1.js"
        shutil.copy(SAMPLES_DIR / "k6_script_sample_1.js", self.script)
        self.output_dir = self.temp_dir / "out"
        self.output_dir.mkdir()

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    async def test_archive_success(self):
        tool = FakeTool()
        archiver = Archiver(tool)

        result = await archiver.archive(self.script, self.output_dir)

        archive_path = Path(result.archive_path)
        self.assertTrue(archive_path.is_file())
        self.assertEqual(archive_path.parent, self.output_dir)
        self.assertRegex(result.archive_filename, r"^archive-k6-script-sample-1-[0-9]+\.tar$")
        self.assertEqual(result.script_path, str(self.script))
        self.assertEqual(result.script_filename, "k6_script_sample_1.js")

        source, destination = tool.archive_calls[0]
        self.assertTrue(source.is_absolute())
        self.assertEqual(destination, archive_path)

    async def test_archive_defaults_to_current_directory(self):
        archiver = Archiver(FakeTool())
        result = await archiver.archive(self.script)
        try:
            self.assertEqual(Path(result.archive_path).parent, Path("."))
        finally:
            remove_archive(result)

    async def test_repeated_archives_have_distinct_paths(self):
        archiver = Archiver(FakeTool(), clock=MillisClock())
        first = await archiver.archive(self.script, self.output_dir)
        second = await archiver.archive(self.script, self.output_dir)

        self.assertNotEqual(first.archive_path, second.archive_path)
        self.assertTrue(Path(first.archive_path).is_file())
        self.assertTrue(Path(second.archive_path).is_file())

    async def test_missing_script(self):
        tool = FakeTool(installed=False)
        archiver = Archiver(tool)

        with self.assertRaises(ScriptNotFoundError) as cm:
            await archiver.archive(self.temp_dir / "missing.js", self.temp_dir / "nope")

        self.assertIn("missing.js", str(cm.exception))
        # Script is checked before the output directory and the tool
        self.assertEqual(tool.probe_calls, 0)

    async def test_missing_output_directory(self):
        tool = FakeTool(installed=False)
        archiver = Archiver(tool)

        with self.assertRaises(OutputDirectoryNotFoundError):
            await archiver.archive(self.script, self.temp_dir / "nope")

        self.assertEqual(tool.probe_calls, 0)

    async def test_tool_not_installed(self):
        tool = FakeTool(installed=False)
        archiver = Archiver(tool)

        with self.assertRaises(ToolNotInstalledError):
            await archiver.archive(self.script, self.output_dir)

        self.assertEqual(tool.archive_calls, [])

    async def test_tool_failure_reports_stderr(self):
        archiver = Archiver(FakeTool(returncode=1, stderr="  could not resolve import\n", write_file=False))

        with self.assertRaises(ArchiveCreationFailedError) as cm:
            await archiver.archive(self.script, self.output_dir)

        self.assertEqual(cm.exception.stderr, "could not resolve import")
        self.assertIn("could not resolve import", str(cm.exception))
        self.assertEqual(list(self.output_dir.iterdir()), [])

    async def test_tool_succeeds_without_file(self):
        archiver = Archiver(FakeTool(write_file=False))

        with self.assertRaises(ArchiveCreationFailedError):
            await archiver.archive(self.script, self.output_dir)

    async def test_tool_cannot_be_started(self):
        error = FileNotFoundError(2, "No such file or directory", "k6")
        archiver = Archiver(FakeTool(spawn_error=error))

        with self.assertRaises(ArchiveCreationFailedError) as cm:
            await archiver.archive(self.script, self.output_dir)

        self.assertIs(cm.exception.__cause__, error)
        self.assertIn("No such file or directory", cm.exception.stderr)
        self.assertEqual(list(self.output_dir.iterdir()), [])

    async def test_remove_archive(self):
        result = await Archiver(FakeTool()).archive(self.script, self.output_dir)

        self.assertTrue(remove_archive(result))
        self.assertFalse(Path(result.archive_path).exists())
        self.assertFalse(remove_archive(result))


if __name__ == "__main__":
    unittest.main()
