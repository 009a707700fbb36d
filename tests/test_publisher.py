import base64
import shutil
import tempfile
import unittest
from pathlib import Path

from k6ctl.api import Publisher, build_config_map, publish
from k6ctl.api.exceptions import (
    ArchiveNotFoundError,
    ArchiveTooLargeError,
    PublishError,
    PublishFailedError,
    RetractFailedError,
)
from k6ctl.cluster import ClusterClientError
from k6ctl.constants import MAX_CONFIGMAP_PAYLOAD_SIZE
from k6ctl.models import ArchiveResult

from tests.fakes import FakeClusterClient

NAMESPACE = "load-tests"


class TestBuildConfigMap(unittest.TestCase):
    def test_shape(self):
        body = build_config_map("archive-a-1", NAMESPACE, "archive-a-1.tar", "cGF5bG9hZA==")

        self.assertEqual(body["apiVersion"], "v1")
        self.assertEqual(body["kind"], "ConfigMap")
        self.assertEqual(body["metadata"], {"name": "archive-a-1", "namespace": NAMESPACE})
        self.assertEqual(body["binaryData"], {"archive-a-1.tar": "cGF5bG9hZA=="})
        self.assertNotIn("data", body)


class TestPublisher(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.temp_dir = Path(tempfile.mkdtemp())
        self.client = FakeClusterClient()
        self.publisher = Publisher(self.client)

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    def make_archive(self, name="archive-my-test-1700000000000.tar", content=b"\x00k6 archive\xff"):
        path = self.temp_dir / name
        path.write_bytes(content)
        return ArchiveResult(archive_path=str(path), script_path="my_test.js")

    async def test_publish_stores_base64_payload(self):
        archive_result = self.make_archive()

        result = await self.publisher.publish(archive_result, NAMESPACE)

        self.assertEqual(result.namespace, NAMESPACE)
        self.assertEqual(result.config_map_name, "archive-my-test-1700000000000")
        self.assertEqual(result.archive_path, archive_result.archive_path)
        self.assertEqual(result.script_reference(), {
            "name": "archive-my-test-1700000000000",
            "file": "archive-my-test-1700000000000.tar",
        })

        stored = self.client.config_maps[(NAMESPACE, "archive-my-test-1700000000000")]
        payload = stored["binaryData"]["archive-my-test-1700000000000.tar"]
        self.assertEqual(base64.b64decode(payload), b"\x00k6 archive\xff")

    async def test_publish_retract_exists(self):
        archive_result = self.make_archive()
        result = await self.publisher.publish(archive_result, NAMESPACE)

        self.assertTrue(await self.publisher.exists(result.config_map_name, NAMESPACE))
        self.assertFalse(await self.publisher.exists(result.config_map_name, "other"))

        await self.publisher.retract(result.config_map_name, NAMESPACE)

        self.assertFalse(await self.publisher.exists(result.config_map_name, NAMESPACE))

    async def test_publish_does_not_remove_archive(self):
        archive_result = self.make_archive()
        await self.publisher.publish(archive_result, NAMESPACE)
        self.assertTrue(Path(archive_result.archive_path).is_file())

    async def test_archive_at_limit_is_accepted(self):
        archive_result = self.make_archive(content=b"x" * MAX_CONFIGMAP_PAYLOAD_SIZE)
        await self.publisher.publish(archive_result, NAMESPACE)
        self.assertEqual(len(self.client.config_maps), 1)

    async def test_archive_too_large(self):
        archive_result = self.make_archive(content=b"x" * (MAX_CONFIGMAP_PAYLOAD_SIZE + 1))

        with self.assertRaises(ArchiveTooLargeError) as cm:
            await self.publisher.publish(archive_result, NAMESPACE)

        self.assertEqual(cm.exception.size, MAX_CONFIGMAP_PAYLOAD_SIZE + 1)
        self.assertEqual(cm.exception.limit, MAX_CONFIGMAP_PAYLOAD_SIZE)
        self.assertEqual(self.client.calls, [])

    async def test_archive_missing(self):
        archive_result = ArchiveResult(
            archive_path=str(self.temp_dir / "archive-gone-1.tar"),
            script_path="gone.js"
        )

        with self.assertRaises(ArchiveNotFoundError):
            await self.publisher.publish(archive_result, NAMESPACE)

        self.assertEqual(self.client.calls, [])

    async def test_duplicate_name_fails(self):
        archive_result = self.make_archive()
        await self.publisher.publish(archive_result, NAMESPACE)

        with self.assertRaises(PublishFailedError) as cm:
            await self.publisher.publish(archive_result, NAMESPACE)

        self.assertEqual(cm.exception.config_map_name, "archive-my-test-1700000000000")
        self.assertEqual(cm.exception.namespace, NAMESPACE)
        self.assertIn("already exists", cm.exception.reason)

    async def test_invalid_derived_name(self):
        archive_result = self.make_archive(name="___.tar")

        with self.assertRaises(PublishFailedError):
            await self.publisher.publish(archive_result, NAMESPACE)

        self.assertEqual(self.client.calls, [])

    async def test_cluster_failure(self):
        client = FakeClusterClient(fail_with=ClusterClientError("connection refused"))
        publisher = Publisher(client)

        with self.assertRaises(PublishFailedError) as cm:
            await publisher.publish(self.make_archive(), NAMESPACE)
        self.assertIn("connection refused", str(cm.exception))

        with self.assertRaises(RetractFailedError):
            await publisher.retract("archive-my-test-1700000000000", NAMESPACE)

        with self.assertRaises(PublishError):
            await publisher.exists("archive-my-test-1700000000000", NAMESPACE)

    async def test_retract_missing(self):
        with self.assertRaises(RetractFailedError) as cm:
            await self.publisher.retract("archive-nothing-1", NAMESPACE)

        self.assertIn("archive-nothing-1", str(cm.exception))

    async def test_convenience_function(self):
        result = await publish(self.make_archive(), NAMESPACE, cluster_client=self.client)
        self.assertIn((NAMESPACE, result.config_map_name), self.client.config_maps)


if __name__ == "__main__":
    unittest.main()
