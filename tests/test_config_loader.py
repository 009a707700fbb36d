import json
import os
import shutil
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from k6ctl.api.exceptions import ConfigError
from k6ctl.constants import DEFAULT_RUNNER_IMAGE, DEFAULT_TREND_STATS, ENV_CONFIG_PATH
from k6ctl.core import load_config, resolve_config_path


class TestLoadConfig(unittest.TestCase):
    def setUp(self):
        self.temp_dir = Path(tempfile.mkdtemp())

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    def write(self, name, content):
        path = self.temp_dir / name
        path.write_text(content, encoding="utf-8")
        return path

    def test_missing_file_uses_defaults(self):
        with self.assertLogs("k6ctl.core.config_loader", level="WARNING"):
            config = load_config(self.temp_dir / "k6ctl.config.json")

        self.assertEqual(config.namespace, "default")
        self.assertEqual(config.parallelism, 1)
        self.assertTrue(config.cleanup)
        self.assertEqual(config.runner.image, DEFAULT_RUNNER_IMAGE)
        self.assertIsNone(config.prometheus)

    def test_full_json(self):
        path = self.write("k6ctl.config.json", json.dumps({
            "namespace": "load-tests",
            "parallelism": 4,
            "arguments": ["--tag", "team=perf"],
            "cleanup": False,
            "runner": {
                "image": "grafana/k6:0.50.0",
                "resources": {
                    "limits": {"cpu": "1", "memory": "1Gi"},
                    "requests": {"cpu": "500m", "memory": "512Mi"},
                },
            },
            "prometheus": {"serverUrl": "http://prometheus:9090/api/v1/write"},
        }))

        config = load_config(path)

        self.assertEqual(config.namespace, "load-tests")
        self.assertEqual(config.parallelism, 4)
        self.assertEqual(config.arguments, ["--tag", "team=perf"])
        self.assertFalse(config.cleanup)
        self.assertEqual(config.runner.resources.requests.cpu, "500m")
        self.assertEqual(config.prometheus.trend_stats, DEFAULT_TREND_STATS)
        self.assertEqual(config.to_dict()["prometheus"]["serverUrl"], "http://prometheus:9090/api/v1/write")

    def test_yaml(self):
        path = self.write("k6ctl.config.yaml", "namespace: perf\nparallelism: 2\n")
        config = load_config(path)
        self.assertEqual(config.namespace, "perf")
        self.assertEqual(config.parallelism, 2)

    def test_empty_yaml(self):
        path = self.write("k6ctl.config.yml", "")
        self.assertEqual(load_config(path).namespace, "default")

    def test_invalid_json(self):
        path = self.write("k6ctl.config.json", "{not json")
        with self.assertRaises(ConfigError) as cm:
            load_config(path)
        self.assertIn("not valid JSON", str(cm.exception))

    def test_schema_errors_are_all_reported(self):
        path = self.write("k6ctl.config.json", json.dumps({
            "parallelism": 0,
            "cleanup": "yes",
        }))

        with self.assertRaises(ConfigError) as cm:
            load_config(path)

        message = str(cm.exception)
        self.assertIn("parallelism", message)
        self.assertIn("cleanup", message)
        self.assertIn(str(path), message)

    def test_env_override(self):
        path = self.write("custom.json", json.dumps({"namespace": "from-env"}))
        with patch.dict(os.environ, {ENV_CONFIG_PATH: str(path)}):
            self.assertEqual(resolve_config_path(), path)
            self.assertEqual(load_config().namespace, "from-env")

    def test_argument_wins_over_env(self):
        with patch.dict(os.environ, {ENV_CONFIG_PATH: "ignored.json"}):
            self.assertEqual(resolve_config_path("given.json"), Path("given.json"))


if __name__ == "__main__":
    unittest.main()
