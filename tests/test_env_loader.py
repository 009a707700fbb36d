import shutil
import tempfile
import unittest
from pathlib import Path

from k6ctl.api.exceptions import EnvFileError
from k6ctl.core import EnvRules, ValidationEngine, load_and_validate_env


class TestEnvLoader(unittest.TestCase):
    def setUp(self):
        self.temp_dir = Path(tempfile.mkdtemp())

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    def write_env(self, content):
        path = self.temp_dir / ".env"
        path.write_text(content, encoding="utf-8")
        return path

    def test_valid_file(self):
        path = self.write_env("BASE_URL=https://test.k6.io\nVUS=10\n# comment\nAPI_TOKEN='abc 123'\n")

        env_vars = load_and_validate_env(path)

        self.assertEqual(env_vars, {
            "BASE_URL": "https://test.k6.io",
            "VUS": "10",
            "API_TOKEN": "abc 123",
        })

    def test_missing_file(self):
        with self.assertRaises(EnvFileError) as cm:
            load_and_validate_env(self.temp_dir / "missing.env")
        self.assertIn("not found", str(cm.exception))

    def test_all_errors_reported(self):
        path = self.write_env("lower=1\nEMPTY=\nBAD_VALUE=café\nGOOD=ok\n")

        with self.assertRaises(EnvFileError) as cm:
            load_and_validate_env(path)

        errors = cm.exception.errors
        self.assertEqual(len(errors), 3)
        self.assertTrue(any('"lower"' in e for e in errors))
        self.assertTrue(any('"EMPTY" has no value' in e for e in errors))
        self.assertTrue(any('"BAD_VALUE"' in e for e in errors))

    def test_value_with_trailing_newline(self):
        path = self.write_env('TOKEN="abc\\n"\n')

        with self.assertRaises(EnvFileError) as cm:
            load_and_validate_env(path)

        self.assertIn('"TOKEN"', cm.exception.errors[0])

    def test_bare_key_has_no_value(self):
        path = self.write_env("BARE\n")
        with self.assertRaises(EnvFileError):
            load_and_validate_env(path)

    def test_values_are_not_interpolated(self):
        path = self.write_env("HOST=example.com\nURL=https://${HOST}/\n")
        self.assertEqual(load_and_validate_env(path)["URL"], "https://${HOST}/")


class TestValidationEngine(unittest.TestCase):
    def test_custom_rules(self):
        import re
        rules = EnvRules(key_pattern=re.compile(r"^K6_[A-Z_]+$"))

        result = ValidationEngine().validate_env_vars({"K6_OUT": "json", "OTHER": "x"}, rules)

        self.assertFalse(result.is_valid)
        self.assertEqual(len(result.errors), 1)
        self.assertIn("OTHER", result.errors[0])

    def test_resource_name(self):
        engine = ValidationEngine()
        self.assertTrue(engine.validate_resource_name("archive-a-1").is_valid)
        self.assertFalse(engine.validate_resource_name("").is_valid)
        self.assertFalse(engine.validate_resource_name("Archive_A").is_valid)

    def test_result_merge(self):
        engine = ValidationEngine()
        result = engine.validate_resource_name("ok")
        result.merge(engine.validate_resource_name("-bad-"))
        self.assertFalse(result.is_valid)
        self.assertIn("-bad-", str(result))


if __name__ == "__main__":
    unittest.main()
