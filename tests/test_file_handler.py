import json
import os
import tempfile
import unittest

from config.settings import Settings
from models.state import ScenarioResult
from tools.file_handler import apply_profile, generate_summary, load_profiles, save_to_json


PROFILES_YAML = """
profiles:
  ci:
    headless: true
    wait_timeout: 20
    not_a_setting: ignored
  broken: just-a-string
"""


class TestProfiles(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.path = os.path.join(self.tmp.name, "profiles.yaml")
        with open(self.path, "w") as f:
            f.write(PROFILES_YAML)

    def test_load_profiles_keeps_known_settings_only(self):
        profiles = load_profiles(self.path)
        self.assertEqual(profiles, {"ci": {"headless": True, "wait_timeout": 20}})

    def test_missing_file_has_no_profiles(self):
        self.assertEqual(load_profiles(os.path.join(self.tmp.name, "nope.yaml")), {})

    def test_apply_profile_overrides_settings(self):
        config = Settings()
        config.headless = False
        apply_profile(config, "ci", load_profiles(self.path))
        self.assertTrue(config.headless)
        self.assertEqual(config.wait_timeout, 20)
        self.assertEqual(config.profile, "ci")

    def test_unknown_profile_raises(self):
        with self.assertRaises(KeyError):
            apply_profile(Settings(), "staging", load_profiles(self.path))

    def test_shipped_profiles_file_loads(self):
        profiles = load_profiles(Settings().profiles_path)
        self.assertIn("ci", profiles)
        self.assertTrue(profiles["ci"]["headless"])


class TestRunSummary(unittest.TestCase):
    def setUp(self):
        self.results = [
            ScenarioResult(name="Job details match the search result listing", status="PASSED", duration=12.5),
            ScenarioResult(
                name="Job description content is as advertised",
                status="FAILED",
                error="❌ Third paragraph sentence mismatch!\nTraceback ...",
            ),
        ]

    def test_save_to_json(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = save_to_json(self.results, tmp, "summary.json")
            with open(path) as f:
                data = json.load(f)
        self.assertEqual([r["status"] for r in data], ["PASSED", "FAILED"])
        self.assertEqual(data[0]["duration"], 12.5)

    def test_generate_summary_lists_failures(self):
        summary = generate_summary(self.results)
        self.assertIn("Scenarios run: 2", summary)
        self.assertIn("- FAILED: 1", summary)
        self.assertIn("Job description content is as advertised (FAILED)", summary)
        self.assertIn("❌ Third paragraph sentence mismatch!", summary)
        self.assertNotIn("Traceback", summary)

    def test_generate_summary_empty(self):
        self.assertEqual(generate_summary([]), "No scenarios were run.")


if __name__ == "__main__":
    unittest.main()
