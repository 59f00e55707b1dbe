import io
import os
import tempfile
import unittest
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

from config.settings import Settings
from models.state import ScenarioResult
from features import environment
from tools.session_manager import SessionManager


def make_scenario(name: str, status: str) -> SimpleNamespace:
    return SimpleNamespace(
        name=name,
        status=SimpleNamespace(name=status),
        feature=SimpleNamespace(name="Careers job search"),
    )


@patch("features.environment.log_scenario_end")
@patch("features.environment.log_scenario_start")
class TestScenarioHooks(unittest.TestCase):
    def setUp(self):
        self.browser = MagicMock()
        self.context = SimpleNamespace(
            settings=Settings(),
            sessions=SessionManager(lambda: self.browser),
            results=[],
        )

    def test_scenario_gets_session_and_page_objects(self, mock_start, mock_end):
        scenario = make_scenario("Job details match", "passed")
        environment.before_scenario(self.context, scenario)

        self.assertIs(self.context.session, self.browser)
        self.assertIs(self.context.careers_page.session, self.browser)
        self.assertIs(self.context.job_detail_page.session, self.browser)
        mock_start.assert_called_once_with("Job details match")

    def test_failed_scenario_still_tears_down(self, mock_start, mock_end):
        scenario = make_scenario("Job details match", "failed")
        environment.before_scenario(self.context, scenario)
        self.context.scenario = scenario

        step = SimpleNamespace(
            status=SimpleNamespace(name="failed"),
            keyword="Then",
            name="the job title should match the result listing",
            error_message="❌ Job title mismatch!",
            exception=None,
        )
        with patch.object(environment.logger, "error") as mock_error:
            environment.after_step(self.context, step)
        mock_error.assert_called_once()

        environment.after_scenario(self.context, scenario)

        self.browser.close.assert_called_once()
        self.assertIsNone(self.context.sessions.get_current())
        mock_end.assert_called_once_with("Job details match", "FAILED")
        result = self.context.results[0]
        self.assertEqual(result.status, "FAILED")
        self.assertEqual(result.error, "❌ Job title mismatch!")

    def test_end_log_failure_is_reported_not_raised(self, mock_start, mock_end):
        mock_end.side_effect = RuntimeError("log sink exploded")
        scenario = make_scenario("Apply", "passed")
        environment.before_scenario(self.context, scenario)

        with patch("sys.stderr", new_callable=io.StringIO) as stderr:
            environment.after_scenario(self.context, scenario)

        self.browser.close.assert_called_once()
        self.assertIn("log sink exploded", stderr.getvalue())
        self.assertEqual(len(self.context.results), 1)
        self.assertEqual(self.context.results[0].status, "PASSED")


@patch("features.environment.shutdown_logging")
@patch("features.environment.log")
class TestAfterAll(unittest.TestCase):
    def test_writes_json_summary_and_html_report(self, mock_log, mock_shutdown):
        with tempfile.TemporaryDirectory() as tmp:
            context = SimpleNamespace(
                settings=Settings(output_dir=tmp),
                results=[ScenarioResult(name="Job details match", status="PASSED")],
            )
            with patch("builtins.print"):
                environment.after_all(context)

            names = sorted(os.listdir(tmp))
            self.assertEqual(len(names), 2)
            html_name, json_name = names
            self.assertTrue(json_name.startswith("run_summary_") and json_name.endswith(".json"))
            self.assertEqual(html_name, json_name[:-len(".json")] + ".html")
        mock_shutdown.assert_called_once()

    def test_no_results_writes_nothing(self, mock_log, mock_shutdown):
        with tempfile.TemporaryDirectory() as tmp:
            context = SimpleNamespace(settings=Settings(output_dir=tmp), results=[])
            environment.after_all(context)
            self.assertEqual(os.listdir(tmp), [])
        mock_shutdown.assert_called_once()


if __name__ == "__main__":
    unittest.main()
