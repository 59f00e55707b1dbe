import unittest
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

from features.steps import careers_steps
from models.errors import AssertionMismatch
from models.job import JobDetailRecord, JobDetailView, JobListingSummary, ParsedDescription
from pages.careers_page import ApplyOutcome, ApplyResult


def make_job(**detail_overrides) -> JobDetailView:
    detail = dict(
        title="QA Test Automation Developer",
        identifier="2516873",
        location="Durham, North Carolina, United States",
        description_markup="",
    )
    detail.update(detail_overrides)
    return JobDetailView(
        summary=JobListingSummary(
            title="QA Test Automation Developer",
            location="Durham, North Carolina, United States",
            identifier="2516873",
        ),
        detail=JobDetailRecord(**detail),
        description=ParsedDescription(
            third_paragraph_first_sentence="The right candidate for this role will participate in the test automation technology development.",
            second_bullets_by_header={
                "main responsibilities include": "Develop and maintain test automation frameworks.",
            },
        ),
    )


def make_context(job=None, text=None) -> SimpleNamespace:
    return SimpleNamespace(
        careers_page=MagicMock(),
        job_detail_page=MagicMock(),
        job=job,
        text=text,
    )


@patch("features.steps.careers_steps.log")
class TestNavigationSteps(unittest.TestCase):
    def test_navigation_steps_delegate_to_careers_page(self, mock_log):
        context = make_context()

        careers_steps.step_open_home_page(context)
        careers_steps.step_navigate_to_careers(context)
        careers_steps.step_search_for_job(context, "QA Test Automation Developer")

        context.careers_page.go_to_home_page.assert_called_once()
        context.careers_page.navigate_to_careers.assert_called_once()
        context.careers_page.search_for_job.assert_called_once_with("QA Test Automation Developer")
        mock_log.assert_any_call("✅ Searched for job: QA Test Automation Developer")

    def test_first_result_is_stored_on_context(self, mock_log):
        context = make_context()
        context.job_detail_page.open_first_result.return_value = make_job()

        careers_steps.step_click_first_job_result(context)

        self.assertEqual(context.job, make_job())

    def test_apply_now_not_found_does_not_fail_the_step(self, mock_log):
        context = make_context()
        context.careers_page.click_apply_now.return_value = ApplyResult(
            outcome=ApplyOutcome.NOT_FOUND, error="no link"
        )

        careers_steps.step_click_apply_now(context)

        self.assertEqual(context.apply_result.outcome, ApplyOutcome.NOT_FOUND)
        mock_log.assert_called_once_with("⚠️  Apply Now skipped (not_found): no link")

    def test_return_to_careers(self, mock_log):
        context = make_context()
        context.careers_page.return_to_careers_page.return_value = True
        careers_steps.step_return_to_careers(context)
        mock_log.assert_called_once_with("✅ Returned to Careers page.")


@patch("features.steps.careers_steps.log")
class TestValidationSteps(unittest.TestCase):
    def test_matching_metadata_passes(self, mock_log):
        context = make_context(job=make_job())
        careers_steps.step_validate_job_title(context)
        careers_steps.step_validate_job_location(context)
        careers_steps.step_validate_job_id(context)
        careers_steps.step_validate_all_metadata(context)
        self.assertEqual(mock_log.call_count, 4)

    def test_title_mismatch_fails(self, mock_log):
        context = make_context(job=make_job(title="Senior QA Engineer"))
        with self.assertRaises(AssertionMismatch) as ctx:
            careers_steps.step_validate_job_title(context)
        self.assertEqual(ctx.exception.expected, "QA Test Automation Developer")
        self.assertEqual(ctx.exception.actual, "Senior QA Engineer")
        mock_log.assert_not_called()

    def test_all_metadata_reports_every_mismatch(self, mock_log):
        context = make_context(job=make_job(identifier="999", location="Burlington, US"))
        with self.assertRaises(AssertionMismatch) as ctx:
            careers_steps.step_validate_all_metadata(context)
        self.assertIn("Job location", str(ctx.exception))
        self.assertIn("Job ID", str(ctx.exception))

    def test_mismatch_is_an_assertion_error(self, mock_log):
        context = make_context(job=make_job(location="Burlington, US"))
        with self.assertRaises(AssertionError):
            careers_steps.step_validate_job_location(context)

    def test_steps_fail_cleanly_without_an_opened_job(self, mock_log):
        with self.assertRaises(AssertionMismatch):
            careers_steps.step_validate_job_title(make_context())

    def test_third_paragraph_sentence_uses_doc_string(self, mock_log):
        context = make_context(
            job=make_job(),
            text="  The right candidate for this role will participate in the test automation technology development.\n",
        )
        careers_steps.step_validate_third_paragraph_sentence(context)
        mock_log.assert_called_once_with("✅ Third paragraph sentence validated.")

    def test_third_paragraph_sentence_mismatch(self, mock_log):
        context = make_context(job=make_job(), text="Something else entirely.")
        with self.assertRaises(AssertionMismatch):
            careers_steps.step_validate_third_paragraph_sentence(context)

    def test_second_bullet_exact_match_is_case_insensitive_on_header(self, mock_log):
        context = make_context(job=make_job(), text="Develop and maintain test automation frameworks.")
        careers_steps.step_validate_second_bullet(context, "Main Responsibilities Include")

    def test_second_bullet_missing_section(self, mock_log):
        context = make_context(job=make_job(), text="anything")
        with self.assertRaises(AssertionMismatch) as ctx:
            careers_steps.step_validate_second_bullet(context, "Benefits")
        self.assertIn("Section 'Benefits' not found", str(ctx.exception))

    def test_second_bullet_keyword(self, mock_log):
        context = make_context(job=make_job())
        careers_steps.step_validate_second_bullet_keyword(context, "main responsibilities include", "AUTOMATION")
        with self.assertRaises(AssertionMismatch):
            careers_steps.step_validate_second_bullet_keyword(context, "main responsibilities include", "sales")


if __name__ == "__main__":
    unittest.main()
