"""
Careers step definitions — bind the Gherkin steps to the page objects.

Each step delegates to CareersPage / JobDetailPage (set up per scenario in
features/environment.py) and logs a progress line once it succeeds.
"""

from behave import given, when, then, step

from models.errors import AssertionMismatch
from pages.careers_page import ApplyOutcome
from tools.assertions import compare_listing_to_detail, expect_contains, expect_equal, expect_present
from tools.run_logger import log


def _opened_job(context):
    job = getattr(context, "job", None)
    expect_present("Opened job (run 'the user clicks on the first job result' first)", job)
    return job


@given("the user is on the LabCorp home page")
def step_open_home_page(context):
    context.careers_page.go_to_home_page()
    log("✅ Navigated to LabCorp home page.")


@when("the user navigates to the Careers page")
def step_navigate_to_careers(context):
    context.careers_page.navigate_to_careers()
    log("✅ Navigated to Careers page.")


@step('the user searches for "{title}"')
def step_search_for_job(context, title):
    context.careers_page.search_for_job(title)
    log(f"✅ Searched for job: {title}")


@step("the user clicks on the first job result")
def step_click_first_job_result(context):
    context.job = context.job_detail_page.open_first_result()
    log("✅ Clicked on the first job result.")


@then("the job title should match the result listing")
def step_validate_job_title(context):
    job = _opened_job(context)
    expect_equal("Job title", job.summary.title, job.detail.title)
    log("✅ Job title matches the result listing.")


@then("the job location should match the result listing")
def step_validate_job_location(context):
    job = _opened_job(context)
    expect_equal("Job location", job.summary.location, job.detail.location)
    log("✅ Job location matches the result listing.")


@then("the job ID should match the result listing")
def step_validate_job_id(context):
    job = _opened_job(context)
    expect_equal("Job ID", job.summary.identifier, job.detail.identifier)
    log("✅ Job ID matches the result listing.")


@then("all job metadata should match the result listing")
def step_validate_all_metadata(context):
    job = _opened_job(context)
    mismatches = compare_listing_to_detail(job.summary, job.detail)
    if mismatches:
        raise AssertionMismatch(
            "Job metadata",
            [m.expected for m in mismatches],
            [m.actual for m in mismatches],
            "\n".join(str(m) for m in mismatches),
        )
    log("✅ Job title, location and ID match the result listing.")


@then("the job description third paragraph first sentence should be:")
def step_validate_third_paragraph_sentence(context):
    job = _opened_job(context)
    actual = job.description.third_paragraph_first_sentence
    expect_present("Third paragraph", actual)
    expect_equal("Third paragraph sentence", context.text, actual)
    log("✅ Third paragraph sentence validated.")


@then('the job description second bullet under "{header}" should be:')
def step_validate_second_bullet(context, header):
    job = _opened_job(context)
    actual = job.description.second_bullet_for(header)
    expect_present(f"Section '{header}'", actual)
    expect_equal(f"Bullet under '{header}'", context.text, actual)
    log(f"✅ Bullet under '{header}' matched.")


@then('the job description second bullet under "{header}" should contain "{keyword}"')
def step_validate_second_bullet_keyword(context, header, keyword):
    job = _opened_job(context)
    actual = job.description.second_bullet_for(header)
    expect_present(f"Section '{header}'", actual)
    expect_contains(f"Bullet under '{header}'", actual, keyword)
    log(f"✅ Bullet under '{header}' contains keyword '{keyword}'.")


@step("the user clicks on Apply Now button")
def step_click_apply_now(context):
    context.apply_result = context.careers_page.click_apply_now()
    if context.apply_result.outcome == ApplyOutcome.SUCCESS:
        log("✅ Clicked on Apply Now.")
    else:
        log(f"⚠️  Apply Now skipped ({context.apply_result.outcome.value}): {context.apply_result.error}")


@step("the user is redirected back to the Careers page")
def step_return_to_careers(context):
    if context.careers_page.return_to_careers_page():
        log("✅ Returned to Careers page.")
