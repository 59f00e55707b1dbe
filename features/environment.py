"""
behave hooks — settings and logging for the run, and one browser session per
scenario that is always torn down, pass or fail.
"""

import os
import sys
import time

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config.settings import settings
from models.state import ScenarioResult
from pages.careers_page import CareersPage
from pages.job_detail_page import JobDetailPage
from tools.browser_session import BrowserSession
from tools.file_handler import apply_profile, generate_summary, load_profiles, save_to_json
from tools.html_report import generate_html_report
from tools.run_logger import get_logger, log, log_scenario_end, log_scenario_start, setup_logging, shutdown_logging
from tools.session_manager import SessionManager

logger = get_logger("environment")


def _status_name(status) -> str:
    return getattr(status, "name", str(status)).upper()


def before_all(context):
    userdata = context.config.userdata
    if userdata.get("profile"):
        settings.profile = userdata["profile"]
    if settings.profile:
        apply_profile(settings, settings.profile, load_profiles(settings.profiles_path))
    if "headless" in userdata:
        settings.headless = userdata.getbool("headless")
    if userdata.get("output_dir"):
        settings.output_dir = userdata["output_dir"]
        settings.log_dir = os.path.join(settings.output_dir, "logs")

    setup_logging(settings.log_dir)
    context.settings = settings
    context.sessions = SessionManager(lambda: BrowserSession.launch(context.settings))
    context.results = []


def before_scenario(context, scenario):
    log_scenario_start(scenario.name)
    context.scenario_started = time.monotonic()
    context.scenario_error = None

    context.session = context.sessions.initialize()
    context.careers_page = CareersPage(context.session, context.settings)
    context.job_detail_page = JobDetailPage(context.session, context.settings)


def after_step(context, step):
    if _status_name(step.status) == "FAILED":
        message = step.error_message or str(step.exception)
        logger.error("❌ Step failed in scenario '%s': %s %s\n%s",
                     context.scenario.name, step.keyword, step.name, message)
        if context.scenario_error is None:
            context.scenario_error = message


def after_scenario(context, scenario):
    status = _status_name(scenario.status)
    try:
        log_scenario_end(scenario.name, status)
    except Exception as e:
        print(f"[Logger Error] Failed to log end of scenario '{scenario.name}': {e}", file=sys.stderr)
    finally:
        context.sessions.teardown()

    context.results.append(ScenarioResult(
        name=scenario.name,
        feature=scenario.feature.name if scenario.feature else "",
        status=status,
        duration=time.monotonic() - context.scenario_started,
        error=context.scenario_error,
    ))


def after_all(context):
    results = getattr(context, "results", [])
    if results:
        path = save_to_json(results, context.settings.output_dir)
        log(f"📄 Run summary: {path}")
        html_path = generate_html_report(results, os.path.splitext(path)[0] + ".html")
        log(f"🌐 HTML report: {html_path}")
        print(f"\n{generate_summary(results)}")
    shutdown_logging()
