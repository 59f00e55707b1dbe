"""
Careers Page — navigation from the home page to a job search.

Covers opening the home page, reaching the Careers section, running a search,
returning to the remembered Careers URL, and the best-effort Apply Now click.
"""

from enum import Enum
from typing import Optional
from urllib.parse import urljoin

from pydantic import BaseModel

from config.settings import Settings, settings as default_settings
from models.errors import WaitTimeoutError
from tools.browser_session import BrowserSession
from tools.run_logger import get_logger

logger = get_logger(__name__)


# Locators
CAREERS_LINK = 'a:text-is("Careers")'
SEARCH_INPUT = "input[placeholder='Search job title or location']"
SEARCH_BUTTON = "button[aria-label='Search']"
APPLY_NOW_LINK = "a.btn.primary-button.au-target"


class ApplyOutcome(str, Enum):
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    FAILED = "failed"


class ApplyResult(BaseModel):
    """What happened when trying to follow the Apply Now link."""

    outcome: ApplyOutcome
    url: str = ""
    error: str = ""

    @property
    def success(self) -> bool:
        return self.outcome == ApplyOutcome.SUCCESS


class CareersPage:
    """Page object for the home page → Careers → search flow."""

    def __init__(self, session: BrowserSession, config: Settings = None):
        self.session = session
        self.config = config or default_settings
        self.careers_url: Optional[str] = None

    def go_to_home_page(self) -> None:
        """Open the site's home page and maximize the viewport."""
        self.session.navigate(self.config.base_url)
        self.session.maximize()

    def page_title(self) -> str:
        return self.session.title()

    def navigate_to_careers(self) -> str:
        """
        Click the "Careers" link and remember where it led.

        Returns:
            The Careers page URL.

        Raises:
            WaitTimeoutError: If the link does not become clickable in time.
        """
        self.session.click(CAREERS_LINK, timeout=self.config.wait_timeout)
        self.careers_url = self.session.current_url
        logger.debug("Careers page URL: %s", self.careers_url)
        return self.careers_url

    def search_for_job(self, job_title: str) -> None:
        """Type job_title into the search box and submit."""
        self.session.type_text(SEARCH_INPUT, job_title, timeout=self.config.wait_timeout)
        self.session.click(SEARCH_BUTTON, timeout=self.config.wait_timeout)

    def return_to_careers_page(self) -> bool:
        """Navigate back to the remembered Careers URL. False if none was remembered."""
        if not self.careers_url:
            logger.warning("⚠️  No Careers page URL remembered; staying on %s", self.session.current_url)
            return False
        self.session.navigate(self.careers_url)
        return True

    def click_apply_now(self) -> ApplyResult:
        """
        Follow the Apply Now link if the page has one.

        Never raises: a missing link or a browser error is reported in the
        returned ApplyResult so the caller can decide whether it matters.
        """
        logger.info("🔄 Looking for Apply Now link...")

        try:
            href = self.session.get_attribute(
                APPLY_NOW_LINK, "href", timeout=self.config.wait_timeout
            )
        except WaitTimeoutError as e:
            logger.warning("❌ Timed out waiting for Apply Now link: %s", e)
            return ApplyResult(outcome=ApplyOutcome.NOT_FOUND, error=str(e))
        except Exception as e:
            logger.error("❌ Error during Apply Now lookup: %s", e)
            return ApplyResult(outcome=ApplyOutcome.FAILED, error=str(e))

        if not href:
            logger.warning("❌ Apply Now href is missing or empty.")
            return ApplyResult(outcome=ApplyOutcome.NOT_FOUND, error="Apply Now href is missing or empty")

        url = urljoin(self.session.current_url, href)
        try:
            logger.info("✅ Navigating to Apply Now URL: %s", url)
            self.session.navigate(url)
        except Exception as e:
            logger.error("❌ Error during Apply Now navigation: %s", e)
            return ApplyResult(outcome=ApplyOutcome.FAILED, url=url, error=str(e))

        return ApplyResult(outcome=ApplyOutcome.SUCCESS, url=url)
