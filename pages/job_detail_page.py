"""
Job Detail Page — opens the first search result and reads what it says.

The listing card's data attributes give the expected title, location and ID.
The detail page embeds a JSON block (in the second <head> script) that is the
authoritative source for the actual values and the job description.
"""

import json
import time
from urllib.parse import urljoin

from playwright.sync_api import Error as PlaywrightError
from pydantic import ValidationError

from config.settings import Settings, settings as default_settings
from models.errors import DataShapeError, NavigationError, WaitTimeoutError
from models.job import JobDetailRecord, JobDetailView, JobListingSummary, StructuredJobPosting
from tools.browser_session import BrowserSession
from tools.content_extractor import parse_description
from tools.run_logger import get_logger

logger = get_logger(__name__)


FIRST_RESULT_SELECTOR = "span[data-ph-id='ph-page-element-page11-CRdnpK'] a.au-target:first-of-type"

# Data attributes carried by the result card anchor
TITLE_ATTRIBUTE = "data-ph-at-job-title-text"
LOCATION_ATTRIBUTE = "data-ph-at-job-location-text"
JOB_ID_ATTRIBUTE = "data-ph-at-job-id-text"

STRUCTURED_DATA_SCRIPT = """() => {
    const node = document.evaluate(
        "/html/head/script[2]/text()", document, null,
        XPathResult.FIRST_ORDERED_NODE_TYPE, null
    ).singleNodeValue;
    return node ? node.nodeValue : null;
}"""
STRUCTURED_DATA_PREFIX = '{"identifier"'


def parse_structured_data(text: str) -> JobDetailRecord:
    """
    Turn the embedded JSON block into a JobDetailRecord.

    Raises:
        DataShapeError: If the text is not a JSON object or a required key is
            missing. Only the address sub-fields are optional.
    """
    try:
        data = json.loads(text)
    except (TypeError, json.JSONDecodeError) as e:
        raise DataShapeError(f"Structured job data is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise DataShapeError(
            f"Structured job data must be a JSON object, got {type(data).__name__}"
        )

    try:
        posting = StructuredJobPosting.model_validate(data)
    except ValidationError as e:
        raise DataShapeError(f"Structured job data has an unexpected shape: {e}") from e

    return posting.to_record()


class JobDetailPage:
    """Page object for a search result and the detail page it links to."""

    def __init__(self, session: BrowserSession, config: Settings = None):
        self.session = session
        self.config = config or default_settings

    def capture_listing_summary(self, selector: str = FIRST_RESULT_SELECTOR) -> tuple[JobListingSummary, str]:
        """
        Read the expected job metadata and link target off a result card.

        Returns:
            (JobListingSummary, absolute href of the detail page)

        Raises:
            WaitTimeoutError: If no result appears in time.
            NavigationError: If the card has no href.
        """
        timeout = self.config.wait_timeout
        self.session.wait_for(selector, state="attached", timeout=timeout)

        summary = JobListingSummary(
            title=self.session.get_attribute(selector, TITLE_ATTRIBUTE, timeout=timeout) or "",
            location=self.session.get_attribute(selector, LOCATION_ATTRIBUTE, timeout=timeout) or "",
            identifier=self.session.get_attribute(selector, JOB_ID_ATTRIBUTE, timeout=timeout) or "",
        )

        href = self.session.get_attribute(selector, "href", timeout=timeout)
        if not href or not href.strip():
            raise NavigationError("Job href was empty")

        return summary, urljoin(self.session.current_url, href.strip())

    def wait_for_structured_data(self, timeout: float = None) -> str:
        """
        Poll the page until the embedded job JSON is available.

        Raises:
            WaitTimeoutError: If the JSON has not appeared once timeout elapses.
        """
        timeout = timeout if timeout is not None else self.config.structured_data_timeout
        deadline = time.monotonic() + timeout

        while True:
            try:
                text = self.session.evaluate(STRUCTURED_DATA_SCRIPT)
            except PlaywrightError as e:
                # The page may still be navigating; try again on the next tick
                logger.debug("Structured data not readable yet: %s", e)
                text = None

            if isinstance(text, str) and text.strip().startswith(STRUCTURED_DATA_PREFIX):
                return text.strip()

            if time.monotonic() >= deadline:
                raise WaitTimeoutError(
                    f"Timed out after {timeout}s waiting for embedded job data on {self.session.current_url}"
                )
            time.sleep(self.config.poll_interval)

    def open_first_result(self, selector: str = FIRST_RESULT_SELECTOR) -> JobDetailView:
        """
        Open the first search result and collect expected and actual job data.

        Returns:
            JobDetailView with the card summary, the detail record and the
            parsed description.
        """
        summary, href = self.capture_listing_summary(selector)
        logger.debug("Listing card: %s -> %s", summary, href)

        self.session.navigate(href)

        detail = parse_structured_data(self.wait_for_structured_data())
        description = parse_description(detail.description_markup)

        return JobDetailView(summary=summary, detail=detail, description=description)
