"""
Browser Session Tool — thin blocking wrapper around Playwright's sync API.

Exposes only what the page objects need: navigate, wait for / click / type
into elements, read attributes, evaluate scripts, read URL and title,
maximize the viewport, and close. Playwright timeouts surface as
WaitTimeoutError so scenarios fail with a typed error.
"""

import logging
from contextlib import contextmanager

from playwright.sync_api import sync_playwright, TimeoutError as PWTimeout

from config.settings import Settings, settings as default_settings
from models.errors import WaitTimeoutError

logger = logging.getLogger(__name__)


@contextmanager
def _timeout_as(description: str, timeout: float):
    try:
        yield
    except PWTimeout as e:
        raise WaitTimeoutError(f"Timed out after {timeout}s waiting for {description}") from e


class BrowserSession:
    """One browser page plus the Playwright objects that own it."""

    def __init__(self, page, context=None, browser=None, playwright=None, config: Settings = None):
        self.page = page
        self._context = context
        self._browser = browser
        self._playwright = playwright
        self.config = config or default_settings
        self.closed = False

    @classmethod
    def launch(cls, config: Settings = None) -> "BrowserSession":
        """Start Playwright and open a fresh page in the configured browser."""
        config = config or default_settings
        playwright = sync_playwright().start()
        try:
            browser_type = getattr(playwright, config.browser)
            browser = browser_type.launch(headless=config.headless)
            context = browser.new_context()
            page = context.new_page()
        except Exception:
            playwright.stop()
            raise

        logger.debug("Launched %s (headless=%s)", config.browser, config.headless)
        return cls(page, context=context, browser=browser, playwright=playwright, config=config)

    def _ms(self, timeout: float = None) -> float:
        return (timeout if timeout is not None else self.config.wait_timeout) * 1000

    def navigate(self, url: str, timeout: float = None) -> None:
        timeout = timeout if timeout is not None else self.config.wait_timeout
        with _timeout_as(f"page load of {url}", timeout):
            self.page.goto(url, wait_until="domcontentloaded", timeout=self._ms(timeout))

    def wait_for(self, selector: str, state: str = "visible", timeout: float = None):
        """
        Wait until the first element matching selector reaches state.

        Args:
            selector: Playwright selector.
            state: "attached" (present), "visible", "hidden" or "detached".
            timeout: Seconds to wait (defaults to settings.wait_timeout).

        Returns:
            Playwright Locator for the element.
        """
        timeout = timeout if timeout is not None else self.config.wait_timeout
        locator = self.page.locator(selector).first
        with _timeout_as(f"{selector} to be {state}", timeout):
            locator.wait_for(state=state, timeout=self._ms(timeout))
        return locator

    def click(self, selector: str, timeout: float = None) -> None:
        """Click once the element is visible, enabled and stable."""
        timeout = timeout if timeout is not None else self.config.wait_timeout
        locator = self.wait_for(selector, state="visible", timeout=timeout)
        with _timeout_as(f"{selector} to be clickable", timeout):
            locator.click(timeout=self._ms(timeout))

    def type_text(self, selector: str, text: str, timeout: float = None) -> None:
        timeout = timeout if timeout is not None else self.config.wait_timeout
        locator = self.wait_for(selector, state="visible", timeout=timeout)
        with _timeout_as(f"{selector} to accept input", timeout):
            locator.fill(text, timeout=self._ms(timeout))

    def get_attribute(self, selector: str, name: str, timeout: float = None):
        """Read an attribute off the first matching element (None if unset)."""
        timeout = timeout if timeout is not None else self.config.wait_timeout
        locator = self.wait_for(selector, state="attached", timeout=timeout)
        with _timeout_as(f"attribute {name} of {selector}", timeout):
            return locator.get_attribute(name, timeout=self._ms(timeout))

    def evaluate(self, script: str):
        return self.page.evaluate(script)

    @property
    def current_url(self) -> str:
        return self.page.url

    def title(self) -> str:
        return self.page.title()

    def maximize(self) -> None:
        self.page.set_viewport_size({
            "width": self.config.viewport_width,
            "height": self.config.viewport_height,
        })

    def close(self) -> None:
        """Close page, context, browser and Playwright. Safe to call twice."""
        if self.closed:
            return
        self.closed = True
        try:
            if self._context is not None:
                self._context.close()
            if self._browser is not None:
                self._browser.close()
        finally:
            if self._playwright is not None:
                self._playwright.stop()
