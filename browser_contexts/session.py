"""Lazily started browser session wrapping a selenium WebDriver."""

from __future__ import annotations

from collections.abc import Callable
from urllib.parse import urljoin

from selenium.common.exceptions import WebDriverException
from selenium.webdriver.common.by import By

from browser_contexts.exceptions import BrowserContextError
from browser_contexts.logging_config import get_logger

logger = get_logger(__name__)

# Selector types accepted by Session.find
SELECTORS = {
    "css": By.CSS_SELECTOR,
    "xpath": By.XPATH,
    "id": By.ID,
    "name": By.NAME,
}


class SessionNotStartedError(BrowserContextError):
    """The session was used before it was started."""


class Session:
    """
    A browser session owned by the test run.

    The underlying driver is created by ``driver_factory`` the first time
    the session is started and stays valid until ``stop()``.
    """

    def __init__(
        self, driver_factory: Callable[[], object], base_url: str | None = None
    ) -> None:
        self._driver_factory = driver_factory
        self._driver = None
        self.base_url = base_url

    def is_started(self) -> bool:
        return self._driver is not None

    def start(self) -> None:
        """Start the session if it is not already started."""
        if self._driver is None:
            logger.info("Starting browser session")
            self._driver = self._driver_factory()

    def stop(self) -> None:
        """Quit the driver. Safe to call on a stopped session."""
        if self._driver is None:
            return
        logger.info("Stopping browser session")
        driver, self._driver = self._driver, None
        try:
            driver.quit()
        except WebDriverException as e:
            logger.warning(f"Driver did not quit cleanly: {e}")

    @property
    def driver(self):
        if self._driver is None:
            raise SessionNotStartedError("The browser session has not been started")
        return self._driver

    def execute_script(self, script: str, *args) -> None:
        """Run a script in the page, discarding its result."""
        logger.debug(f"Executing script: {script}")
        self.driver.execute_script(script, *args)

    def evaluate_script(self, script: str, *args):
        """
        Evaluate a script in the page and return its result.

        A leading ``return`` is added when the script does not have one.
        """
        script = script.strip()
        if not script.startswith("return "):
            script = f"return {script}"
        logger.debug(f"Evaluating script: {script}")
        return self.driver.execute_script(script, *args)

    def visit(self, path: str) -> None:
        """Navigate to a URL, resolved against base_url when relative."""
        url = urljoin(self.base_url, path) if self.base_url else path
        logger.debug(f"Visiting {url}")
        self.driver.get(url)

    def find(self, selector: str, locator: str):
        """
        Find the first element matching a locator.

        Args:
            selector: Selector type ("css", "xpath", "id" or "name")
            locator: The locator expression

        Returns:
            The first matching WebElement, or None if nothing matches
        """
        if selector not in SELECTORS:
            raise ValueError(
                f"Unknown selector type: '{selector}'. Expected one of {sorted(SELECTORS)}"
            )
        elements = self.driver.find_elements(SELECTORS[selector], locator)
        return elements[0] if elements else None
