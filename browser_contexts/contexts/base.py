"""Shared base for the step contexts."""

from selenium.webdriver.remote.webdriver import WebDriver

from browser_contexts.exceptions import UnsupportedDriverActionException
from browser_contexts.session import Session
from browser_contexts.store import StoreContext


class BrowserContext:
    """
    Base for step contexts that drive a browser session.

    Contexts are combined by inheritance; every context in a combination
    shares the same session and store.

    Attributes:
        session: The browser session steps run against
        store: Values stored by earlier steps
    """

    def __init__(self, session: Session, store: StoreContext | None = None) -> None:
        self.session = session
        self.store = store if store is not None else StoreContext()

    def get_session(self) -> Session:
        return self.session

    def assert_selenium_driver(self, operation: str) -> WebDriver:
        """
        Return the session's driver, requiring it to be a selenium WebDriver.

        Args:
            operation: Name of the operation, used in the error message

        Raises:
            UnsupportedDriverActionException: If the driver is not a WebDriver
        """
        driver = self.session.driver
        if not isinstance(driver, WebDriver):
            raise UnsupportedDriverActionException(operation, driver)
        return driver
