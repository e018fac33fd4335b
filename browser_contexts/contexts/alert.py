"""
A context for handling JavaScript alerts, confirmations and prompts.
"""

from selenium.common.exceptions import NoAlertPresentException

from browser_contexts.contexts.base import BrowserContext
from browser_contexts.exceptions import ExpectationException
from browser_contexts.logging_config import get_logger

logger = get_logger(__name__)


class AlertContext(BrowserContext):
    """Steps for confirming, cancelling, reading and filling alerts."""

    def clear_alerts(self) -> None:
        """
        Dismiss any alert or prompt that may be open.

        Does nothing when the session has not been started or no alert is open.

        Raises:
            UnsupportedDriverActionException: If the driver cannot dismiss alerts
        """
        if not self.session.is_started():
            return

        try:
            self.cancel_alert()
        except NoAlertPresentException:
            logger.debug("No alert was open")

    def confirm_alert(self) -> None:
        """Accept the current alert."""
        self.assert_selenium_driver("Confirm Alert").switch_to.alert.accept()

    def cancel_alert(self) -> None:
        """Dismiss the current alert."""
        self.assert_selenium_driver("Cancel Alert").switch_to.alert.dismiss()

    def assert_alert_message(self, expected: str) -> None:
        """
        Assert that the current alert contains the given text.

        Args:
            expected: Text the alert should contain

        Raises:
            ExpectationException: If no alert is open or the text is not in it
        """
        driver = self.assert_selenium_driver("Assert Alert")

        try:
            actual = driver.switch_to.alert.text
        except NoAlertPresentException as e:
            raise ExpectationException("No alert is open", self.session) from e

        if expected not in actual:
            raise ExpectationException(
                f"Text '{expected}' not found in alert",
                self.session,
                expected=expected,
                actual=actual,
            )

    def set_alert_text(self, message: str) -> None:
        """Fill text into the current prompt."""
        self.assert_selenium_driver("Set Alert").switch_to.alert.send_keys(message)
