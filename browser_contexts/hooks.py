"""
behave hooks for the browser step contexts

Call these from a project's ``features/environment.py``:

    from browser_contexts import hooks

    def before_all(context):
        hooks.before_all(context)

    def before_scenario(context, scenario):
        hooks.before_scenario(context, scenario)

    def after_scenario(context, scenario):
        hooks.after_scenario(context, scenario)

    def after_all(context):
        hooks.after_all(context)
"""

import logging

from browser_contexts.config import BrowserSettings
from browser_contexts.contexts import FlexibleContext
from browser_contexts.exceptions import BrowserContextError
from browser_contexts.logging_config import get_logger, setup_logging
from browser_contexts.session import Session
from browser_contexts.store import StoreContext

logger = get_logger(__name__)

# Scenarios tagged with this get their alerts dismissed afterwards
CLEAR_ALERTS_TAG = "clearAlertsWhenFinished"


def before_all(context):
    """Load browser settings and create the (not yet started) session"""
    level = context.config.userdata.get("log_level", "INFO").upper()
    setup_logging(getattr(logging, level, logging.INFO))

    settings = BrowserSettings.from_userdata(context.config.userdata)
    context.browser_settings = settings
    context.browser_session = Session(settings.create_driver, settings.base_url)


def before_scenario(context, scenario):
    """Give each scenario a fresh store and a started session"""
    logger.info(f"Scenario: {scenario.name}")
    context.store = StoreContext()
    context.browser_session.start()
    context.browser = FlexibleContext(context.browser_session, context.store)


def after_scenario(context, scenario):
    """Dismiss leftover alerts for scenarios tagged @clearAlertsWhenFinished"""
    if CLEAR_ALERTS_TAG in scenario.effective_tags and hasattr(context, "browser"):
        logger.debug("Clearing alerts")
        context.browser.clear_alerts()


def after_all(context):
    """Quit the browser"""
    if hasattr(context, "browser_session"):
        context.browser_session.stop()


def get_browser(context) -> FlexibleContext:
    """Return the scenario's FlexibleContext from the behave context."""
    browser = getattr(context, "browser", None)
    if browser is None:
        raise BrowserContextError(
            "No browser context on the behave context; "
            "call browser_contexts.hooks.before_scenario from environment.py"
        )
    return browser
