"""
Step definitions for JavaScript alerts
"""

from behave import given, then, use_step_matcher, when  # type: ignore[import-untyped]
from behave.matchers import use_default_step_matcher  # type: ignore[import-untyped]

from browser_contexts.hooks import get_browser


@given("there are no alerts on the page")  # type: ignore[misc]
def step_given_no_alerts(context):
    """Dismiss any open alert"""
    get_browser(context).clear_alerts()


use_step_matcher("re")


@when(r"(?:|I )confirm the alert")  # type: ignore[misc]
def step_when_confirm_alert(context):
    """Accept the open alert"""
    get_browser(context).confirm_alert()


@when(r"(?:|I )cancel the alert")  # type: ignore[misc]
def step_when_cancel_alert(context):
    """Dismiss the open alert"""
    get_browser(context).cancel_alert()


@then(r'(?:|I )should see an alert containing "(?P<expected>[^"]*)"')  # type: ignore[misc]
def step_then_alert_contains(context, expected):
    """Check the text of the open alert"""
    get_browser(context).assert_alert_message(expected)


@when(r'(?:|I )fill "(?P<message>[^"]*)" into the prompt')  # type: ignore[misc]
def step_when_fill_prompt(context, message):
    """Type into the open prompt"""
    get_browser(context).set_alert_text(message)


use_default_step_matcher()
