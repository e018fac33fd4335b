"""
Library steps plus fixture steps used by the integration features
"""

import json

from behave import given, then, use_step_matcher  # type: ignore[import-untyped]
from behave.matchers import use_default_step_matcher  # type: ignore[import-untyped]

from browser_contexts.exceptions import ExpectationException
from browser_contexts.hooks import get_browser
from browser_contexts.steps import *  # noqa: F401,F403
from browser_contexts.type_caster import cast_step_argument

BLANK_PAGE = "data:text/html,<html><head><title>blank</title></head><body></body></html>"


@given("I am on a blank page")  # type: ignore[misc]
def step_given_blank_page(context):
    get_browser(context).session.visit(BLANK_PAGE)


@given("the javascript variable {name:Token} is set to {value:Token}")  # type: ignore[misc]
def step_given_variable_set(context, name, value):
    """Assign a JSON literal to a window variable"""
    get_browser(context).session.execute_script(f"window.{name} = {value};")


@given("the javascript variable {name:Token} is set to:")  # type: ignore[misc]
def step_given_variable_set_docstring(context, name):
    """Assign the JSON docstring to a window variable"""
    get_browser(context).session.execute_script(f"window.{name} = {context.text};")


use_step_matcher("re")


@given(r'there is an? (?P<popup>alert|confirm|prompt) containing (?P<text>".+")')  # type: ignore[misc]
def step_given_popup(context, popup, text):
    """Open a popup and keep its return value in <popup>_result"""
    text = json.dumps(cast_step_argument(text))
    get_browser(context).session.execute_script(
        f"window.{popup}_result = {popup}({text});"
    )


@then(r"the (?P<popup>alert|confirm|prompt) should return (?P<value>.+)")  # type: ignore[misc]
def step_then_popup_result(context, popup, value):
    browser = get_browser(context)
    expected = cast_step_argument(value)
    actual = browser.session.evaluate_script(f"return window.{popup}_result;")

    if actual != expected or type(actual) is not type(expected):
        raise ExpectationException(
            f"Expected {json.dumps(expected)}, got {json.dumps(actual)}",
            browser.session,
            expected=expected,
            actual=actual,
        )


use_default_step_matcher()
