"""
Step definitions for putting values into the store
"""

from types import SimpleNamespace

from behave import given  # type: ignore[import-untyped]

from browser_contexts.hooks import get_browser
from browser_contexts.utils import rows_hash


@given("the following is stored as {key:Token}:")  # type: ignore[misc]
def step_given_object_stored(context, key):
    """Store an object built from a | attribute | value | table"""
    get_browser(context).store.set(key, SimpleNamespace(**rows_hash(context.table)))


@given("the value {value:Scalar} is stored as {key:Token}")  # type: ignore[misc]
def step_given_value_stored(context, value, key):
    get_browser(context).store.set(key, value)


@given("the following string is stored as {key:Token}:")  # type: ignore[misc]
def step_given_string_stored(context, key):
    """Store the step's docstring as-is"""
    get_browser(context).store.set(key, context.text)
