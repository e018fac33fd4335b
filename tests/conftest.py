"""
Pytest configuration and fixtures for browser-contexts tests
"""

from unittest.mock import Mock, PropertyMock

import pytest
from behave.model import Table
from selenium.common.exceptions import NoAlertPresentException
from selenium.webdriver.remote.webdriver import WebDriver

from browser_contexts.contexts import FlexibleContext
from browser_contexts.session import Session
from browser_contexts.store import StoreContext


@pytest.fixture
def driver():
    """Selenium WebDriver stand-in with an open alert"""
    mock_driver = Mock(spec=WebDriver)
    mock_driver.switch_to = Mock()
    mock_driver.switch_to.alert = Mock()
    mock_driver.switch_to.alert.text = "Hello world"
    return mock_driver


@pytest.fixture
def no_alert(driver):
    """Make the driver behave as if no alert is open"""
    type(driver.switch_to).alert = PropertyMock(side_effect=NoAlertPresentException())
    return driver


@pytest.fixture
def session(driver):
    """Started session around the mock driver"""
    browser_session = Session(lambda: driver)
    browser_session.start()
    return browser_session


@pytest.fixture
def store():
    return StoreContext()


@pytest.fixture
def browser(session, store):
    """All contexts combined, as the behave hooks build them"""
    return FlexibleContext(session, store)


@pytest.fixture
def make_table():
    """Factory fixture to create behave tables.

    Usage:
        def test_example(make_table):
            table = make_table(["key", "value"], [["name", "Ada"]])
    """

    def _create_table(headings: list[str], rows: list[list[str]]) -> Table:
        return Table(headings, rows=rows)

    return _create_table
