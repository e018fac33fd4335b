"""Tests for the browser session."""

from unittest.mock import Mock

import pytest
from selenium.common.exceptions import WebDriverException
from selenium.webdriver.common.by import By

from browser_contexts.session import Session, SessionNotStartedError


class TestLifecycle:
    """Tests for starting and stopping the session."""

    def test_starts_lazily(self, driver) -> None:
        factory = Mock(return_value=driver)
        browser_session = Session(factory)

        assert not browser_session.is_started()
        factory.assert_not_called()

        browser_session.start()
        assert browser_session.is_started()
        assert browser_session.driver is driver

    def test_start_twice_creates_one_driver(self, driver) -> None:
        factory = Mock(return_value=driver)
        browser_session = Session(factory)
        browser_session.start()
        browser_session.start()
        factory.assert_called_once()

    def test_driver_before_start(self) -> None:
        with pytest.raises(SessionNotStartedError):
            Session(Mock()).driver

    def test_stop_quits_driver(self, session: Session, driver) -> None:
        session.stop()
        driver.quit.assert_called_once()
        assert not session.is_started()

    def test_stop_when_not_started(self) -> None:
        Session(Mock()).stop()  # Should not raise

    def test_stop_tolerates_quit_failure(self, session: Session, driver) -> None:
        driver.quit.side_effect = WebDriverException("gone")
        session.stop()
        assert not session.is_started()


class TestScripts:
    """Tests for script execution and evaluation."""

    def test_evaluate_adds_return(self, session: Session, driver) -> None:
        driver.execute_script.return_value = 42
        assert session.evaluate_script("window.answer") == 42
        driver.execute_script.assert_called_once_with("return window.answer")

    def test_evaluate_keeps_existing_return(self, session: Session, driver) -> None:
        session.evaluate_script("  return typeof(x);")
        driver.execute_script.assert_called_once_with("return typeof(x);")

    def test_evaluate_passes_arguments(self, session: Session, driver) -> None:
        element = Mock()
        session.evaluate_script("return arguments[0].complete;", element)
        driver.execute_script.assert_called_once_with(
            "return arguments[0].complete;", element
        )

    def test_execute(self, session: Session, driver) -> None:
        session.execute_script("window.x = 1;")
        driver.execute_script.assert_called_once_with("window.x = 1;")


class TestNavigation:
    """Tests for visiting and finding."""

    def test_visit_relative_to_base_url(self, driver) -> None:
        browser_session = Session(lambda: driver, base_url="http://localhost:8000/")
        browser_session.start()
        browser_session.visit("/login")
        driver.get.assert_called_once_with("http://localhost:8000/login")

    def test_visit_without_base_url(self, session: Session, driver) -> None:
        session.visit("about:blank")
        driver.get.assert_called_once_with("about:blank")

    def test_find_returns_first_match(self, session: Session, driver) -> None:
        first, second = Mock(), Mock()
        driver.find_elements.return_value = [first, second]
        assert session.find("css", "img#logo") is first
        driver.find_elements.assert_called_once_with(By.CSS_SELECTOR, "img#logo")

    def test_find_returns_none(self, session: Session, driver) -> None:
        driver.find_elements.return_value = []
        assert session.find("xpath", "//img") is None

    def test_find_unknown_selector(self, session: Session) -> None:
        with pytest.raises(ValueError, match="Unknown selector type"):
            session.find("named", "logo")
