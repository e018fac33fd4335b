"""Browser configuration for the step contexts.

Settings come from behave userdata (``behave -D browser=firefox``) and,
optionally, a YAML file named by the ``browser_config`` userdata key.
Userdata values override values from the file.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Literal, Self

import yaml
from pydantic import BaseModel, field_validator, model_validator

from browser_contexts.logging_config import get_logger

logger = get_logger(__name__)

# Userdata key naming the YAML settings file
CONFIG_FILE_KEY = "browser_config"

# Window size pattern: WIDTHxHEIGHT
DEFAULT_WINDOW_SIZE = "1280x1024"


class BrowserSettings(BaseModel):
    """
    Settings used to create the selenium driver.

    Attributes:
        browser: Which driver to start ("chrome", "firefox" or "remote")
        headless: Run the browser without a visible window
        base_url: Base URL relative paths are visited against
        remote_url: Selenium grid URL, required when browser is "remote"
        remote_browser: Browser requested from the grid ("chrome" or "firefox")
        window_size: Window size as WIDTHxHEIGHT
        implicit_wait: Implicit element wait in seconds
    """

    browser: Literal["chrome", "firefox", "remote"] = "chrome"
    headless: bool = True
    base_url: str | None = None
    remote_url: str | None = None
    remote_browser: Literal["chrome", "firefox"] = "chrome"
    window_size: str = DEFAULT_WINDOW_SIZE
    implicit_wait: float = 0

    @field_validator("window_size")
    @classmethod
    def _check_window_size(cls, value: str) -> str:
        width, sep, height = value.lower().partition("x")
        if not sep or not width.isdigit() or not height.isdigit():
            raise ValueError(
                f"Invalid window size: '{value}'. Expected WIDTHxHEIGHT (e.g., 1280x1024)"
            )
        return value.lower()

    @model_validator(mode="after")
    def _check_remote_url(self) -> Self:
        if self.browser == "remote" and not self.remote_url:
            raise ValueError("remote_url is required when browser is 'remote'")
        return self

    @property
    def window_dimensions(self) -> tuple[int, int]:
        """Window size as a (width, height) tuple."""
        width, _, height = self.window_size.partition("x")
        return int(width), int(height)

    @classmethod
    def from_yaml(cls, yaml_text: str) -> Self:
        """Load settings from YAML text."""
        data = yaml.safe_load(yaml_text) or {}
        if not isinstance(data, dict):
            raise ValueError("Browser settings YAML must be a mapping")
        return cls(**data)

    @classmethod
    def from_yaml_file(cls, path: str | Path) -> Self:
        """Load settings from a YAML file."""
        with open(path, encoding="utf-8") as f:
            return cls.from_yaml(f.read())

    @classmethod
    def from_userdata(cls, userdata: Mapping[str, str]) -> Self:
        """
        Load settings from behave userdata.

        If userdata names a YAML file under ``browser_config`` it is loaded
        first and the remaining userdata keys are applied on top of it.

        Args:
            userdata: behave's ``context.config.userdata``

        Returns:
            BrowserSettings
        """
        data: dict = {}
        config_file = userdata.get(CONFIG_FILE_KEY)
        if config_file:
            logger.debug(f"Loading browser settings from {config_file}")
            data.update(cls.from_yaml_file(config_file).model_dump(exclude_unset=True))

        for name in cls.model_fields:
            if name in userdata:
                data[name] = userdata[name]

        return cls(**data)

    def create_driver(self):
        """Create a new selenium WebDriver for these settings."""
        from selenium import webdriver

        logger.info(f"Starting {self.browser} driver (headless={self.headless})")

        options_for = self.remote_browser if self.browser == "remote" else self.browser
        if options_for == "firefox":
            options = webdriver.FirefoxOptions()
            if self.headless:
                options.add_argument("-headless")
        else:
            options = webdriver.ChromeOptions()
            if self.headless:
                options.add_argument("--headless=new")

        if self.browser == "remote":
            driver = webdriver.Remote(command_executor=self.remote_url, options=options)
        elif self.browser == "firefox":
            driver = webdriver.Firefox(options=options)
        else:
            driver = webdriver.Chrome(options=options)

        driver.set_window_size(*self.window_dimensions)
        if self.implicit_wait:
            driver.implicitly_wait(self.implicit_wait)
        return driver
