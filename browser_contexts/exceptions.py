"""Exceptions raised by the browser step contexts."""


class BrowserContextError(Exception):
    """Base class for errors that are not assertion failures."""


class ExpectationException(AssertionError):
    """A step expectation was not met in the browser.

    Subclasses AssertionError so behave reports the step as failed rather
    than errored.

    Attributes:
        session: The session the expectation was checked against
        expected: The expected value, when the check compared values
        actual: The actual value, when the check compared values
    """

    def __init__(self, message: str, session=None, expected=None, actual=None):
        super().__init__(message)
        self.message = message
        self.session = session
        self.expected = expected
        self.actual = actual


class UnsupportedDriverActionException(BrowserContextError):
    """The current driver cannot perform the requested action."""

    def __init__(self, operation: str, driver) -> None:
        self.operation = operation
        self.driver = driver
        super().__init__(
            f"{operation} is not supported by {type(driver).__name__}; "
            "a selenium WebDriver is required"
        )


class StoreLookupError(BrowserContextError, LookupError):
    """A key or property was not found in the store."""
