# e2e/utils/exceptions.py

"""Errors raised by the page object layer.

Selenium exceptions are translated into these at the BasePage / wait helper
boundary so tests only ever see one of the kinds below.
"""


class PageObjectError(Exception):
    """Base exception for all page object failures."""

    def __init__(self, message: str, locator: tuple = None, timeout: float = None):
        super().__init__(message)
        self.locator = locator
        self.timeout = timeout


class NavigationTimeoutError(PageObjectError):
    """The browser did not finish loading a URL in time."""


class LoadTimeoutError(PageObjectError):
    """The page never reached a loaded, network-idle state."""


class WaitTimeoutError(PageObjectError):
    """An explicit wait expired."""


class ElementNotFoundError(PageObjectError):
    """No visible element matched the locator."""


class AmbiguousLocatorError(PageObjectError):
    """More than one element matched a locator that must be unique."""


class ActionFailedError(PageObjectError):
    """The element was found but the browser rejected the action."""


class BrowserSetupError(PageObjectError):
    """The WebDriver could not be created for the requested settings."""
