# e2e/utils/wait_helpers.py

import logging
import time

from selenium.common.exceptions import StaleElementReferenceException, TimeoutException
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from config.config import DEFAULT_WAIT_TIMEOUT, NETWORK_IDLE_MS, POLL_FREQUENCY
from utils.exceptions import (
    ActionFailedError,
    AmbiguousLocatorError,
    ElementNotFoundError,
    LoadTimeoutError,
    WaitTimeoutError,
)

logger = logging.getLogger(__name__)

# Element states a resolution can require, weakest first
PRESENT = "present"
VISIBLE = "visible"
ACTIONABLE = "actionable"
EDITABLE = "editable"

# Why the last poll of a resolution did not succeed
_NO_MATCH = "no element matched"
_HIDDEN = "element is not visible"
_DISABLED = "element is disabled"
_READONLY = "element is read-only"
_MOVING = "element is still moving"

_NOT_FOUND_REASONS = (_NO_MATCH, _HIDDEN)


def _waiter(driver: WebDriver, timeout: float, poll_frequency: float) -> WebDriverWait:
    return WebDriverWait(
        driver,
        timeout,
        poll_frequency=poll_frequency,
        ignored_exceptions=(StaleElementReferenceException,),
    )


class _ElementResolution:
    """WebDriverWait condition that returns the single element matching a
    locator once it reaches the required state.

    The last reason for failing is kept so a timeout can be reported as the
    right error kind.
    """

    def __init__(self, locator: tuple, state: str, poll_frequency: float = POLL_FREQUENCY):
        self.locator = locator
        self.state = state
        self.poll_frequency = poll_frequency
        self.reason = _NO_MATCH
        self._last_rect = None

    def __call__(self, driver):
        elements = driver.find_elements(*self.locator)
        if not elements:
            self.reason = _NO_MATCH
            return False
        if len(elements) > 1:
            raise AmbiguousLocatorError(
                f"{len(elements)} elements matched {self.locator}, expected exactly one",
                locator=self.locator,
            )

        element = elements[0]
        if self.state == PRESENT:
            return element
        if not element.is_displayed():
            self.reason = _HIDDEN
            return False
        if self.state == VISIBLE:
            return element
        if not element.is_enabled():
            self.reason = _DISABLED
            return False
        if self.state == EDITABLE and element.get_attribute("readonly") is not None:
            self.reason = _READONLY
            return False

        # Stable means the same bounding box on two samples one poll apart.
        # The first sample is taken here so a single poll can succeed.
        if self._last_rect is None:
            self._last_rect = element.rect
            time.sleep(self.poll_frequency)
        rect = element.rect
        if rect != self._last_rect:
            self._last_rect = rect
            self.reason = _MOVING
            return False
        return element


def resolve_element(driver: WebDriver, locator: tuple, state: str = VISIBLE,
                    timeout: float = DEFAULT_WAIT_TIMEOUT, poll_frequency: float = POLL_FREQUENCY):
    """Waits for exactly one element matching the locator to reach the given state.

    Raises AmbiguousLocatorError as soon as several elements match,
    ElementNotFoundError when nothing visible matched in time and
    ActionFailedError when the element stayed disabled, read-only or in motion.
    """
    resolution = _ElementResolution(locator, state, poll_frequency)
    try:
        return _waiter(driver, timeout, poll_frequency).until(resolution)
    except TimeoutException as exc:
        message = f"{resolution.reason} for {locator} after {timeout}s"
        logger.warning(message)
        if resolution.reason in _NOT_FOUND_REASONS:
            raise ElementNotFoundError(message, locator=locator, timeout=timeout) from exc
        raise ActionFailedError(message, locator=locator, timeout=timeout) from exc


def wait_for_element_visible(driver: WebDriver, locator: tuple, timeout: float = DEFAULT_WAIT_TIMEOUT,
                             poll_frequency: float = POLL_FREQUENCY):
    """Waits for an element to be visible on the page."""
    try:
        return _waiter(driver, timeout, poll_frequency).until(
            EC.visibility_of_element_located(locator)
        )
    except TimeoutException as exc:
        logger.warning(f"Timeout waiting for element located by {locator} to be visible.")
        raise WaitTimeoutError(
            f"{locator} not visible after {timeout}s", locator=locator, timeout=timeout
        ) from exc


def wait_for_element_not_present(driver: WebDriver, locator: tuple, timeout: float = DEFAULT_WAIT_TIMEOUT,
                                 poll_frequency: float = POLL_FREQUENCY):
    """Waits for an element to no longer be present in the DOM or visible."""
    try:
        _waiter(driver, timeout, poll_frequency).until(
            EC.invisibility_of_element_located(locator)
        )
    except TimeoutException as exc:
        logger.warning(f"Timeout waiting for element located by {locator} to disappear or become invisible.")
        raise WaitTimeoutError(
            f"{locator} still visible after {timeout}s", locator=locator, timeout=timeout
        ) from exc


class _NetworkIdle:
    """Satisfied once the document is complete and no new resource timing
    entries appeared for idle_ms."""

    def __init__(self, idle_ms: int):
        self.idle_seconds = idle_ms / 1000
        self._count = None
        self._since = None

    def __call__(self, driver):
        if driver.execute_script("return document.readyState") != "complete":
            self._count = None
            return False
        count = driver.execute_script("return performance.getEntriesByType('resource').length")
        now = time.monotonic()
        if count != self._count:
            self._count, self._since = count, now
            return False
        return now - self._since >= self.idle_seconds


def wait_for_network_idle(driver: WebDriver, timeout: float = DEFAULT_WAIT_TIMEOUT,
                          idle_ms: int = NETWORK_IDLE_MS, poll_frequency: float = POLL_FREQUENCY):
    """Waits for the page load event and a quiet network."""
    try:
        _waiter(driver, timeout, poll_frequency).until(_NetworkIdle(idle_ms))
    except TimeoutException as exc:
        logger.warning(f"Timeout waiting for page load after {timeout}s.")
        raise LoadTimeoutError(f"page not loaded after {timeout}s", timeout=timeout) from exc
