# e2e/page_objects/base_page.py

import logging
import re
from pathlib import Path
from typing import Optional

from selenium.common.exceptions import (
    ElementClickInterceptedException,
    ElementNotInteractableException,
    InvalidElementStateException,
    TimeoutException,
    WebDriverException,
)
from selenium.webdriver.remote.webdriver import WebDriver

from config.config import Settings
from utils.exceptions import ActionFailedError, NavigationTimeoutError, WaitTimeoutError
from utils.wait_helpers import (
    ACTIONABLE,
    EDITABLE,
    PRESENT,
    VISIBLE,
    resolve_element,
    wait_for_element_not_present,
    wait_for_element_visible,
    wait_for_network_idle,
)

logger = logging.getLogger(__name__)

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]+")

# Selenium errors that mean the element was found but refused the action
_REJECTED_ACTIONS = (
    ElementClickInterceptedException,
    ElementNotInteractableException,
    InvalidElementStateException,
)


class BasePage:
    """Wraps a WebDriver with the small set of operations page objects use.

    Page objects receive an instance of this class and never touch the driver
    directly. Every waiting operation takes an optional ``timeout`` in seconds
    and falls back to ``settings.default_timeout``.
    """

    def __init__(self, driver: WebDriver, settings: Settings):
        self.driver = driver
        self.settings = settings

    def _timeout(self, timeout: Optional[float]) -> float:
        return self.settings.default_timeout if timeout is None else timeout

    def _resolve(self, locator: tuple, state: str, timeout: Optional[float] = None):
        return resolve_element(
            self.driver,
            locator,
            state=state,
            timeout=self._timeout(timeout),
            poll_frequency=self.settings.poll_frequency,
        )

    # --- Navigation ---

    def navigate_to(self, url: str):
        """Navigates to a URL and blocks until the browser reports it loaded."""
        timeout = self.settings.navigation_timeout
        self.driver.set_page_load_timeout(timeout)
        try:
            self.driver.get(url)
        except TimeoutException as exc:
            raise NavigationTimeoutError(f"{url} did not load within {timeout}s", timeout=timeout) from exc
        except WebDriverException as exc:
            raise ActionFailedError(f"Navigation to {url} failed: {exc.msg}") from exc
        logger.info(f"Navigated to {url}")

    def go_home(self):
        """Navigates to the configured base URL."""
        self.navigate_to(self.settings.base_url)

    def get_page_title(self) -> str:
        return self.driver.title

    def wait_for_page_load(self, timeout: Optional[float] = None):
        """Waits for the load event and a quiet network, raising LoadTimeoutError.

        Shares the navigation budget by default since it usually follows navigate_to.
        """
        wait_for_network_idle(
            self.driver,
            timeout=self.settings.navigation_timeout if timeout is None else timeout,
            idle_ms=self.settings.network_idle_ms,
            poll_frequency=self.settings.poll_frequency,
        )

    # --- Interaction ---

    def click(self, locator: tuple, timeout: Optional[float] = None):
        element = self._resolve(locator, ACTIONABLE, timeout)
        try:
            element.click()
        except _REJECTED_ACTIONS as exc:
            raise ActionFailedError(f"Click on {locator} was rejected: {exc.msg}", locator=locator) from exc
        logger.debug(f"Clicked {locator}")

    def fill(self, locator: tuple, text: str, timeout: Optional[float] = None):
        """Replaces the content of an input with text."""
        element = self._resolve(locator, EDITABLE, timeout)
        try:
            element.clear()
            element.send_keys(text)
        except _REJECTED_ACTIONS as exc:
            raise ActionFailedError(f"Fill of {locator} was rejected: {exc.msg}", locator=locator) from exc
        logger.debug(f"Filled {locator}")

    def get_text(self, locator: tuple, timeout: Optional[float] = None) -> str:
        return self._resolve(locator, VISIBLE, timeout).text

    def get_input_value(self, locator: tuple, timeout: Optional[float] = None) -> str:
        """Returns the current value of a form control."""
        return self._resolve(locator, VISIBLE, timeout).get_property("value")

    def get_texts(self, locator: tuple) -> list:
        """Visible text of every element currently matching the locator."""
        return [element.text for element in self.driver.find_elements(*locator) if element.is_displayed()]

    def scroll_to_element(self, locator: tuple, timeout: Optional[float] = None):
        element = self._resolve(locator, PRESENT, timeout)
        self.driver.execute_script("arguments[0].scrollIntoView({block: 'center'});", element)
        logger.debug(f"Scrolled to {locator}")

    # --- Waits and queries ---
    # wait_for_element reports a timeout as False. expect_element and
    # wait_until_hidden are for composed actions and raise WaitTimeoutError.

    def wait_for_element(self, locator: tuple, timeout: Optional[float] = None) -> bool:
        try:
            self.expect_element(locator, timeout)
        except WaitTimeoutError:
            return False
        return True

    def expect_element(self, locator: tuple, timeout: Optional[float] = None):
        return wait_for_element_visible(
            self.driver, locator, self._timeout(timeout), self.settings.poll_frequency
        )

    def wait_until_hidden(self, locator: tuple, timeout: Optional[float] = None):
        wait_for_element_not_present(
            self.driver, locator, self._timeout(timeout), self.settings.poll_frequency
        )

    def is_element_visible(self, locator: tuple) -> bool:
        """Checks the first match right now, without waiting. Never raises."""
        try:
            elements = self.driver.find_elements(*locator)
            return bool(elements) and elements[0].is_displayed()
        except WebDriverException:
            return False

    # --- Diagnostics ---

    def take_screenshot(self, name: str) -> Path:
        """Saves a PNG of the viewport under settings.screenshot_dir."""
        filename = _UNSAFE_FILENAME_CHARS.sub("_", name).strip("_") or "screenshot"
        directory = Path(self.settings.screenshot_dir)
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ActionFailedError(f"Screenshot directory {directory} is not usable: {exc}") from exc
        path = directory / f"{filename}.png"
        try:
            saved = self.driver.save_screenshot(str(path))
        except WebDriverException as exc:
            raise ActionFailedError(f"Screenshot {name!r} failed: {exc.msg}") from exc
        if not saved:
            raise ActionFailedError(f"Screenshot {name!r} could not be written to {path}")
        logger.info(f"Saved screenshot {path}")
        return path
