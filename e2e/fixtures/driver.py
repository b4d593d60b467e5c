# e2e/fixtures/driver.py

"""pytest plugin providing the WebDriver and page object fixtures.

Registered from the root conftest.py through ``pytest_plugins``.
"""

import dataclasses
import logging

import pytest

from config.config import MOBILE_WINDOW_SIZE, load_settings
from page_objects.base_page import BasePage
from page_objects.home_page import HomePage
from page_objects.navigation_page import NavigationPage
from utils.browser_factory import create_driver
from utils.exceptions import PageObjectError
from utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


def pytest_addoption(parser):
    group = parser.getgroup("e2e", "Midnight Society browser tests")
    group.addoption("--browser", action="store", default=None,
                    help="Browser engine: chromium, firefox, edge or webkit (overrides BROWSER)")
    group.addoption("--headed", action="store_true", default=False,
                    help="Show the browser window (overrides HEADLESS)")
    group.addoption("--base-url", action="store", default=None,
                    help="Site under test (overrides BASE_URL)")


def pytest_configure(config):
    setup_logging(load_settings().log_level)


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    # Keep each phase's report on the item so fixtures can see the outcome at teardown
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)

    # Screenshots are taken during fixture teardown; show them in the HTML report
    pytest_html = item.config.pluginmanager.getplugin("html")
    if pytest_html is None or report.when != "teardown":
        return
    extras = getattr(report, "extras", [])
    for name, value in item.user_properties:
        if name == "screenshot":
            extras.append(pytest_html.extras.image(value))
    report.extras = extras


@pytest.fixture(scope="session")
def settings(request):
    """Settings for the run: environment first, command line on top."""
    overrides = {}
    browser = request.config.getoption("--browser")
    if browser:
        overrides["browser"] = browser.lower()
    if request.config.getoption("--headed"):
        overrides["headless"] = False
    base_url = request.config.getoption("--base-url")
    if base_url:
        overrides["base_url"] = base_url.rstrip("/")
    return dataclasses.replace(load_settings(), **overrides)


def _should_capture(item, policy: str) -> bool:
    if policy == "on":
        return True
    if policy == "only-on-failure":
        report = getattr(item, "rep_call", None)
        return report is not None and report.failed
    return False


def _driver_for(request, settings):
    driver = create_driver(settings)
    yield driver

    try:
        if _should_capture(request.node, settings.screenshot):
            try:
                path = BasePage(driver, settings).take_screenshot(request.node.nodeid)
                request.node.user_properties.append(("screenshot", str(path)))
            except PageObjectError:
                logger.exception(f"Could not capture screenshot for {request.node.nodeid}")
    finally:
        logger.info("Quitting WebDriver.")
        driver.quit()


@pytest.fixture
def driver(request, settings):
    """Provides a WebDriver instance per test."""
    yield from _driver_for(request, settings)


@pytest.fixture
def mobile_driver(request, settings):
    """WebDriver with a phone-sized window, for the collapsed navigation."""
    yield from _driver_for(request, dataclasses.replace(settings, window_size=MOBILE_WINDOW_SIZE))


@pytest.fixture
def base_page(driver, settings):
    return BasePage(driver, settings)


@pytest.fixture
def home_page(base_page):
    return HomePage(base_page)


@pytest.fixture
def navigation_page(base_page):
    return NavigationPage(base_page)


@pytest.fixture
def mobile_navigation_page(mobile_driver, settings):
    return NavigationPage(BasePage(mobile_driver, settings))
