# e2e/utils/browser_factory.py

import logging

from selenium import webdriver
from selenium.common.exceptions import WebDriverException
from selenium.webdriver.chrome.service import Service as ChromeService
from selenium.webdriver.edge.service import Service as EdgeService
from selenium.webdriver.firefox.service import Service as FirefoxService
from webdriver_manager.chrome import ChromeDriverManager
from webdriver_manager.firefox import GeckoDriverManager
from webdriver_manager.microsoft import EdgeChromiumDriverManager

from config.config import Settings
from utils.exceptions import BrowserSetupError

logger = logging.getLogger(__name__)


def build_options(settings: Settings):
    """Builds the Selenium options object for the configured browser."""
    name = settings.driver_name
    width, height = settings.window_size

    if name == "chrome":
        options = webdriver.ChromeOptions()
    elif name == "edge":
        options = webdriver.EdgeOptions()
    elif name == "firefox":
        options = webdriver.FirefoxOptions()
    else:
        options = webdriver.SafariOptions()

    if name in ("chrome", "edge"):
        if settings.headless:
            options.add_argument("--headless=new")
        options.add_argument(f"--window-size={width},{height}")
        options.add_argument("--disable-gpu")
    elif name == "firefox":
        if settings.headless:
            options.add_argument("-headless")
        options.add_argument(f"--width={width}")
        options.add_argument(f"--height={height}")
    elif settings.headless and not settings.remote_url:
        # safaridriver has no headless mode
        raise BrowserSetupError("Safari (webkit) cannot run headless; set HEADLESS=false")

    if settings.remote_url and settings.video:
        # Selenoid / Moon style recording, picked up by grids that support it
        options.set_capability("selenoid:options", {
            "enableVideo": True,
            "videoName": "session.mp4",
        })
    return options


def create_driver(settings: Settings):
    """Provides a WebDriver for the given settings.

    Local Chrome, Edge and Firefox drivers are downloaded and managed by
    webdriver_manager. A remote grid is used when SELENIUM_REMOTE_URL is set.
    """
    name = settings.driver_name
    options = build_options(settings)
    logger.info(
        f"Setting up WebDriver for browser: {settings.browser}",
        extra={"extra_context": {"headless": settings.headless, "remote": bool(settings.remote_url)}},
    )
    if settings.video and not settings.remote_url:
        logger.warning("VIDEO is only honoured on a remote grid; recording is disabled for local runs.")

    try:
        if settings.remote_url:
            driver = webdriver.Remote(command_executor=settings.remote_url, options=options)
        elif name == "chrome":
            service = ChromeService(ChromeDriverManager().install())
            driver = webdriver.Chrome(service=service, options=options)
        elif name == "edge":
            service = EdgeService(EdgeChromiumDriverManager().install())
            driver = webdriver.Edge(service=service, options=options)
        elif name == "firefox":
            service = FirefoxService(GeckoDriverManager().install())
            driver = webdriver.Firefox(service=service, options=options)
        else:
            driver = webdriver.Safari(options=options)
    except WebDriverException as exc:
        raise BrowserSetupError(f"Could not start {settings.browser}: {exc.msg}") from exc

    driver.set_page_load_timeout(settings.navigation_timeout)
    if name == "safari" or settings.remote_url:
        driver.set_window_size(*settings.window_size)
    return driver
