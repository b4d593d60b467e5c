# e2e/tests/unit/conftest.py

from unittest.mock import MagicMock

import pytest
from selenium.webdriver.remote.webdriver import WebDriver

from config.config import Settings
from fakes import FakeDom
from page_objects.base_page import BasePage


@pytest.fixture
def dom():
    return FakeDom()


@pytest.fixture
def fake_driver(dom):
    driver = MagicMock(spec=WebDriver)
    driver.find_elements.side_effect = dom.find_elements
    driver.find_element.side_effect = dom.find_element
    driver.title = "Midnight Society | Home"
    driver.save_screenshot.return_value = True
    driver.execute_script.side_effect = lambda script, *args: "complete" if "readyState" in script else 0
    return driver


@pytest.fixture
def unit_settings(tmp_path):
    # Short timeouts so failing waits finish quickly
    return Settings(
        base_url="https://midnight.test",
        default_timeout=0.2,
        navigation_timeout=1,
        poll_frequency=0.01,
        network_idle_ms=0,
        screenshot_dir=tmp_path / "screenshots",
    )


@pytest.fixture
def page(fake_driver, unit_settings):
    return BasePage(fake_driver, unit_settings)
