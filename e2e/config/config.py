# e2e/config/config.py

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional, Tuple

from dotenv import dotenv_values

# --- General Configuration ---
# The site under test
BASE_URL = "https://www.midnightsociety.com"

# Browser engine names accepted in BROWSER / --browser, mapped to Selenium drivers
BROWSER_ALIASES = {
    "chromium": "chrome",
    "chrome": "chrome",
    "firefox": "firefox",
    "edge": "edge",
    "webkit": "safari",
    "safari": "safari",
}
DEFAULT_BROWSER = "chromium"

# Capture policy for the SCREENSHOT variable
SCREENSHOT_ON = "on"
SCREENSHOT_OFF = "off"
SCREENSHOT_ON_FAILURE = "only-on-failure"
SCREENSHOT_POLICIES = (SCREENSHOT_ON, SCREENSHOT_OFF, SCREENSHOT_ON_FAILURE)

# --- Wait Times (seconds) ---
# Default explicit wait timeout for element resolution
DEFAULT_WAIT_TIMEOUT = 10
# Page load timeout used by driver.get()
NAVIGATION_TIMEOUT = 30
# How often WebDriverWait re-evaluates its condition
POLL_FREQUENCY = 0.25
# The network counts as idle after this long without new resource entries (ms)
NETWORK_IDLE_MS = 500

# --- Browser Window ---
DESKTOP_WINDOW_SIZE = (1280, 720)
MOBILE_WINDOW_SIZE = (390, 844)

# --- Artifacts ---
RESULTS_DIR = Path("test-results")

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off", "")


def parse_bool(value: str, name: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE:
        return True
    if normalized in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean, got {value!r}")


@dataclass(frozen=True)
class Settings:
    """Run configuration, built once and handed to every BasePage."""

    base_url: str = BASE_URL
    browser: str = DEFAULT_BROWSER
    headless: bool = True
    screenshot: str = SCREENSHOT_ON_FAILURE
    video: bool = False
    remote_url: Optional[str] = None
    default_timeout: float = DEFAULT_WAIT_TIMEOUT
    navigation_timeout: float = NAVIGATION_TIMEOUT
    poll_frequency: float = POLL_FREQUENCY
    network_idle_ms: int = NETWORK_IDLE_MS
    window_size: Tuple[int, int] = DESKTOP_WINDOW_SIZE
    screenshot_dir: Path = field(default=RESULTS_DIR / "screenshots")
    log_level: str = "INFO"

    def __post_init__(self):
        if self.browser not in BROWSER_ALIASES:
            raise ValueError(
                f"Unsupported browser: {self.browser} (expected one of {', '.join(BROWSER_ALIASES)})"
            )
        if self.screenshot not in SCREENSHOT_POLICIES:
            raise ValueError(
                f"SCREENSHOT must be one of {', '.join(SCREENSHOT_POLICIES)}, got {self.screenshot!r}"
            )
        if self.default_timeout <= 0 or self.navigation_timeout <= 0:
            raise ValueError("Timeouts must be positive")

    @property
    def driver_name(self) -> str:
        """Selenium driver family for the configured browser engine."""
        return BROWSER_ALIASES[self.browser]


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Builds Settings from environment variables.

    With no explicit mapping, values from a local .env file are merged under
    the real process environment (process values win).
    """
    if env is None:
        dotenv = {key: value for key, value in dotenv_values().items() if value is not None}
        env = {**dotenv, **os.environ}

    return Settings(
        base_url=env.get("BASE_URL", BASE_URL).rstrip("/"),
        browser=env.get("BROWSER", DEFAULT_BROWSER).strip().lower(),
        headless=parse_bool(env.get("HEADLESS", "true"), "HEADLESS"),
        screenshot=env.get("SCREENSHOT", SCREENSHOT_ON_FAILURE).strip().lower(),
        video=parse_bool(env.get("VIDEO", "false"), "VIDEO"),
        remote_url=env.get("SELENIUM_REMOTE_URL") or None,
        default_timeout=float(env.get("DEFAULT_WAIT_TIMEOUT", DEFAULT_WAIT_TIMEOUT)),
        navigation_timeout=float(env.get("NAVIGATION_TIMEOUT", NAVIGATION_TIMEOUT)),
        screenshot_dir=Path(env.get("SCREENSHOT_DIR", RESULTS_DIR / "screenshots")),
        log_level=env.get("LOG_LEVEL", "INFO").upper(),
    )
