# e2e/page_objects/navigation_page.py

import logging

from selenium.webdriver.common.by import By

from .base_page import BasePage

logger = logging.getLogger(__name__)


class NavigationPage:
    """Page Object for the site header: desktop links and the mobile menu.

    Opening an already open mobile menu (or closing a closed one) is a no-op.
    """

    # --- Locators ---
    HEADER_NAV = (By.CSS_SELECTOR, "header nav")
    LOGO = (By.CSS_SELECTOR, "header a.logo, header [data-testid='logo']")
    NAV_LINKS = (By.CSS_SELECTOR, "header nav a")
    HAMBURGER_BUTTON = (By.CSS_SELECTOR, "button.hamburger, button[aria-label='Open menu']")
    MOBILE_MENU_PANEL = (By.CSS_SELECTOR, ".mobile-menu, [data-testid='mobile-menu']")
    MOBILE_MENU_CLOSE_BUTTON = (By.CSS_SELECTOR, ".mobile-menu button.close, button[aria-label='Close menu']")

    def __init__(self, page: BasePage):
        self.page = page

    def nav_link_locator(self, name: str) -> tuple:
        return (By.XPATH, f'//header//nav//a[normalize-space()="{name}"]')

    def is_navigation_visible(self) -> bool:
        return self.page.is_element_visible(self.HEADER_NAV)

    def get_nav_link_texts(self) -> list:
        return [text.strip() for text in self.page.get_texts(self.NAV_LINKS) if text.strip()]

    def navigate_to_section(self, name: str):
        """Clicks the header link labelled name."""
        self.page.click(self.nav_link_locator(name))
        logger.info(f"Opened section '{name}'")

    def click_logo(self):
        self.page.click(self.LOGO)

    def is_mobile_menu_open(self) -> bool:
        return self.page.is_element_visible(self.MOBILE_MENU_PANEL)

    def open_mobile_menu(self):
        if self.is_mobile_menu_open():
            logger.info("Mobile menu already open.")
            return
        self.page.click(self.HAMBURGER_BUTTON)
        self.page.expect_element(self.MOBILE_MENU_PANEL)
        logger.info("Opened mobile menu.")

    def close_mobile_menu(self):
        if not self.is_mobile_menu_open():
            logger.info("Mobile menu already closed.")
            return
        self.page.click(self.MOBILE_MENU_CLOSE_BUTTON)
        self.page.wait_until_hidden(self.MOBILE_MENU_PANEL)
        logger.info("Closed mobile menu.")
