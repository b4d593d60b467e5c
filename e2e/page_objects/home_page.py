# e2e/page_objects/home_page.py

import logging
from pathlib import Path

from selenium.webdriver.common.by import By

from .base_page import BasePage

logger = logging.getLogger(__name__)


class HomePage:
    """Page Object for the Midnight Society landing page."""

    EXPECTED_TITLE = "Midnight Society"

    # --- Locators ---
    HERO_SECTION = (By.CSS_SELECTOR, "section.hero, [data-testid='hero']")
    HERO_HEADING = (By.CSS_SELECTOR, "section.hero h1, [data-testid='hero'] h1")
    PRIMARY_CTA = (By.CSS_SELECTOR, "section.hero a.btn, [data-testid='hero-cta']")
    NEWSLETTER_EMAIL_INPUT = (By.CSS_SELECTOR, "form.newsletter input[type='email']")
    NEWSLETTER_SUBMIT_BUTTON = (By.CSS_SELECTOR, "form.newsletter button[type='submit']")
    FOOTER = (By.CSS_SELECTOR, "footer")

    def __init__(self, page: BasePage):
        self.page = page

    def open(self):
        """Opens the home page and waits for it to finish loading."""
        self.page.go_home()
        self.page.wait_for_page_load()

    def is_home_page_loaded(self) -> bool:
        """True when the hero section shows and the title contains EXPECTED_TITLE.

        Containment rather than equality, so titles like "Midnight Society | Home" pass.
        """
        if not self.page.wait_for_element(self.HERO_SECTION):
            return False
        return self.EXPECTED_TITLE in self.page.get_page_title()

    def get_hero_heading(self) -> str:
        return self.page.get_text(self.HERO_HEADING)

    def click_primary_cta(self):
        self.page.click(self.PRIMARY_CTA)

    def enter_newsletter_email(self, email: str):
        self.page.fill(self.NEWSLETTER_EMAIL_INPUT, email)

    def get_newsletter_email(self) -> str:
        return self.page.get_input_value(self.NEWSLETTER_EMAIL_INPUT)

    def subscribe_to_newsletter(self, email: str):
        """Fills the newsletter form and submits it."""
        self.page.scroll_to_element(self.NEWSLETTER_EMAIL_INPUT)
        self.enter_newsletter_email(email)
        self.page.click(self.NEWSLETTER_SUBMIT_BUTTON)
        logger.info("Submitted newsletter form.")

    def scroll_to_footer(self):
        self.page.scroll_to_element(self.FOOTER)

    def is_footer_visible(self) -> bool:
        return self.page.is_element_visible(self.FOOTER)

    def capture(self, name: str = "home") -> Path:
        return self.page.take_screenshot(name)
