# e2e/tests/unit/test_home_page.py

from unittest.mock import MagicMock, call

import pytest

from fakes import make_element, make_input
from page_objects.base_page import BasePage
from page_objects.home_page import HomePage
from utils.exceptions import ActionFailedError, ElementNotFoundError


@pytest.fixture
def mock_page():
    return MagicMock(spec=BasePage)


def test_open_goes_home_then_waits_for_load(mock_page):
    HomePage(mock_page).open()

    assert mock_page.mock_calls == [call.go_home(), call.wait_for_page_load()]


def test_is_home_page_loaded_true(mock_page):
    mock_page.wait_for_element.return_value = True
    mock_page.get_page_title.return_value = "Midnight Society | Home"

    assert HomePage(mock_page).is_home_page_loaded() is True
    mock_page.wait_for_element.assert_called_once_with(HomePage.HERO_SECTION)


def test_is_home_page_loaded_false_without_hero(mock_page):
    mock_page.wait_for_element.return_value = False

    assert HomePage(mock_page).is_home_page_loaded() is False
    mock_page.get_page_title.assert_not_called()


def test_is_home_page_loaded_false_on_other_title(mock_page):
    mock_page.wait_for_element.return_value = True
    mock_page.get_page_title.return_value = "404 Not Found"

    assert HomePage(mock_page).is_home_page_loaded() is False


def test_is_home_page_loaded_propagates_errors(mock_page):
    mock_page.wait_for_element.return_value = True
    mock_page.get_page_title.side_effect = ActionFailedError("session lost")

    with pytest.raises(ActionFailedError):
        HomePage(mock_page).is_home_page_loaded()


def test_subscribe_to_newsletter_scrolls_fills_and_submits(mock_page):
    HomePage(mock_page).subscribe_to_newsletter("night.owl@example.com")

    assert mock_page.mock_calls == [
        call.scroll_to_element(HomePage.NEWSLETTER_EMAIL_INPUT),
        call.fill(HomePage.NEWSLETTER_EMAIL_INPUT, "night.owl@example.com"),
        call.click(HomePage.NEWSLETTER_SUBMIT_BUTTON),
    ]


def test_capture_uses_page_screenshot(mock_page, tmp_path):
    mock_page.take_screenshot.return_value = tmp_path / "home.png"

    assert HomePage(mock_page).capture() == tmp_path / "home.png"
    mock_page.take_screenshot.assert_called_once_with("home")


# --- Against a real BasePage and fake driver ---

def test_newsletter_email_round_trip(page, dom):
    dom.add(HomePage.NEWSLETTER_EMAIL_INPUT, make_input())
    home = HomePage(page)

    home.enter_newsletter_email("night.owl@example.com")

    assert home.get_newsletter_email() == "night.owl@example.com"


def test_hero_heading_and_cta(page, dom):
    dom.add(HomePage.HERO_HEADING, make_element(text="Welcome to the Society"))
    cta = dom.add(HomePage.PRIMARY_CTA, make_element())
    home = HomePage(page)

    assert home.get_hero_heading() == "Welcome to the Society"
    home.click_primary_cta()
    cta.click.assert_called_once_with()


def test_missing_cta_propagates_not_found(page):
    with pytest.raises(ElementNotFoundError):
        HomePage(page).click_primary_cta()


def test_loaded_home_page(page, dom):
    dom.add(HomePage.HERO_SECTION, make_element())

    assert HomePage(page).is_home_page_loaded() is True


def test_footer_visibility_after_scroll(page, dom, fake_driver):
    footer = dom.add(HomePage.FOOTER, make_element())
    home = HomePage(page)

    home.scroll_to_footer()

    assert fake_driver.execute_script.call_args.args[1] is footer
    assert home.is_footer_visible() is True
