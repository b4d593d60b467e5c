# e2e/tests/unit/fakes.py

from unittest.mock import MagicMock

from selenium.common.exceptions import NoSuchElementException
from selenium.webdriver.remote.webelement import WebElement


def make_element(displayed=True, enabled=True, text="", readonly=False):
    """A WebElement stand-in with fixed state."""
    element = MagicMock(spec=WebElement)
    element.is_displayed.return_value = displayed
    element.is_enabled.return_value = enabled
    element.text = text
    element.rect = {"x": 0, "y": 0, "width": 120, "height": 32}
    element.get_attribute.side_effect = lambda name: "" if name == "readonly" and readonly else None
    return element


def make_input(**kwargs):
    """A text input whose value follows clear() and send_keys()."""
    element = make_element(**kwargs)
    state = {"value": ""}
    element.clear.side_effect = lambda: state.update(value="")
    element.send_keys.side_effect = lambda text: state.update(value=state["value"] + text)
    element.get_property.side_effect = lambda name: state["value"] if name == "value" else None
    return element


class FakeDom:
    """Maps locators to the elements the fake driver returns for them."""

    def __init__(self):
        self.elements = {}

    def add(self, locator, *elements):
        self.elements[locator] = list(elements)
        return elements[0] if len(elements) == 1 else elements

    def find_elements(self, by, value):
        return list(self.elements.get((by, value), []))

    def find_element(self, by, value):
        matches = self.find_elements(by, value)
        if not matches:
            raise NoSuchElementException(f"no element for {by}={value}")
        return matches[0]
