"""
Base Element - State accessors over a Selenium WebElement.

BaseElement is a WebElement, so it can be passed straight to
execute_script() and expected_conditions. It adds stale detection and
a few accessors that never raise for detached nodes.
"""

from typing import Optional, TYPE_CHECKING

from selenium.common.exceptions import NoSuchElementException, StaleElementReferenceException
from selenium.webdriver.remote.webelement import WebElement

if TYPE_CHECKING:
    from selenium.webdriver.remote.webdriver import WebDriver


class BaseElement(WebElement):
    """WebElement with stale-safe state accessors."""

    def __init__(self, element: WebElement):
        super().__init__(element.parent, element.id)

    @property
    def driver(self) -> "WebDriver":
        """The WebDriver session this element belongs to."""
        return self._parent

    def set_element(self, element: WebElement) -> None:
        """Rebind this handle to another remote element."""
        self._parent = element.parent
        self._id = element.id

    def is_stalled(self) -> bool:
        """Check whether the backing DOM node has been detached."""
        try:
            self.is_enabled()
        except StaleElementReferenceException:
            return True
        return False

    def is_present(self) -> bool:
        return not self.is_stalled()

    def is_visible(self) -> bool:
        """Check if the element is displayed, treating detached nodes as hidden."""
        try:
            return self.is_displayed()
        except (StaleElementReferenceException, NoSuchElementException):
            return False

    def get_text(self) -> str:
        return self.text

    def get_tag_name(self) -> str:
        return self.tag_name.lower()

    def get_value(self) -> Optional[str]:
        return self.get_attribute("value")
