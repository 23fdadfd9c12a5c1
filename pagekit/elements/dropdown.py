"""
Dropdown element.

Wraps Selenium's Select helper. The helper holds the remote element it
was built for, so it is dropped on invalidate() and rebuilt lazily.
"""

from typing import List, Optional

from selenium.webdriver.support.select import Select

from pagekit.elements.element import Element
from pagekit.exceptions import InvalidElementTypeError


class DropdownElement(Element):
    """Single-choice <select> element."""

    def __init__(self, *args, **kwargs):
        self._select: Optional[Select] = None
        super().__init__(*args, **kwargs)

    def normalize(self) -> None:
        if self.get_tag_name() != "select":
            raise InvalidElementTypeError(f"Element {self.by} is not a <select>")

    def invalidate(self) -> None:
        self._select = None

    @property
    def select_helper(self) -> Select:
        if self._select is None:
            self._select = Select(self)
        return self._select

    def get_options(self) -> List[str]:
        """Visible texts of all options."""
        return [option.text for option in self.select_helper.options]

    def get_value(self) -> Optional[str]:
        """Visible text of the selected option, or None if nothing is selected."""
        selected = self.select_helper.all_selected_options
        return selected[0].text if selected else None

    def select(self, text: str) -> "DropdownElement":
        """Select an option by its visible text."""
        self.select_helper.select_by_visible_text(text)
        return self

    def select_by_value(self, value: str) -> "DropdownElement":
        self.select_helper.select_by_value(value)
        return self
