"""Checkbox element."""

from pagekit.elements.element import Element
from pagekit.exceptions import InvalidElementTypeError


class CheckboxElement(Element):
    """Checkbox input (<input type="checkbox">)."""

    def normalize(self) -> None:
        if self.get_tag_name() != "input" or (self.get_attribute("type") or "").lower() != "checkbox":
            raise InvalidElementTypeError(f"Element {self.by} is not a checkbox")

    def is_checked(self) -> bool:
        return self.is_selected()

    def set(self, checked: bool) -> "CheckboxElement":
        """Click the checkbox if its state differs from `checked`."""
        if self.is_checked() != checked:
            self.click()
        return self

    def check(self) -> "CheckboxElement":
        return self.set(True)

    def uncheck(self) -> "CheckboxElement":
        return self.set(False)
