"""Text input element."""

from pagekit.elements.element import Element
from pagekit.exceptions import InvalidElementTypeError

INPUT_TAGS = ("input", "textarea")


class InputElement(Element):
    """Text <input> or <textarea>."""

    def normalize(self) -> None:
        if self.get_tag_name() not in INPUT_TAGS:
            raise InvalidElementTypeError(f"Element {self.by} is not a text input")

    def clear_value(self) -> "InputElement":
        self.clear()
        return self

    def overwrite(self, text: str) -> "InputElement":
        """Replace the current value and fire a change event."""
        self.clear()
        self.send_keys(text)
        return self.fire_event("change")
