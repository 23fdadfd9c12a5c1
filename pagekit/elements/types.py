"""
Element Types - Closed set of element variants.

Casts and typed queries name their target through ElementType. Element
subclasses defined by page objects are accepted wherever an
ElementType is.
"""

from enum import Enum
from typing import Type, Union

from selenium.webdriver.remote.webelement import WebElement

from pagekit.elements.checkbox import CheckboxElement
from pagekit.elements.dropdown import DropdownElement
from pagekit.elements.element import Element
from pagekit.elements.input import InputElement
from pagekit.elements.table import TableElement


class ElementType(Enum):
    ELEMENT = "element"
    CHECKBOX = "checkbox"
    DROPDOWN = "dropdown"
    INPUT = "input"
    TABLE = "table"

    @property
    def element_class(self) -> Type[Element]:
        return ELEMENT_CLASSES[self]


ELEMENT_CLASSES = {
    ElementType.ELEMENT: Element,
    ElementType.CHECKBOX: CheckboxElement,
    ElementType.DROPDOWN: DropdownElement,
    ElementType.INPUT: InputElement,
    ElementType.TABLE: TableElement,
}

ElementTarget = Union[ElementType, str, Type[Element]]


def resolve_element_class(target: ElementTarget) -> Type[Element]:
    """
    Get the element class for a cast or query target.

    Args:
        target: ElementType, its value (e.g. "dropdown") or an Element subclass

    Raises:
        ValueError: If the target names no known element type
    """
    if isinstance(target, ElementType):
        return target.element_class
    if isinstance(target, str):
        return ElementType(target.lower()).element_class
    if isinstance(target, type) and issubclass(target, Element):
        return target
    raise ValueError(f"Unknown element type: {target!r}")


def create_element(target: ElementTarget, web_element: WebElement, **options) -> Element:
    """Wrap a remote element into an element of the given type."""
    return resolve_element_class(target)(web_element, **options)
