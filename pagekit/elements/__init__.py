"""Element handles - Page-object wrappers over remote elements."""

from pagekit.elements.element import Element, ElementOptions
from pagekit.elements.checkbox import CheckboxElement
from pagekit.elements.dropdown import DropdownElement
from pagekit.elements.input import InputElement
from pagekit.elements.table import TableElement, TableOptions
from pagekit.elements.types import ElementType, create_element, resolve_element_class

__all__ = [
    "Element",
    "ElementOptions",
    "CheckboxElement",
    "DropdownElement",
    "InputElement",
    "TableElement",
    "TableOptions",
    "ElementType",
    "create_element",
    "resolve_element_class",
]
