"""
pagekit - Page-object element handles for Selenium

Wraps remote WebElements with reload, query, cast and wait helpers
for UI test automation.
"""

__version__ = "0.1.0"

from pagekit.core import ElementQuery, Selector, create_driver
from pagekit.elements import Element, ElementType

__all__ = [
    "Element",
    "ElementQuery",
    "ElementType",
    "Selector",
    "create_driver",
    "__version__",
]
