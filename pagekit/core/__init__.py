"""Core module - Session, selectors, queries and driver management."""

from pagekit.core.selectors import Selector, to_xpath_fragment
from pagekit.core.query import ElementQuery
from pagekit.core.driver_factory import create_driver, driver_session

__all__ = ["Selector", "to_xpath_fragment", "ElementQuery", "create_driver", "driver_session"]
