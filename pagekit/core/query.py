"""
Element Query - Selector resolution.

Builds element handles from selectors, optionally scoped to a context
element. Single-element results remember their selector and parent so
they can be reloaded; multi-element results cannot.
"""

from typing import Any, List, Optional, TYPE_CHECKING
import logging

from selenium.common.exceptions import NoSuchElementException, StaleElementReferenceException
from selenium.webdriver.support.ui import WebDriverWait

from pagekit.core import session
from pagekit.core.conditions import (
    AttributeSpec,
    AttributesPresentCondition,
    ClickableCondition,
    PresentCondition,
    TextPresentCondition,
    VisibleCondition,
)
from pagekit.core.selectors import Selector
from pagekit.core.waitable import Waitable

if TYPE_CHECKING:
    from selenium.webdriver.remote.webdriver import WebDriver
    from selenium.webdriver.remote.webelement import WebElement
    from pagekit.elements.element import Element
    from pagekit.elements.types import ElementType

logger = logging.getLogger(__name__)


class ElementQuery(Waitable):
    """
    Lazily evaluated element lookup.

    Nothing is sent to the browser until one(), all(), exists() or
    count() is called, so a query can be built once and resolved many
    times.

    Example:
        >>> button = ElementQuery("id", "save").one()
        >>> rows = ElementQuery("css:table tr").set_context(form).all()
        >>> ElementQuery("xpath://select").as_type(ElementType.DROPDOWN).one()
    """

    def __init__(self, by: Any, locator: Optional[str] = None, element_type: Optional["ElementType"] = None):
        self.selector = Selector.parse(by, locator)
        self.context: Optional[Any] = None
        self.element_type = element_type

    @staticmethod
    def get_driver() -> "WebDriver":
        """Get the active WebDriver session."""
        return session.get_driver()

    @staticmethod
    def wait(timeout: Optional[float] = None) -> WebDriverWait:
        """Get a wait over the active WebDriver session."""
        return session.wait(timeout)

    def set_context(self, context: Any) -> "ElementQuery":
        """
        Scope the query to an element (or a driver).

        Args:
            context: Element handle, WebElement or WebDriver to search within
        """
        self.context = context
        return self

    def as_type(self, element_type: "ElementType") -> "ElementQuery":
        """Set the element type returned by one() and all()."""
        self.element_type = element_type
        return self

    def _search_root(self) -> Any:
        return self.context if self.context is not None else session.get_driver()

    def _wrap(self, web_element: "WebElement", by: Optional[Selector], with_parent: bool = True) -> "Element":
        from pagekit.elements.element import Element
        from pagekit.elements.types import ElementType, create_element

        parent = self.context if with_parent and isinstance(self.context, Element) else None
        return create_element(
            self.element_type or ElementType.ELEMENT,
            web_element,
            parent=parent,
            by=by,
        )

    def one(self, should_exist: bool = True) -> Optional["Element"]:
        """
        Resolve the first matching element.

        Args:
            should_exist: If False, return None instead of raising when
                nothing matches

        Raises:
            NoSuchElementException: If nothing matches and should_exist is True
        """
        try:
            web_element = self._search_root().find_element(*self.selector)
        except NoSuchElementException:
            if should_exist:
                raise
            logger.debug(f"No element matched {self.selector}")
            return None

        logger.debug(f"Resolved {self.selector} to element {web_element.id}")
        return self._wrap(web_element, self.selector)

    def all(self) -> List["Element"]:
        """Resolve all matching elements (no selector or parent, not reloadable)."""
        web_elements = self._search_root().find_elements(*self.selector)
        logger.debug(f"Resolved {self.selector} to {len(web_elements)} elements")
        return [self._wrap(web_element, None, with_parent=False) for web_element in web_elements]

    def count(self) -> int:
        return len(self._search_root().find_elements(*self.selector))

    def exists(self) -> bool:
        return self.count() > 0

    # Condition checks evaluate the first match; a match detached mid-check
    # counts as not matching so the next poll resolves it again

    def is_present(self) -> bool:
        return self.exists()

    def is_visible(self) -> bool:
        element = self.one(should_exist=False)
        return element is not None and element.is_visible()

    def is_clickable(self) -> bool:
        element = self.one(should_exist=False)
        if element is None:
            return False
        try:
            return element.is_clickable()
        except StaleElementReferenceException:
            return False

    def get_text(self) -> Optional[str]:
        element = self.one(should_exist=False)
        if element is None:
            return None
        try:
            return element.get_text()
        except StaleElementReferenceException:
            return None

    def get_attribute(self, name: str) -> Optional[str]:
        element = self.one(should_exist=False)
        if element is None:
            return None
        try:
            return element.get_attribute(name)
        except StaleElementReferenceException:
            return None

    def get_clickable_condition(self) -> ClickableCondition:
        return ClickableCondition(self)

    def get_present_condition(self) -> PresentCondition:
        return PresentCondition(self)

    def get_visible_condition(self) -> VisibleCondition:
        return VisibleCondition(self)

    def get_text_present_condition(self, text: str) -> TextPresentCondition:
        return TextPresentCondition(self, text)

    def get_attributes_present_condition(self, attributes: AttributeSpec) -> AttributesPresentCondition:
        return AttributesPresentCondition(self, attributes)

    def get_ready_condition(self) -> PresentCondition:
        return self.get_present_condition()

    def __repr__(self) -> str:
        return f"ElementQuery({str(self.selector)!r})"
