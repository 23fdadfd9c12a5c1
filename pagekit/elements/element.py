"""
Element - Page-object element handle.

Binds a logical page element (selector plus optional parent) to a live
remote element, and adds reload, query, cast and wait helpers on top
of Selenium's WebElement.
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Optional, Type, TYPE_CHECKING
import logging

from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support import expected_conditions as EC

from pagekit.core import session
from pagekit.core.conditions import (
    AttributeSpec,
    AttributesPresentCondition,
    ClickableCondition,
    Condition,
    PresentCondition,
    ReloadedCondition,
    TextPresentCondition,
    VisibleCondition,
)
from pagekit.core.query import ElementQuery
from pagekit.core.selectors import Selector, to_xpath_fragment
from pagekit.core.waitable import Waitable
from pagekit.elements.base import BaseElement
from pagekit.exceptions import ElementUsageError

if TYPE_CHECKING:
    from pagekit.elements.types import ElementType

logger = logging.getLogger(__name__)

HIGHLIGHT_SCRIPT = 'arguments[0].style.border="3px solid #ff9800";'
FIRE_EVENT_SCRIPT = "arguments[0].dispatchEvent(new Event(arguments[1]));"


@dataclass
class ElementOptions:
    """Options recognized by every element handle."""
    parent: Optional["Element"] = None  # Enclosing element, never set for multi-element results
    by: Optional[Selector] = None  # Selector used to reload the element


class Element(BaseElement, Waitable):
    """
    Generic page element.

    Elements returned by a single-element query remember their selector
    and parent, so a handle that went stale after a page update can be
    re-resolved in place with reload().

    Subclasses may set `selector` to make find() work, extend
    `options_class` with extra fields, and override invalidate() and
    normalize().

    Example:
        >>> form = ElementQuery("id", "login-form").one()
        >>> form.query("name", "user").one().send_keys("admin")
        >>> form.query("css:button[type=submit]").one().click()
        >>> form.wait_until_reloaded()
    """

    options_class: ClassVar[Type[ElementOptions]] = ElementOptions
    selector: ClassVar[Optional[Any]] = None

    def __init__(self, element: WebElement, options: Optional[ElementOptions] = None, **kwargs):
        """
        Initialize element.

        Args:
            element: Remote element to bind to
            options: Options instance of this class's options_class
            **kwargs: Option fields, used when options is not given
        """
        super().__init__(element)

        if options is None:
            options = self.options_class(**kwargs)
        elif kwargs:
            raise TypeError("Pass either an options instance or option keywords, not both")

        self.options = options
        self.parent_element: Optional[Element] = options.parent
        self.by: Optional[Selector] = None if options.by is None else Selector.parse(options.by)

        self.normalize()

    @classmethod
    def find(cls) -> "ElementQuery":
        """
        Query for this element directly on the page.

        Raises:
            ElementUsageError: If the class does not define a selector
        """
        if cls.selector is None:
            raise ElementUsageError("Element cannot be located without selector.")

        return ElementQuery(cls.selector, element_type=cls)

    def invalidate(self) -> None:
        """
        Invalidate element state.

        Override to reset cached objects that a reload would leave broken.
        """

    def normalize(self) -> None:
        """
        Perform element selector normalization.

        Override to check that the element is selected properly.
        """

    def reload(self) -> "Element":
        """
        Reload stalled element if reload is possible.

        Raises:
            ElementUsageError: If the element came from a multi-element query
        """
        if self.by is None:
            raise ElementUsageError(
                "Cannot reload stalled element selected as a part of multi-element selection."
            )

        if self.parent_element is not None:
            self.parent_element.reload()

        self.invalidate()
        query = ElementQuery(self.by)
        if self.parent_element is not None:
            query.set_context(self.parent_element)

        self.set_element(query.one())
        logger.debug(f"Reloaded {self.by} as element {self.id}")
        self.normalize()

        return self

    def parents(self, by: Any, locator: Optional[str] = None) -> ElementQuery:
        """Get a query over this element's ancestors matching the selector."""
        return self.query("xpath", "./ancestor::" + to_xpath_fragment(by, locator))

    def query(self, by: Any, locator: Optional[str] = None) -> ElementQuery:
        """Get a query scoped to this element."""
        return ElementQuery(by, locator).set_context(self)

    def fire_event(self, event: str = "change") -> "Element":
        """Dispatch an HTML event to the element."""
        self.driver.execute_script(FIRE_EVENT_SCRIPT, self, event)
        return self

    def highlight(self) -> "Element":
        """Set an orange border around the element, for test debugging only."""
        self.driver.execute_script(HIGHLIGHT_SCRIPT, self)
        return self

    def cast(self, element_type: "ElementType", **options) -> "Element":
        """
        Get an element of another type bound to the same remote element.

        Args:
            element_type: Target ElementType
            **options: Extra option fields of the target type

        Returns:
            New element sharing this element's parent and selector
        """
        from pagekit.elements.types import resolve_element_class

        element_class = resolve_element_class(element_type)
        options.update(parent=self.parent_element, by=self.by)
        logger.debug(f"Casting element {self.id} to {element_class.__name__}")
        return element_class(self, **options)

    def is_clickable(self) -> bool:
        return self.is_displayed() and self.is_enabled()

    def get_clickable_condition(self) -> Condition:
        return ClickableCondition(self)

    def get_present_condition(self) -> Condition:
        return PresentCondition(self)

    def get_visible_condition(self) -> Condition:
        return VisibleCondition(self)

    def get_text_present_condition(self, text: str) -> Condition:
        return TextPresentCondition(self, text)

    def get_attributes_present_condition(self, attributes: AttributeSpec) -> Condition:
        return AttributesPresentCondition(self, attributes)

    def get_ready_condition(self) -> Condition:
        return self.get_clickable_condition()

    def wait_until_reloaded(self, timeout: Optional[float] = None) -> "Element":
        """
        Wait until the element goes stale and can be located again.

        Raises:
            ElementUsageError: If the element came from a multi-element query
            TimeoutException: If the element is not reloaded in time
        """
        if self.by is None:
            raise ElementUsageError("Cannot wait for element reload on element selected in multi-element query.")

        session.wait(timeout).until(ReloadedCondition(self), f"Element {self.by} was not reloaded")
        return self

    def wait_until_selected(self, timeout: Optional[float] = None) -> "Element":
        session.wait(timeout).until(EC.element_to_be_selected(self), f"Element {self.by} was not selected")
        return self

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} id={self.id!r} by={str(self.by) if self.by else None!r}>"

