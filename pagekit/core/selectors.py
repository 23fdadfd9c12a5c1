"""
Selectors - Locator values and XPath translation.

A Selector is a (strategy, value) pair understood by Selenium's
find_element(). Selectors can be written in several shorthand forms:

    >>> Selector.parse("id", "login")
    Selector(by='id', value='login')
    >>> Selector.parse("xpath:./ancestor::form")
    Selector(by='xpath', value='./ancestor::form')
    >>> Selector.parse("button.primary")
    Selector(by='css selector', value='button.primary')
"""

from typing import Any, Optional, NamedTuple
import re

from selenium.webdriver.common.by import By

from pagekit.exceptions import UnsupportedSelectorError

# Short strategy names accepted in addition to Selenium's By values
STRATEGY_ALIASES = {
    "css": By.CSS_SELECTOR,
    "xpath": By.XPATH,
    "id": By.ID,
    "name": By.NAME,
    "class": By.CLASS_NAME,
    "tag": By.TAG_NAME,
    "link": By.LINK_TEXT,
    "partial-link": By.PARTIAL_LINK_TEXT,
    By.CSS_SELECTOR: By.CSS_SELECTOR,
    By.XPATH: By.XPATH,
    By.ID: By.ID,
    By.NAME: By.NAME,
    By.CLASS_NAME: By.CLASS_NAME,
    By.TAG_NAME: By.TAG_NAME,
    By.LINK_TEXT: By.LINK_TEXT,
    By.PARTIAL_LINK_TEXT: By.PARTIAL_LINK_TEXT,
}

_PREFIX_PATTERN = re.compile(r"^(css|xpath|id|name|class|tag|link|partial-link):(.*)$", re.DOTALL)
_SIMPLE_CSS_PATTERN = re.compile(r"^([a-zA-Z][\w-]*|\*)?(?:#([\w-]+)|\.([\w-]+))?$")


class Selector(NamedTuple):
    """Locator strategy and value, unpackable into find_element(*selector)."""
    by: str
    value: str

    @classmethod
    def parse(cls, by: Any, locator: Optional[str] = None) -> "Selector":
        """
        Build a Selector from any supported shorthand.

        Args:
            by: Strategy name, "type:locator" string, (by, value) tuple or Selector
            locator: Locator value when `by` is a strategy name

        Returns:
            Selector instance
        """
        if isinstance(by, Selector):
            return by

        if isinstance(by, tuple):
            if len(by) != 2:
                raise UnsupportedSelectorError(f"Selector tuple must be (by, value), got {by!r}")
            return cls.parse(*by)

        if not isinstance(by, str):
            raise UnsupportedSelectorError(f"Unsupported selector type: {type(by).__name__}")

        if locator is None:
            match = _PREFIX_PATTERN.match(by)
            if match:
                return cls(STRATEGY_ALIASES[match.group(1)], match.group(2))
            return cls(By.CSS_SELECTOR, by)

        strategy = STRATEGY_ALIASES.get(by.lower())
        if strategy is None:
            raise UnsupportedSelectorError(f"Unknown selector strategy: {by!r}")
        return cls(strategy, locator)

    def __str__(self) -> str:
        return f"{self.by}:{self.value}"


def _literal(value: str) -> str:
    """Quote a string as an XPath literal."""
    if "'" not in value:
        return f"'{value}'"
    if '"' not in value:
        return f'"{value}"'
    parts = value.split("'")
    return "concat(" + ", \"'\", ".join(f"'{part}'" for part in parts) + ")"


def _class_predicate(css_class: str) -> str:
    return f"contains(concat(' ', normalize-space(@class), ' '), ' {css_class} ')"


def _has_top_level_union(xpath: str) -> bool:
    depth = 0
    quote = None
    for char in xpath:
        if quote:
            if char == quote:
                quote = None
        elif char in "\"'":
            quote = char
        elif char in "[(":
            depth += 1
        elif char in "])":
            depth -= 1
        elif char == "|" and depth == 0:
            return True
    return False


def to_xpath_fragment(by: Any, locator: Optional[str] = None) -> str:
    """
    Translate a selector into a relative XPath step.

    Used to build axis queries such as "./ancestor::<fragment>".

    Raises:
        UnsupportedSelectorError: If the selector has no XPath equivalent
    """
    selector = Selector.parse(by, locator)
    value = selector.value

    if selector.by == By.XPATH:
        if value.startswith("(") or _has_top_level_union(value):
            raise UnsupportedSelectorError(f"XPath {value!r} is not a single location step")
        for prefix in ("./", "//", "/"):
            if value.startswith(prefix):
                return value[len(prefix):]
        return value
    if selector.by == By.ID:
        return f"*[@id={_literal(value)}]"
    if selector.by == By.NAME:
        return f"*[@name={_literal(value)}]"
    if selector.by == By.CLASS_NAME:
        return f"*[{_class_predicate(value)}]"
    if selector.by == By.TAG_NAME:
        return value
    if selector.by == By.LINK_TEXT:
        return f"a[normalize-space(.)={_literal(value)}]"
    if selector.by == By.CSS_SELECTOR:
        match = _SIMPLE_CSS_PATTERN.match(value.strip())
        if match and any(match.groups()):
            tag, element_id, css_class = match.groups()
            step = tag or "*"
            if element_id:
                step += f"[@id={_literal(element_id)}]"
            if css_class:
                step += f"[{_class_predicate(css_class)}]"
            return step

    raise UnsupportedSelectorError(f"Cannot translate selector to XPath: {selector}")
