"""
Conditions - Predicate objects for the wait engine.

Each condition holds a reference to its target (an element handle or a
query) and evaluates it when called. Conditions can be called with no
arguments or with the driver argument WebDriverWait passes in.

Example:
    >>> condition = element.get_clickable_condition()
    >>> condition()
    True
    >>> session.wait().until(condition)
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable, Mapping, Optional, Union

AttributeSpec = Union[Mapping[str, Optional[str]], Iterable[str]]


class Condition(ABC):
    """Base predicate over a waitable target."""

    description = "condition"

    def __init__(self, target: Any):
        self.target = target

    @abstractmethod
    def evaluate(self) -> bool:
        """Check the target once."""
        pass

    def __call__(self, driver: Any = None) -> bool:
        return bool(self.evaluate())

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.description} of {self.target!r}>"


class ClickableCondition(Condition):
    description = "clickable"

    def evaluate(self) -> bool:
        return self.target.is_clickable()


class PresentCondition(Condition):
    description = "present"

    def evaluate(self) -> bool:
        return self.target.is_present()


class VisibleCondition(Condition):
    description = "visible"

    def evaluate(self) -> bool:
        return self.target.is_visible()


class TextPresentCondition(Condition):
    """Target text contains the expected substring."""

    description = "text present"

    def __init__(self, target: Any, text: str):
        super().__init__(target)
        self.text = text

    def evaluate(self) -> bool:
        return self.text in (self.target.get_text() or "")


class AttributesPresentCondition(Condition):
    """
    Target attributes match the expected values.

    A mapping requires every attribute to equal its value, where a value
    of None only requires the attribute to be present. A plain sequence
    of names requires each attribute to be present.
    """

    description = "attributes present"

    def __init__(self, target: Any, attributes: AttributeSpec):
        super().__init__(target)
        if isinstance(attributes, str):
            attributes = [attributes]
        if isinstance(attributes, Mapping):
            self.attributes = dict(attributes)
        else:
            self.attributes = {name: None for name in attributes}

    def evaluate(self) -> bool:
        for name, expected in self.attributes.items():
            actual = self.target.get_attribute(name)
            if expected is None:
                if actual is None:
                    return False
            elif actual != expected:
                return False
        return True


class ReloadedCondition(Condition):
    """
    Target went stale and has been re-resolved.

    Reloads the target whenever it is observed stalled; evaluates to
    False while the target is still bound to its original node.
    """

    description = "reloaded"

    def evaluate(self) -> bool:
        if self.target.is_stalled():
            self.target.reload()
            return not self.target.is_stalled()
        return False


class Not(Condition):
    """Negation of another condition."""

    def __init__(self, condition: Condition):
        super().__init__(condition.target)
        self.condition = condition
        self.description = f"not {condition.description}"

    def evaluate(self) -> bool:
        return not self.condition.evaluate()
