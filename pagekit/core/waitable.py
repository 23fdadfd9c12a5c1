"""
Waitable - Shared wait helpers for element handles and queries.

Classes mixing this in provide the get_*_condition() factories; the
wait_until_*() helpers poll those conditions through the session wait
engine and return self for chaining.
"""

from abc import ABC, abstractmethod
from typing import Optional
import logging

from pagekit.core import session
from pagekit.core.conditions import AttributeSpec, Condition, Not

logger = logging.getLogger(__name__)


class Waitable(ABC):
    """Mixin adding wait_until_* helpers on top of condition factories."""

    @abstractmethod
    def get_clickable_condition(self) -> Condition:
        pass

    @abstractmethod
    def get_present_condition(self) -> Condition:
        pass

    @abstractmethod
    def get_visible_condition(self) -> Condition:
        pass

    @abstractmethod
    def get_text_present_condition(self, text: str) -> Condition:
        pass

    @abstractmethod
    def get_attributes_present_condition(self, attributes: AttributeSpec) -> Condition:
        pass

    def get_ready_condition(self) -> Condition:
        return self.get_clickable_condition()

    def _wait_for(self, condition: Condition, timeout: Optional[float] = None, invert: bool = False):
        if invert:
            condition = Not(condition)
        logger.debug(f"Waiting for {condition!r}")
        session.wait(timeout).until(condition, f"Timed out waiting for {condition!r}")
        return self

    def wait_until_clickable(self, timeout: Optional[float] = None):
        return self._wait_for(self.get_clickable_condition(), timeout)

    def wait_until_not_clickable(self, timeout: Optional[float] = None):
        return self._wait_for(self.get_clickable_condition(), timeout, invert=True)

    def wait_until_present(self, timeout: Optional[float] = None):
        return self._wait_for(self.get_present_condition(), timeout)

    def wait_until_not_present(self, timeout: Optional[float] = None):
        return self._wait_for(self.get_present_condition(), timeout, invert=True)

    def wait_until_visible(self, timeout: Optional[float] = None):
        return self._wait_for(self.get_visible_condition(), timeout)

    def wait_until_not_visible(self, timeout: Optional[float] = None):
        return self._wait_for(self.get_visible_condition(), timeout, invert=True)

    def wait_until_text_present(self, text: str, timeout: Optional[float] = None):
        return self._wait_for(self.get_text_present_condition(text), timeout)

    def wait_until_text_not_present(self, text: str, timeout: Optional[float] = None):
        return self._wait_for(self.get_text_present_condition(text), timeout, invert=True)

    def wait_until_attributes_present(self, attributes: AttributeSpec, timeout: Optional[float] = None):
        return self._wait_for(self.get_attributes_present_condition(attributes), timeout)

    def wait_until_attributes_not_present(self, attributes: AttributeSpec, timeout: Optional[float] = None):
        return self._wait_for(self.get_attributes_present_condition(attributes), timeout, invert=True)

    def wait_until_ready(self, timeout: Optional[float] = None):
        return self._wait_for(self.get_ready_condition(), timeout)
