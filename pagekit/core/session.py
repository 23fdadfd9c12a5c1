"""
Session - Active WebDriver registry and wait engine.

All element handles in a page-object tree share the driver registered
here. Waits are plain Selenium WebDriverWait instances configured from
settings.
"""

from typing import Optional, TYPE_CHECKING
import logging

from selenium.webdriver.support.ui import WebDriverWait

from pagekit.config import get_settings
from pagekit.exceptions import SessionNotStartedError

if TYPE_CHECKING:
    from selenium.webdriver.remote.webdriver import WebDriver

logger = logging.getLogger(__name__)

_driver: Optional["WebDriver"] = None


def set_driver(driver: "WebDriver") -> None:
    """Register the active WebDriver session."""
    global _driver
    _driver = driver
    logger.debug(f"Registered driver session {getattr(driver, 'session_id', None)}")


def get_driver() -> "WebDriver":
    """Get the active WebDriver session."""
    if _driver is None:
        raise SessionNotStartedError("No WebDriver session registered. Call set_driver() first.")
    return _driver


def clear_driver() -> None:
    """Forget the active WebDriver session (does not quit it)."""
    global _driver
    _driver = None


def wait(timeout: Optional[float] = None, poll_frequency: Optional[float] = None) -> WebDriverWait:
    """
    Create a wait over the active driver.

    Args:
        timeout: Seconds to wait (defaults to PAGEKIT_WAIT_TIMEOUT)
        poll_frequency: Seconds between polls (defaults to PAGEKIT_POLL_FREQUENCY)

    Returns:
        WebDriverWait whose until()/until_not() accept any condition
        callable taking the driver.
    """
    settings = get_settings()
    return WebDriverWait(
        get_driver(),
        settings.wait_timeout if timeout is None else timeout,
        poll_frequency=settings.poll_frequency if poll_frequency is None else poll_frequency,
    )
