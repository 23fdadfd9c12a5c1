"""
Driver Factory - WebDriver creation for page-object tests.

Creates a Chrome WebDriver with the options UI tests need and registers
it as the active session, so element queries can find it.
"""

from typing import Optional, Tuple
from contextlib import contextmanager
import logging

from selenium import webdriver
from selenium.webdriver.chrome.options import Options as ChromeOptions

from pagekit.config import get_settings
from pagekit.core import session

logger = logging.getLogger(__name__)

# Type alias for driver - can be extended to support other browsers
WebDriverType = webdriver.Chrome


def create_driver(
    headless: Optional[bool] = None,
    profile_path: Optional[str] = None,
    window_size: Optional[Tuple[int, int]] = None,
    register: bool = True,
) -> WebDriverType:
    """
    Create a Chrome WebDriver instance.

    Args:
        headless: Run browser in headless mode (defaults to PAGEKIT_HEADLESS)
        profile_path: Path to browser profile for session persistence
        window_size: (width, height) of the window (defaults to PAGEKIT_WINDOW_SIZE)
        register: Register the driver as the active session

    Returns:
        Chrome WebDriver instance

    Example:
        >>> driver = create_driver(headless=True)
        >>> driver.get("https://example.com")
        >>> ElementQuery("tag", "h1").one().get_text()
    """
    settings = get_settings()
    if headless is None:
        headless = settings.headless
    if window_size is None:
        window_size = settings.window_size

    options = _build_chrome_options(headless, profile_path, window_size)
    driver = webdriver.Chrome(options=options)
    logger.info(f"Started Chrome session {driver.session_id} (headless={headless})")

    if register:
        session.set_driver(driver)

    return driver


@contextmanager
def driver_session(**kwargs):
    """
    Create a registered driver and quit it on exit.

    Example:
        >>> with driver_session(headless=True) as driver:
        ...     driver.get("https://example.com")
    """
    driver = create_driver(**kwargs)
    try:
        yield driver
    finally:
        session.clear_driver()
        driver.quit()
        logger.info("Chrome session closed")


def _build_chrome_options(
    headless: bool,
    profile_path: Optional[str],
    window_size: Tuple[int, int],
) -> ChromeOptions:
    """Build Chrome options for stable test runs."""
    options = ChromeOptions()

    if headless:
        options.add_argument("--headless=new")

    if profile_path:
        options.add_argument(f"--user-data-dir={profile_path}")

    width, height = window_size
    options.add_argument(f"--window-size={width},{height}")

    # Common stability options
    options.add_argument("--disable-extensions")
    options.add_argument("--no-sandbox")
    options.add_argument("--disable-dev-shm-usage")
    options.add_argument("--disable-gpu")
    options.add_experimental_option("excludeSwitches", ["enable-automation"])

    return options
