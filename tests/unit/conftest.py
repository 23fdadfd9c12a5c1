import pytest
from unittest.mock import MagicMock

from pagekit.config import reset_settings
from pagekit.core import session


@pytest.fixture(autouse=True)
def fast_waits(monkeypatch):
    """Keep wait timeouts short so timeout tests finish quickly."""
    monkeypatch.setenv("PAGEKIT_WAIT_TIMEOUT", "0.2")
    monkeypatch.setenv("PAGEKIT_POLL_FREQUENCY", "0.01")
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def driver():
    """Mock WebDriver registered as the active session."""
    mock_driver = MagicMock()
    session.set_driver(mock_driver)
    yield mock_driver
    session.clear_driver()


@pytest.fixture
def make_web_element(driver):
    """Factory for mock remote elements bound to the mock driver."""
    def _make(element_id="element-1"):
        web_element = MagicMock()
        web_element.id = element_id
        web_element.parent = driver
        return web_element
    return _make
