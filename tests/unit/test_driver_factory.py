import pytest
from unittest.mock import patch

from pagekit.config import reset_settings
from pagekit.core import session
from pagekit.core.driver_factory import _build_chrome_options, create_driver, driver_session
from pagekit.exceptions import SessionNotStartedError


@pytest.fixture
def chrome():
    """Patched Chrome constructor; the active session is cleared afterwards."""
    with patch("pagekit.core.driver_factory.webdriver.Chrome") as mock_chrome:
        mock_chrome.return_value.session_id = "session-1"
        yield mock_chrome
    session.clear_driver()


def _arguments(mock_chrome):
    return mock_chrome.call_args.kwargs["options"].arguments


def test_create_driver_registers_session(chrome):
    """A new driver becomes the active session by default."""
    driver = create_driver(headless=True)

    assert driver is chrome.return_value
    assert session.get_driver() is driver


def test_create_driver_without_register(chrome):
    """register=False leaves the session registry untouched."""
    create_driver(headless=True, register=False)

    with pytest.raises(SessionNotStartedError):
        session.get_driver()


def test_create_driver_uses_settings_defaults(chrome, monkeypatch):
    """Headless mode and window size fall back to PAGEKIT_* settings."""
    monkeypatch.setenv("PAGEKIT_HEADLESS", "1")
    monkeypatch.setenv("PAGEKIT_WINDOW_SIZE", "800x600")
    reset_settings()

    create_driver()

    arguments = _arguments(chrome)
    assert "--headless=new" in arguments
    assert "--window-size=800,600" in arguments


def test_create_driver_arguments_override_settings(chrome, monkeypatch):
    """Explicit arguments win over the environment."""
    monkeypatch.setenv("PAGEKIT_HEADLESS", "1")
    reset_settings()

    create_driver(headless=False, window_size=(1024, 768))

    arguments = _arguments(chrome)
    assert "--headless=new" not in arguments
    assert "--window-size=1024,768" in arguments


def test_build_chrome_options():
    """Chrome options carry the stability flags and the optional profile."""
    options = _build_chrome_options(True, "/tmp/profile", (1280, 720))

    assert options.arguments == [
        "--headless=new",
        "--user-data-dir=/tmp/profile",
        "--window-size=1280,720",
        "--disable-extensions",
        "--no-sandbox",
        "--disable-dev-shm-usage",
        "--disable-gpu",
    ]
    assert options.experimental_options["excludeSwitches"] == ["enable-automation"]


def test_build_chrome_options_headed_without_profile():
    """Headed runs without a profile skip those flags."""
    arguments = _build_chrome_options(False, None, (1920, 1080)).arguments

    assert not any(argument.startswith("--headless") for argument in arguments)
    assert not any(argument.startswith("--user-data-dir") for argument in arguments)


def test_driver_session_quits_driver(chrome):
    """driver_session() clears the session and quits the driver on exit."""
    with driver_session(headless=True) as driver:
        assert session.get_driver() is driver

    driver.quit.assert_called_once_with()
    with pytest.raises(SessionNotStartedError):
        session.get_driver()


def test_driver_session_quits_driver_on_error(chrome):
    """The driver is quit even when the body raises."""
    with pytest.raises(RuntimeError):
        with driver_session(headless=True):
            raise RuntimeError("test failed")

    chrome.return_value.quit.assert_called_once_with()
    with pytest.raises(SessionNotStartedError):
        session.get_driver()
