"""Exception hierarchy for pagekit."""


class PageKitError(Exception):
    """Base class for pagekit errors."""
    pass


class ElementUsageError(PageKitError):
    """Raised when an element handle is used in a way it does not support."""
    pass


class InvalidElementTypeError(PageKitError):
    """Raised when a selected element does not match the requested element type."""
    pass


class UnsupportedSelectorError(PageKitError, ValueError):
    """Raised for unknown selector strategies or selectors that cannot be translated."""
    pass


class SessionNotStartedError(PageKitError):
    """Raised when no WebDriver session is registered."""
    pass
