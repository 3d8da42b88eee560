"""
Custom exceptions for the catalog acceptance helpers.

Precondition violations, UI wait timeouts and unexpected DOM shapes are kept
apart so a failing test reports an environment problem differently from a
logic problem. Persistence errors are not wrapped: sqlite3 errors propagate
as raised.
"""

from typing import Optional


class CatalogAcceptanceError(Exception):
    """Base exception for all catalog acceptance helper errors."""

    pass


class InvalidStateError(CatalogAcceptanceError):
    """Raised when a helper is called with an entity in the wrong state."""

    pass


class ElementNotReadyError(CatalogAcceptanceError):
    """Raised when an admin UI element does not reach the awaited state in time."""

    def __init__(
        self,
        message: str,
        selector: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self.selector = selector
        self.timeout = timeout

        error_parts = [message]

        if selector:
            error_parts.append(f"Selector: {selector}")

        if timeout is not None:
            error_parts.append(f"Timeout: {timeout}s")

        super().__init__(" | ".join(error_parts))


class UnexpectedDomShapeError(CatalogAcceptanceError):
    """Raised when the rendered page does not have the expected structure."""

    def __init__(self, message: str, attribute_value: Optional[str] = None):
        self.attribute_value = attribute_value

        if attribute_value is not None:
            message = f"{message} (got {attribute_value!r})"

        super().__init__(message)
