"""Runtime collaborators of generated methods."""

from .errors import (
    ElementError,
    ElementNotFoundError,
    ElementActionError,
    ElementTimeoutError,
)
from .session import AutomationSession, ElementHandle, Mouse

__all__ = [
    "ElementError",
    "ElementNotFoundError",
    "ElementActionError",
    "ElementTimeoutError",
    "AutomationSession",
    "ElementHandle",
    "Mouse",
]
