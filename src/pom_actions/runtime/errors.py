"""Errors raised by generated methods at test-run time."""

from typing import Optional


class ElementError(Exception):
    """Base class for failures of generated element methods."""

    def __init__(self, message: str, field_name: str, action: str):
        super().__init__(message)
        self.field_name = field_name
        self.action = action


class ElementNotFoundError(ElementError):
    """Raised when the base locate method finds no element."""

    def __init__(self, field_name: str, action: str):
        super().__init__(f"Element {field_name} not found", field_name, action)


class ElementActionError(ElementError):
    """Raised when the driver rejects an operation on a located element.

    The driver error is kept as ``cause`` and chained as ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        field_name: str,
        action: str,
        cause: Optional[BaseException] = None,
    ):
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message, field_name, action)
        self.cause = cause


class ElementTimeoutError(ElementActionError):
    """Raised when a wait action's deadline passes."""

    def __init__(self, message: str, field_name: str, action: str, timeout_ms: int):
        super().__init__(message, field_name, action)
        self.timeout_ms = timeout_ms
