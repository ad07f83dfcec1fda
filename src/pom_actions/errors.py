"""Generation-time errors.

Every error names the page object type and, when relevant, the field and
action that caused it. They are raised while the class statement executes,
before any method is attached.
"""

from typing import Iterable, Optional


class GenerationError(Exception):
    """Raised when methods cannot be generated for a page object type."""

    def __init__(
        self,
        message: str,
        type_name: str,
        field_name: Optional[str] = None,
        action_name: Optional[str] = None,
    ):
        super().__init__(message)
        self.type_name = type_name
        self.field_name = field_name
        self.action_name = action_name


class NotARecordError(GenerationError):
    """Raised when the decorated object is not a record of named fields."""

    def __init__(self, type_name: str, reason: str):
        super().__init__(
            f"{type_name} is not a record type: {reason}",
            type_name=type_name,
        )
        self.reason = reason


class MalformedActionListError(GenerationError):
    """Raised when a field's action list cannot be parsed."""

    def __init__(self, type_name: str, field_name: str, reason: str):
        super().__init__(
            f"Failed to parse actions for field {field_name} of {type_name}: {reason}",
            type_name=type_name,
            field_name=field_name,
        )
        self.reason = reason


class UnknownActionError(GenerationError):
    """Raised when a field requests an action the catalog does not define."""

    def __init__(
        self,
        type_name: str,
        field_name: str,
        action_name: str,
        supported: Iterable[str] = (),
    ):
        supported = list(supported)
        message = (
            f"Unsupported action '{action_name}' for field {field_name} of {type_name}"
        )
        if supported:
            message += f" (supported: {', '.join(supported)})"
        super().__init__(
            message,
            type_name=type_name,
            field_name=field_name,
            action_name=action_name,
        )
        self.supported = supported


class MethodNameConflictError(GenerationError):
    """Raised when a generated method name is already taken on the type."""

    def __init__(
        self,
        type_name: str,
        field_name: str,
        action_name: str,
        method_name: str,
        reason: str,
    ):
        super().__init__(
            f"Cannot generate {method_name} for field {field_name} of {type_name}: "
            f"{reason}",
            type_name=type_name,
            field_name=field_name,
            action_name=action_name,
        )
        self.method_name = method_name
