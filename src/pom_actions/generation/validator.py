"""Validation of page object declarations.

Each check raises a GenerationError subclass scoped to the type, field and
action at fault. Callers run every check before attaching anything so a
failing type never ends up with a partial method surface.
"""

import inspect
import logging
from enum import Enum
from typing import Any, Dict, Iterable, Tuple

from ..errors import MethodNameConflictError, NotARecordError, UnknownActionError
from ..models.generation_models import ActionRule, GeneratedMethod
from .catalog import ActionCatalog

logger = logging.getLogger(__name__)

GENERATED_MARKER = "__pom_action__"

_MISSING = object()

# Py_TPFLAGS_HEAPTYPE; classes defined by a class statement carry it
_HEAPTYPE = 1 << 9


def type_name_of(obj: Any) -> str:
    """Best-effort display name for diagnostics."""
    name = getattr(obj, "__name__", None)
    if isinstance(name, str):
        return name
    return type(obj).__name__


class GenerationValidator:
    """Checks a page object declaration against the action catalog."""

    def __init__(self, catalog: ActionCatalog):
        self.catalog = catalog

    def check_record_type(self, obj: Any) -> None:
        """
        Reject anything that is not a class of named fields.

        Args:
            obj: Object the generator was applied to

        Raises:
            NotARecordError: If obj is not a record type
        """
        name = type_name_of(obj)

        if not inspect.isclass(obj):
            raise NotARecordError(
                name, f"page objects must be classes, got {type(obj).__name__}"
            )

        if obj.__module__ == "builtins" or not obj.__flags__ & _HEAPTYPE:
            raise NotARecordError(name, "built-in and extension types have no declared fields")

        if issubclass(obj, Enum):
            raise NotARecordError(name, "enumerations have no named fields")

        if issubclass(obj, tuple) and not hasattr(obj, "_fields"):
            raise NotARecordError(name, "tuple types only have positional fields")

    def check_action(self, type_name: str, field_name: str, action_name: str) -> ActionRule:
        """
        Resolve a requested action to its rule.

        Args:
            type_name: Page object type name
            field_name: Field requesting the action
            action_name: Requested action

        Returns:
            The catalog rule for the action

        Raises:
            UnknownActionError: If the catalog has no such action
        """
        rule = self.catalog.lookup(action_name)
        if rule is None:
            logger.debug(f"Rejected action '{action_name}' on {type_name}.{field_name}")
            raise UnknownActionError(
                type_name, field_name, action_name, self.catalog.list_actions()
            )
        return rule

    def check_method_names(
        self,
        cls: type,
        type_name: str,
        methods: Iterable[GeneratedMethod],
        field_names: Iterable[str] = (),
    ) -> None:
        """
        Ensure generated names are unique and free on the class.

        Methods generated by an earlier run on the same class may be replaced.
        A generated name may not equal a field name, since the instance
        attribute would shadow the method.

        Raises:
            MethodNameConflictError: On a duplicate or taken name
        """
        fields = set(field_names)
        seen: Dict[str, Tuple[str, str]] = {}
        for method in methods:
            previous = seen.get(method.name)
            if previous is not None:
                raise MethodNameConflictError(
                    type_name,
                    method.field_name,
                    method.action,
                    method.name,
                    f"also generated for field {previous[0]} ({previous[1]})",
                )
            if method.name in fields:
                raise MethodNameConflictError(
                    type_name,
                    method.field_name,
                    method.action,
                    method.name,
                    f"{method.name} is a field of {type_name}",
                )
            seen[method.name] = (method.field_name, method.action)

            existing = _find_attribute(cls, method.name)
            if existing is not _MISSING and not hasattr(existing, GENERATED_MARKER):
                raise MethodNameConflictError(
                    type_name,
                    method.field_name,
                    method.action,
                    method.name,
                    "attribute already defined on the class",
                )


def _find_attribute(cls: type, name: str) -> Any:
    for klass in inspect.getmro(cls):
        if name in vars(klass):
            return vars(klass)[name]
    return _MISSING
