"""Field descriptor extraction from page object classes.

A page object is a record class whose fields hold locators. Fields request
generated actions through ``typing.Annotated`` metadata::

    class LoginPage(BaseModel):
        email: Annotated[str, actions("click", "enter_keys")] = "#email"
        submit: Annotated[str, actions("methods(click, is_enabled)")] = "#go"
        banner: str = ".banner"

PATTERN: Record class -> ordered FieldDescriptors
CRITICAL: Locator values are never read here; only attribute names are kept
"""

import dataclasses
import logging
import re
import typing
from typing import Annotated, Any, ClassVar, Iterable, List, Optional, Tuple

from pydantic import BaseModel

from ..errors import MalformedActionListError, NotARecordError
from ..models.generation_models import FieldDescriptor, PageObjectDescription
from .catalog import ActionCatalog, default_catalog
from .validator import GenerationValidator, type_name_of

logger = logging.getLogger(__name__)

_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*\Z")
_PARENTHESIZED = re.compile(r"\s*([A-Za-z_][A-Za-z0-9_]*)\s*\((.*)\)\s*\Z", re.DOTALL)
_LIST_KEYWORD = "methods"


class ActionListSyntaxError(ValueError):
    """Raised by parse_action_list on malformed input."""


class ActionsMarker:
    """Annotated metadata carrying the raw action list of a field."""

    __slots__ = ("items",)

    def __init__(self, items: Tuple[Any, ...]):
        self.items = items

    def __repr__(self) -> str:
        return f"actions({', '.join(repr(item) for item in self.items)})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ActionsMarker):
            return NotImplemented
        return self.items == other.items

    def __hash__(self) -> int:
        return hash(self.items)


def actions(*items: Any) -> ActionsMarker:
    """
    Declare the actions to generate for a page object field.

    Accepts bare action names, a comma-separated string, or the
    parenthesized form ``"methods(click, enter_keys)"``. Parsing is deferred
    to generation so that errors can name the field.

    Example:
        >>> login: Annotated[str, actions("click", "is_enabled")] = "#login"
    """
    return ActionsMarker(items)


def parse_action_list(items: Any) -> List[str]:
    """
    Normalize a raw action declaration into an ordered list of names.

    Args:
        items: A string, or a sequence of strings and nested sequences

    Returns:
        Action names in declared order (duplicates kept)

    Raises:
        ActionListSyntaxError: If the declaration is malformed

    Example:
        >>> parse_action_list("methods(click, enter_keys)")
        ['click', 'enter_keys']
        >>> parse_action_list(("click", "enter_keys"))
        ['click', 'enter_keys']
    """
    if isinstance(items, str):
        return _parse_text(items)

    names: List[str] = []
    for item in items:
        if isinstance(item, (list, tuple)):
            names.extend(parse_action_list(item))
        elif isinstance(item, str):
            names.extend(_parse_text(item))
        else:
            raise ActionListSyntaxError(
                f"expected action names as strings, got {type(item).__name__}"
            )
    return names


def _parse_text(text: str) -> List[str]:
    if "(" in text or ")" in text:
        match = _PARENTHESIZED.match(text)
        if match is None:
            raise ActionListSyntaxError(
                f"expected '{_LIST_KEYWORD}(<action>, ...)', found {text!r}"
            )

        keyword, body = match.groups()
        if keyword != _LIST_KEYWORD:
            raise ActionListSyntaxError(f"expected '{_LIST_KEYWORD}', found '{keyword}'")
        if "(" in body or ")" in body:
            raise ActionListSyntaxError(f"nested parentheses in {text!r}")
        if not body.strip():
            return []
        return _split_names(body, text)

    if not text.strip():
        raise ActionListSyntaxError("empty action list")
    return _split_names(text, text)


def _split_names(body: str, text: str) -> List[str]:
    parts = body.split(",")
    # One trailing comma is allowed
    if len(parts) > 1 and not parts[-1].strip():
        parts = parts[:-1]

    names = []
    for part in parts:
        name = part.strip()
        if not name:
            raise ActionListSyntaxError(f"empty action name in {text!r}")
        if not _IDENTIFIER.match(name):
            raise ActionListSyntaxError(f"'{name}' is not a valid action name")
        names.append(name)
    return names


def _is_classvar(hint: Any) -> bool:
    return hint is ClassVar or typing.get_origin(hint) is ClassVar


def _markers(metadata: Iterable[Any]) -> List[ActionsMarker]:
    return [item for item in metadata if isinstance(item, ActionsMarker)]


class FieldDescriptorExtractor:
    """Derive FieldDescriptors from a page object class.

    Supports pydantic models, dataclasses, NamedTuples and plain classes with
    annotated attributes.
    """

    def __init__(self, catalog: Optional[ActionCatalog] = None):
        self.validator = GenerationValidator(catalog or default_catalog())

    def extract(self, cls: Any) -> PageObjectDescription:
        """
        Describe a page object class.

        Args:
            cls: Class to describe

        Returns:
            PageObjectDescription with fields in declaration order

        Raises:
            NotARecordError: If cls is not a record of named fields
            MalformedActionListError: If a field's action list is malformed
        """
        self.validator.check_record_type(cls)
        type_name = type_name_of(cls)

        descriptors = []
        for field_name, metadata in self._declared_fields(cls, type_name):
            descriptors.append(self._describe_field(type_name, field_name, metadata))

        description = PageObjectDescription(
            name=type_name,
            module=getattr(cls, "__module__", "") or "",
            fields=descriptors,
        )
        logger.debug(f"Extracted {len(descriptors)} fields from {type_name}")
        return description

    def _declared_fields(self, cls: type, type_name: str) -> List[Tuple[str, List[Any]]]:
        """List (field name, Annotated metadata) pairs in declaration order."""
        if issubclass(cls, BaseModel):
            # pydantic moves Annotated extras into FieldInfo.metadata
            return [
                (name, list(info.metadata)) for name, info in cls.model_fields.items()
            ]

        try:
            hints = typing.get_type_hints(cls, include_extras=True)
        except Exception as e:
            raise NotARecordError(
                type_name, f"cannot resolve field annotations: {e}"
            ) from e

        if dataclasses.is_dataclass(cls):
            names = [field.name for field in dataclasses.fields(cls)]
        elif issubclass(cls, tuple):
            names = list(cls._fields)
        else:
            names = [
                name
                for name, hint in hints.items()
                if not name.startswith("_") and not _is_classvar(hint)
            ]

        fields = []
        for name in names:
            hint = hints.get(name)
            if typing.get_origin(hint) is Annotated:
                fields.append((name, list(hint.__metadata__)))
            else:
                fields.append((name, []))
        return fields

    def _describe_field(
        self, type_name: str, field_name: str, metadata: List[Any]
    ) -> FieldDescriptor:
        requested: List[str] = []
        for marker in _markers(metadata):
            try:
                requested.extend(parse_action_list(marker.items))
            except ActionListSyntaxError as e:
                raise MalformedActionListError(type_name, field_name, str(e)) from e

        unique: List[str] = []
        for name in requested:
            if name in unique:
                logger.warning(
                    f"Action '{name}' requested more than once for "
                    f"{type_name}.{field_name}; generating it once"
                )
                continue
            unique.append(name)

        return FieldDescriptor(
            name=field_name, locator_attribute=field_name, actions=unique
        )


def extract_fields(cls: Any, catalog: Optional[ActionCatalog] = None) -> PageObjectDescription:
    """Describe a page object class with a default extractor."""
    return FieldDescriptorExtractor(catalog).extract(cls)
