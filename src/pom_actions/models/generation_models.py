"""Generation data models for page object method synthesis.

This module defines the Pydantic models that describe a page object type,
its fields, the action rules of the catalog and the generated method set.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Callable, Dict, List, Optional
from enum import Enum


class ParameterKind(str, Enum):
    """How a generated method parameter may be passed."""

    POSITIONAL_OR_KEYWORD = "positional_or_keyword"
    KEYWORD_ONLY = "keyword_only"


class ActionParameter(BaseModel):
    """Extra parameter of a generated method (beyond self and session)."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Parameter name")
    annotation: str = Field(description="Rendered type annotation")
    has_default: bool = Field(default=False, description="Whether a default exists")
    default: Any = Field(default=None, description="Default value if any")
    kind: ParameterKind = Field(
        default=ParameterKind.POSITIONAL_OR_KEYWORD, description="Parameter kind"
    )


class FieldDescriptor(BaseModel):
    """One declared field of a page object type."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Field name, unique within the type")
    locator_attribute: str = Field(
        description="Instance attribute holding the locator value"
    )
    actions: List[str] = Field(
        default_factory=list, description="Requested action names in order"
    )


class PageObjectDescription(BaseModel):
    """Description of a page object type as seen by the generator."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Type name")
    module: str = Field(default="", description="Module defining the type")
    fields: List[FieldDescriptor] = Field(
        default_factory=list, description="Fields in declaration order"
    )

    def field_names(self) -> List[str]:
        return [field.name for field in self.fields]


class MethodContext(BaseModel):
    """Everything an action factory needs to build one method."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    type_name: str = Field(description="Owning type name")
    field_name: str = Field(description="Field the method acts on")
    locator_attribute: str = Field(description="Attribute holding the locator")
    locate_method: str = Field(description="Name of the base locate method")
    config: Any = Field(description="GeneratorConfig in effect")


class ActionRule(BaseModel):
    """Catalog entry mapping an action name onto a generated method."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = Field(description="Canonical action name")
    method_template: str = Field(description="Method name template, e.g. click_{field}")
    summary: str = Field(description="One-line description for the docstring")
    parameters: List[ActionParameter] = Field(
        default_factory=list, description="Parameters beyond self and session"
    )
    returns: str = Field(default="None", description="Rendered return annotation")
    failure: str = Field(default="", description="Condition producing a failure")
    requires_element: bool = Field(
        default=True, description="Whether the element is located first"
    )
    never_fails: bool = Field(
        default=False, description="Whether errors collapse into a result"
    )
    factory: Callable[[MethodContext], Callable[..., Any]] = Field(
        description="Builds the implementation coroutine for one field"
    )

    def method_name(self, field_name: str) -> str:
        """Derive the generated method name for a field.

        Args:
            field_name: Name of the page object field

        Returns:
            Generated method name
        """
        return self.method_template.format(field=field_name)


class GeneratedMethod(BaseModel):
    """Definition of one generated operation."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Method name")
    field_name: str = Field(description="Field the method acts on")
    action: str = Field(description="Action name (locate for the base method)")
    parameters: List[ActionParameter] = Field(
        default_factory=list, description="Parameters beyond self and session"
    )
    returns: str = Field(default="None", description="Rendered return annotation")
    doc: str = Field(default="", description="Docstring")


class GeneratedMethodSet(BaseModel):
    """Ordered, immutable output of generation for one type."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    type_name: str = Field(description="Type the methods belong to")
    methods: List[GeneratedMethod] = Field(
        default_factory=list, description="Generated methods, field-then-action order"
    )
    implementations: Dict[str, Callable[..., Any]] = Field(
        default_factory=dict,
        exclude=True,
        repr=False,
        description="Coroutine functions keyed by method name",
    )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GeneratedMethodSet):
            return NotImplemented
        return self.type_name == other.type_name and self.methods == other.methods

    def __hash__(self) -> int:
        return hash((self.type_name, tuple(m.name for m in self.methods)))

    def names(self) -> List[str]:
        return [method.name for method in self.methods]

    def get(self, name: str) -> Optional[GeneratedMethod]:
        for method in self.methods:
            if method.name == name:
                return method
        return None

    def for_field(self, field_name: str) -> List[GeneratedMethod]:
        return [m for m in self.methods if m.field_name == field_name]

    def __len__(self) -> int:
        return len(self.methods)
