"""Models package for page object generation."""

from .generation_models import (
    ParameterKind,
    ActionParameter,
    FieldDescriptor,
    PageObjectDescription,
    MethodContext,
    ActionRule,
    GeneratedMethod,
    GeneratedMethodSet,
)

__all__ = [
    "ParameterKind",
    "ActionParameter",
    "FieldDescriptor",
    "PageObjectDescription",
    "MethodContext",
    "ActionRule",
    "GeneratedMethod",
    "GeneratedMethodSet",
]
