"""Page object method generation.

This package provides the action catalog, the field descriptor extractor,
the method synthesizer, validation and the page_object decorator.
"""

from .catalog import ActionCatalog, default_catalog
from .actions import builtin_rules, locate_rule
from .extractor import (
    ActionListSyntaxError,
    ActionsMarker,
    FieldDescriptorExtractor,
    actions,
    extract_fields,
    parse_action_list,
)
from .validator import GenerationValidator
from .synthesizer import MethodSynthesizer, generate_methods
from .renderer import render_stub
from .decorator import page_object, generated_methods

__all__ = [
    "ActionCatalog",
    "default_catalog",
    "builtin_rules",
    "locate_rule",
    "ActionListSyntaxError",
    "ActionsMarker",
    "FieldDescriptorExtractor",
    "actions",
    "extract_fields",
    "parse_action_list",
    "GenerationValidator",
    "MethodSynthesizer",
    "generate_methods",
    "render_stub",
    "page_object",
    "generated_methods",
]
