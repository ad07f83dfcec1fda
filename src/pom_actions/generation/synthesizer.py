"""Method synthesis for page object types.

This module provides the MethodSynthesizer class which turns a page object
class into a GeneratedMethodSet: one locate method per field, followed by one
method per requested action, in field-then-action order.

PATTERN: Extract fields -> validate -> build every method -> check names
CRITICAL: Nothing is returned unless the whole type generated cleanly
"""

import inspect
import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

from ..config.generator_config import GeneratorConfig, get_config
from ..models.generation_models import (
    ActionParameter,
    ActionRule,
    FieldDescriptor,
    GeneratedMethod,
    GeneratedMethodSet,
    MethodContext,
    ParameterKind,
    PageObjectDescription,
)
from .actions import locate_rule
from .catalog import ActionCatalog, default_catalog
from .extractor import FieldDescriptorExtractor
from .validator import GENERATED_MARKER, GenerationValidator

logger = logging.getLogger(__name__)

_PARAMETER_KINDS = {
    ParameterKind.POSITIONAL_OR_KEYWORD: inspect.Parameter.POSITIONAL_OR_KEYWORD,
    ParameterKind.KEYWORD_ONLY: inspect.Parameter.KEYWORD_ONLY,
}


def build_signature(parameters: List[ActionParameter]) -> inspect.Signature:
    """Build the call signature of a generated method.

    Annotations are kept as their rendered strings.
    """
    params = [
        inspect.Parameter("self", inspect.Parameter.POSITIONAL_OR_KEYWORD),
        inspect.Parameter(
            "session",
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
            annotation="AutomationSession",
        ),
    ]
    for parameter in parameters:
        params.append(
            inspect.Parameter(
                parameter.name,
                _PARAMETER_KINDS[parameter.kind],
                default=parameter.default if parameter.has_default else inspect.Parameter.empty,
                annotation=parameter.annotation,
            )
        )
    return inspect.Signature(params)


def bind_method(
    implementation: Callable[..., Any],
    method: GeneratedMethod,
    owner: str,
) -> Callable[..., Any]:
    """
    Wrap an implementation coroutine into a method with a real signature.

    Arguments are bound against the signature so that bad calls raise
    TypeError before any driver call is made.

    Args:
        implementation: Coroutine taking (page, session, **arguments)
        method: Definition of the generated method
        owner: Name of the owning type, for __qualname__

    Returns:
        Coroutine function suitable for attaching to the class
    """
    signature = build_signature(method.parameters)

    async def generated(self, session, *args, **kwargs):
        bound = signature.bind(self, session, *args, **kwargs)
        bound.apply_defaults()
        arguments = dict(bound.arguments)
        del arguments["self"]
        del arguments["session"]
        return await implementation(self, session, **arguments)

    generated.__name__ = method.name
    generated.__qualname__ = f"{owner}.{method.name}"
    generated.__doc__ = method.doc
    generated.__signature__ = signature
    setattr(generated, GENERATED_MARKER, (method.field_name, method.action))
    return generated


class MethodSynthesizer:
    """Generate the method set of a page object class.

    Example:
        >>> synthesizer = MethodSynthesizer()
        >>> method_set = synthesizer.synthesize(LoginPage)
        >>> method_set.names()
        ['locate_login_button', 'click_login_button']
    """

    def __init__(
        self,
        catalog: Optional[ActionCatalog] = None,
        config: Optional[GeneratorConfig] = None,
    ):
        """
        Initialize the synthesizer.

        Args:
            catalog: Action catalog (shared default catalog if not provided)
            config: Generator configuration (environment config if not provided)
        """
        self.catalog = catalog or default_catalog()
        self.config = config or get_config()
        self.extractor = FieldDescriptorExtractor(self.catalog)
        self.validator = GenerationValidator(self.catalog)
        self.locate = locate_rule(self.config.locate_prefix)

    def synthesize(self, cls: Any) -> GeneratedMethodSet:
        """
        Generate all methods for a page object class.

        Args:
            cls: Page object class

        Returns:
            GeneratedMethodSet in field-then-action order

        Raises:
            GenerationError: If the type, an action list or an action name is
                invalid, or a generated name is already taken
        """
        description = self.extractor.extract(cls)
        entries = self._plan(description)

        methods = [method for method, _, _ in entries]
        self.validator.check_method_names(
            cls, description.name, methods, description.field_names()
        )

        implementations: Dict[str, Callable[..., Any]] = {}
        for method, rule, field in entries:
            ctx = self._context(description, field)
            implementations[method.name] = bind_method(
                rule.factory(ctx), method, description.name
            )
            logger.debug(f"Generated {description.name}.{method.name}")

        logger.info(
            f"Generated {len(methods)} methods for {description.name} "
            f"({len(description.fields)} fields)"
        )

        return GeneratedMethodSet(
            type_name=description.name,
            methods=methods,
            implementations=implementations,
        )

    def _plan(
        self, description: PageObjectDescription
    ) -> List[Tuple[GeneratedMethod, ActionRule, FieldDescriptor]]:
        """Resolve every method definition before any implementation is built."""
        entries = []
        for field in description.fields:
            entries.append((self._define(self.locate, field), self.locate, field))
            for action_name in field.actions:
                rule = self.validator.check_action(
                    description.name, field.name, action_name
                )
                entries.append((self._define(rule, field), rule, field))
        return entries

    def _define(self, rule: ActionRule, field: FieldDescriptor) -> GeneratedMethod:
        return GeneratedMethod(
            name=rule.method_name(field.name),
            field_name=field.name,
            action=rule.name,
            parameters=list(rule.parameters),
            returns=rule.returns,
            doc=self._doc(rule, field),
        )

    def _doc(self, rule: ActionRule, field: FieldDescriptor) -> str:
        lines = [rule.summary, "", f"Field: {field.name}"]
        if rule.name == self.locate.name:
            lines.append("Returns the element, or None if it is not found.")
        elif rule.never_fails:
            lines.append("Never raises; driver errors report False.")
        else:
            lines.append(f"Fails when: {rule.failure}.")
        return "\n".join(lines)

    def _context(
        self, description: PageObjectDescription, field: FieldDescriptor
    ) -> MethodContext:
        return MethodContext(
            type_name=description.name,
            field_name=field.name,
            locator_attribute=field.locator_attribute,
            locate_method=self.locate.method_name(field.name),
            config=self.config,
        )


def generate_methods(
    cls: Any,
    catalog: Optional[ActionCatalog] = None,
    config: Optional[GeneratorConfig] = None,
) -> GeneratedMethodSet:
    """Generate the method set of a page object class without attaching it."""
    return MethodSynthesizer(catalog, config).synthesize(cls)
