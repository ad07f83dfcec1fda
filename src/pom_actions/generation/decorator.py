"""The page_object class decorator."""

import logging
from typing import Any, Callable, Optional, TypeVar, overload

from ..config.generator_config import GeneratorConfig
from ..models.generation_models import GeneratedMethodSet
from .catalog import ActionCatalog
from .synthesizer import MethodSynthesizer

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=type)

METHOD_SET_ATTRIBUTE = "__page_methods__"


def attach_methods(cls: T, method_set: GeneratedMethodSet) -> T:
    """Attach a fully generated method set to its class."""
    for method in method_set.methods:
        setattr(cls, method.name, method_set.implementations[method.name])
    setattr(cls, METHOD_SET_ATTRIBUTE, method_set)
    return cls


@overload
def page_object(cls: T) -> T:
    ...


@overload
def page_object(
    *,
    catalog: Optional[ActionCatalog] = None,
    config: Optional[GeneratorConfig] = None,
) -> Callable[[T], T]:
    ...


def page_object(
    cls: Any = None,
    *,
    catalog: Optional[ActionCatalog] = None,
    config: Optional[GeneratorConfig] = None,
) -> Any:
    """
    Class decorator generating element interaction methods.

    PATTERN: Decorator usable bare or with options
    CRITICAL: Methods are attached only after the whole type generated

    Args:
        cls: Page object class (when used bare)
        catalog: Action catalog to use instead of the default
        config: Generator configuration to use instead of the environment's

    Returns:
        The class with generated methods and ``__page_methods__``

    Raises:
        GenerationError: If the class cannot be generated

    Example:
        >>> @page_object
        ... class LoginPage(BaseModel):
        ...     login_button: Annotated[str, actions("click")] = "#login"
        >>> await LoginPage().click_login_button(page)
    """

    def decorator(target: T) -> T:
        method_set = MethodSynthesizer(catalog, config).synthesize(target)
        return attach_methods(target, method_set)

    if cls is None:
        return decorator
    return decorator(cls)


def generated_methods(cls: Any) -> Optional[GeneratedMethodSet]:
    """Return the method set attached to a decorated class, if any.

    Subclasses do not inherit their parent's method set.
    """
    if not isinstance(cls, type):
        return None
    return vars(cls).get(METHOD_SET_ATTRIBUTE)
