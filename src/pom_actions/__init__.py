"""Generated element interaction methods for browser page objects.

Declare a page object as a record class, mark fields with the actions they
need, and decorate it::

    from typing import Annotated
    from pydantic import BaseModel
    from pom_actions import actions, page_object

    @page_object
    class LoginPage(BaseModel):
        email: Annotated[str, actions("click", "enter_keys")] = "#email"
        login_button: Annotated[str, actions("click")] = "#login"

    page = LoginPage()
    await page.enter_keys_email(session, "user@example.com")
    await page.click_login_button(session)
"""

from .errors import (
    GenerationError,
    NotARecordError,
    MalformedActionListError,
    UnknownActionError,
    MethodNameConflictError,
)
from .generation import (
    ActionCatalog,
    actions,
    default_catalog,
    generate_methods,
    generated_methods,
    page_object,
    parse_action_list,
    render_stub,
)
from .runtime import (
    ElementError,
    ElementNotFoundError,
    ElementActionError,
    ElementTimeoutError,
)

__version__ = "0.1.0"

__all__ = [
    "GenerationError",
    "NotARecordError",
    "MalformedActionListError",
    "UnknownActionError",
    "MethodNameConflictError",
    "ActionCatalog",
    "actions",
    "default_catalog",
    "generate_methods",
    "generated_methods",
    "page_object",
    "parse_action_list",
    "render_stub",
    "ElementError",
    "ElementNotFoundError",
    "ElementActionError",
    "ElementTimeoutError",
]
