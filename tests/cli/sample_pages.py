"""Page objects imported by the CLI tests."""

from typing import Annotated

from pydantic import BaseModel

from pom_actions import actions, page_object


class LoginPage(BaseModel):
    loginButton: Annotated[str, actions("click")] = "#login"
    email: Annotated[str, actions("click", "enter_keys")] = "#email"


@page_object
class DecoratedPage(BaseModel):
    banner: Annotated[str, actions("exists")] = ".banner"


class BrokenPage(BaseModel):
    search: Annotated[str, actions("bogus_action")] = "#q"


def not_a_page():
    return None
