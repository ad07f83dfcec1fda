"""Tests for stub rendering."""

from typing import Annotated

from pydantic import BaseModel

from pom_actions import actions, generate_methods, render_stub
from pom_actions.generation.renderer import render_parameters
from pom_actions.models.generation_models import ActionParameter, ParameterKind


class SearchPage(BaseModel):
    query: Annotated[str, actions("enter_keys", "wait_for")] = "#q"
    results: str = "#results"


def test_render_stub_layout():
    stub = render_stub(generate_methods(SearchPage))
    lines = stub.splitlines()

    assert lines[0] == "# Generated page object methods for SearchPage"
    assert "from pom_actions.runtime import AutomationSession, ElementHandle" in lines
    assert "class SearchPage:" in lines
    assert stub.endswith("\n")


def test_render_stub_signatures():
    stub = render_stub(generate_methods(SearchPage))

    assert (
        "    async def locate_query(self, session: AutomationSession)"
        " -> Optional[ElementHandle]:" in stub
    )
    assert (
        "    async def enter_keys_query(self, session: AutomationSession, text: str)"
        " -> None:" in stub
    )
    assert (
        "    async def wait_for_query(self, session: AutomationSession,"
        " timeout_ms: Optional[int] = None) -> ElementHandle:" in stub
    )
    assert "    async def locate_results(" in stub


def test_render_stub_preserves_order():
    stub = render_stub(generate_methods(SearchPage))
    positions = [
        stub.index(f"async def {name}(")
        for name in ["locate_query", "enter_keys_query", "wait_for_query", "locate_results"]
    ]

    assert positions == sorted(positions)


def test_render_stub_is_byte_identical():
    assert render_stub(generate_methods(SearchPage)) == render_stub(
        generate_methods(SearchPage)
    )


def test_render_empty_type():
    class Blank(BaseModel):
        pass

    stub = render_stub(generate_methods(Blank))

    assert stub.endswith("class Blank:\n    ...\n")


def test_render_keyword_only_parameters():
    rendered = render_parameters(
        [
            ActionParameter(name="text", annotation="str"),
            ActionParameter(
                name="delay",
                annotation="float",
                has_default=True,
                default=0.5,
                kind=ParameterKind.KEYWORD_ONLY,
            ),
        ]
    )

    assert rendered == "self, session: AutomationSession, text: str, *, delay: float = 0.5"
