"""Structural interfaces of the automation collaborators.

Generated methods are written against these protocols. A Playwright
``playwright.async_api.Page`` satisfies ``AutomationSession`` and a
Playwright ``ElementHandle`` satisfies ``ElementHandle``; any other driver
exposing the same coroutine surface works as well.

The session is owned by the caller. Generated code never creates, pools or
closes it.
"""

from typing import Any, Dict, Optional, Protocol, runtime_checkable


@runtime_checkable
class Mouse(Protocol):
    """Pointer device of a session, used for drag gestures."""

    async def move(self, x: float, y: float, *, steps: Optional[int] = None) -> None:
        ...

    async def down(self, **options: Any) -> None:
        ...

    async def up(self, **options: Any) -> None:
        ...


@runtime_checkable
class ElementHandle(Protocol):
    """Element returned by a session query."""

    async def click(self, **options: Any) -> None:
        ...

    async def dblclick(self, **options: Any) -> None:
        ...

    async def hover(self, **options: Any) -> None:
        ...

    async def type(self, text: str, **options: Any) -> None:
        ...

    async def fill(self, value: str, **options: Any) -> None:
        ...

    async def check(self, **options: Any) -> None:
        ...

    async def uncheck(self, **options: Any) -> None:
        ...

    async def inner_text(self) -> str:
        ...

    async def input_value(self, **options: Any) -> str:
        ...

    async def get_attribute(self, name: str) -> Optional[str]:
        ...

    async def is_visible(self) -> bool:
        ...

    async def is_checked(self) -> bool:
        ...

    async def is_enabled(self) -> bool:
        ...

    async def select_option(self, **options: Any) -> Any:
        ...

    async def screenshot(self, **options: Any) -> bytes:
        ...

    async def bounding_box(self) -> Optional[Dict[str, float]]:
        ...

    async def scroll_into_view_if_needed(self, **options: Any) -> None:
        ...

    async def evaluate(self, expression: str, arg: Any = None) -> Any:
        ...


@runtime_checkable
class AutomationSession(Protocol):
    """Externally owned browser session (e.g. a Playwright page)."""

    mouse: Mouse

    async def query_selector(self, selector: Any) -> Optional[ElementHandle]:
        ...
