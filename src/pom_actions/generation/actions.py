"""Built-in action rules.

Each rule pairs the naming and signature of a generated method with a
factory that builds its coroutine for one field. Element actions locate the
element through the generated locate method first, turn an absent element
into ElementNotFoundError and wrap driver failures in ElementActionError.

PATTERN: rule = template + signature + contract + factory(MethodContext)
CRITICAL: exists is the only action that never raises
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional, Sequence, Tuple

from ..models.generation_models import ActionParameter, ActionRule, MethodContext
from ..runtime.errors import (
    ElementActionError,
    ElementError,
    ElementNotFoundError,
    ElementTimeoutError,
)

logger = logging.getLogger(__name__)

LOCATE_ACTION = "locate"

ELEMENT_ABSENT = "element absent"

_SUBMIT_SCRIPT = """(el) => {
    const form = el.form || el.closest('form') || el;
    if (typeof form.requestSubmit === 'function') {
        form.requestSubmit();
    } else {
        form.submit();
    }
}"""

Operation = Callable[..., Awaitable[Any]]


def locate_factory(ctx: MethodContext) -> Callable[..., Awaitable[Any]]:
    """Build the base locate coroutine for one field.

    Query errors and an unset locator are logged and reported as an absent
    element.
    """

    async def locate(page: Any, session: Any) -> Any:
        try:
            locator = getattr(page, ctx.locator_attribute)
            return await session.query_selector(locator)
        except Exception as e:
            logger.error(f"Error querying element {ctx.field_name}: {e}")
            return None

    return locate


def locate_rule(prefix: str = LOCATE_ACTION) -> ActionRule:
    """Create the rule of the always-generated locate method.

    Args:
        prefix: Method name prefix from the generator configuration

    Returns:
        ActionRule for the base locate method
    """
    return ActionRule(
        name=LOCATE_ACTION,
        method_template=f"{prefix}_{{field}}",
        summary="Query the web element from the DOM.",
        returns="Optional[ElementHandle]",
        failure="never fails; query errors report None",
        requires_element=False,
        never_fails=True,
        factory=locate_factory,
    )


async def _require_element(page: Any, session: Any, ctx: MethodContext, action: str) -> Any:
    element = await getattr(page, ctx.locate_method)(session)
    if element is None:
        raise ElementNotFoundError(ctx.field_name, action)
    return element


def _element_rule(
    name: str,
    summary: str,
    failure_message: str,
    operation: Operation,
    parameters: Sequence[ActionParameter] = (),
    returns: str = "None",
    failure: str = "",
) -> ActionRule:
    """Create a rule for an action that runs against the located element.

    Args:
        name: Action name
        summary: Docstring summary of the generated method
        failure_message: Message template for driver failures, with {field}
        operation: Coroutine taking (element, session, ctx, **arguments)
        parameters: Extra parameters of the generated method
        returns: Rendered return annotation
        failure: Failure condition for documentation

    Returns:
        ActionRule for the action
    """

    def factory(ctx: MethodContext) -> Callable[..., Awaitable[Any]]:
        message = failure_message.format(field=ctx.field_name)

        async def run(page: Any, session: Any, **arguments: Any) -> Any:
            element = await _require_element(page, session, ctx, name)
            try:
                return await operation(element, session, ctx, **arguments)
            except ElementError:
                raise
            except Exception as e:
                raise ElementActionError(message, ctx.field_name, name, e) from e

        return run

    return ActionRule(
        name=name,
        method_template=f"{name}_{{field}}",
        summary=summary,
        parameters=list(parameters),
        returns=returns,
        failure=failure or f"{ELEMENT_ABSENT}, or {name.replace('_', ' ')} rejected",
        factory=factory,
    )


# Element operations


async def _click(element, session, ctx):
    await element.click()


async def _enter_keys(element, session, ctx, text):
    await element.type(text)


async def _clear(element, session, ctx):
    await element.fill("")


async def _get_text(element, session, ctx):
    return await element.inner_text()


async def _get_attribute(element, session, ctx, name):
    return await element.get_attribute(name)


async def _is_displayed(element, session, ctx):
    return await element.is_visible()


async def _is_selected(element, session, ctx):
    return await element.is_checked()


async def _is_enabled(element, session, ctx):
    return await element.is_enabled()


async def _select_by_text(element, session, ctx, text):
    await element.select_option(label=text)


async def _select_by_value(element, session, ctx, value):
    await element.select_option(value=value)


async def _select_by_index(element, session, ctx, index):
    await element.select_option(index=index)


async def _take_screenshot(element, session, ctx):
    return await element.screenshot(type=ctx.config.screenshot_type)


async def _hover(element, session, ctx):
    await element.hover()


async def _double_click(element, session, ctx):
    await element.dblclick()


async def _right_click(element, session, ctx):
    await element.click(button="right")


def _center(box: Dict[str, float]) -> Tuple[float, float]:
    return box["x"] + box["width"] / 2, box["y"] + box["height"] / 2


async def _drag_to(element, session, ctx, target):
    if target is None:
        raise ElementActionError(
            f"Failed to drag {ctx.field_name}: no target element", ctx.field_name, "drag_to"
        )

    source_box = await element.bounding_box()
    target_box = await target.bounding_box()
    if source_box is None or target_box is None:
        raise ElementActionError(
            f"Failed to drag {ctx.field_name}: element is not visible",
            ctx.field_name,
            "drag_to",
        )

    await session.mouse.move(*_center(source_box))
    await session.mouse.down()
    await session.mouse.move(*_center(target_box), steps=5)
    await session.mouse.up()


async def _submit(element, session, ctx):
    await element.evaluate(_SUBMIT_SCRIPT)


async def _check(element, session, ctx):
    await element.check()


async def _uncheck(element, session, ctx):
    await element.uncheck()


async def _get_value(element, session, ctx):
    return await element.input_value()


async def _scroll_into_view(element, session, ctx):
    await element.scroll_into_view_if_needed()


# Rules with their own control flow


def _exists_factory(ctx: MethodContext) -> Callable[..., Awaitable[bool]]:
    async def run(page: Any, session: Any) -> bool:
        try:
            element = await getattr(page, ctx.locate_method)(session)
        except Exception as e:
            logger.debug(f"Existence check for {ctx.field_name} failed: {e}")
            return False
        return element is not None

    return run


def _wait_factory(action: str, require_enabled: bool):
    def factory(ctx: MethodContext) -> Callable[..., Awaitable[Any]]:
        async def run(page: Any, session: Any, timeout_ms: Optional[int] = None) -> Any:
            timeout = ctx.config.default_timeout_ms if timeout_ms is None else timeout_ms
            interval = ctx.config.poll_interval_ms / 1000
            loop = asyncio.get_running_loop()
            deadline = loop.time() + timeout / 1000

            while True:
                element = await getattr(page, ctx.locate_method)(session)
                found_disabled = False

                if element is not None:
                    try:
                        visible = await element.is_visible()
                        enabled = (
                            await element.is_enabled()
                            if visible and require_enabled
                            else True
                        )
                    except Exception as e:
                        # Element may detach between polls
                        logger.debug(f"Polling {ctx.field_name} failed: {e}")
                        visible, enabled = False, False

                    if visible and enabled:
                        return element
                    found_disabled = visible and not enabled

                remaining = deadline - loop.time()
                if remaining <= 0:
                    break
                await asyncio.sleep(min(interval, remaining))

            if found_disabled:
                message = f"Element {ctx.field_name} found but disabled after {timeout}ms"
            elif require_enabled:
                message = f"Timed out after {timeout}ms waiting for {ctx.field_name} to become clickable"
            else:
                message = f"Timed out after {timeout}ms waiting for {ctx.field_name} to become visible"

            raise ElementTimeoutError(message, ctx.field_name, action, timeout)

        return run

    return factory


_TIMEOUT_PARAMETER = ActionParameter(
    name="timeout_ms", annotation="Optional[int]", has_default=True, default=None
)


def builtin_rules() -> List[ActionRule]:
    """Create the built-in action vocabulary.

    Returns:
        Rules in catalog documentation order
    """
    return [
        _element_rule(
            "click",
            "Click on the web element.",
            "Failed to click {field}",
            _click,
        ),
        _element_rule(
            "enter_keys",
            "Enter text into the web element.",
            "Failed to send keys to {field}",
            _enter_keys,
            parameters=[ActionParameter(name="text", annotation="str")],
            failure=f"{ELEMENT_ABSENT}, or send-keys rejected",
        ),
        _element_rule(
            "clear",
            "Clear input field content.",
            "Failed to clear {field}",
            _clear,
        ),
        _element_rule(
            "get_text",
            "Get the text content of the web element.",
            "Failed to get text from {field}",
            _get_text,
            returns="str",
            failure=f"{ELEMENT_ABSENT}, or text read rejected",
        ),
        _element_rule(
            "get_attribute",
            "Get an attribute of the web element.",
            "Failed to read attribute of {field}",
            _get_attribute,
            parameters=[ActionParameter(name="name", annotation="str")],
            returns="Optional[str]",
            failure=f"{ELEMENT_ABSENT}, or read rejected",
        ),
        _element_rule(
            "is_displayed",
            "Check if the web element is displayed.",
            "Failed to check if {field} is displayed",
            _is_displayed,
            returns="bool",
            failure=f"{ELEMENT_ABSENT}, or state read rejected",
        ),
        _element_rule(
            "is_selected",
            "Check if the web element is selected.",
            "Failed to check if {field} is selected",
            _is_selected,
            returns="bool",
            failure=f"{ELEMENT_ABSENT}, or state read rejected",
        ),
        _element_rule(
            "is_enabled",
            "Check if the web element is enabled.",
            "Failed to check if {field} is enabled",
            _is_enabled,
            returns="bool",
            failure=f"{ELEMENT_ABSENT}, or state read rejected",
        ),
        ActionRule(
            name="exists",
            method_template="exists_{field}",
            summary="Check if the web element is present in the DOM.",
            returns="bool",
            failure="never fails; errors report False",
            requires_element=False,
            never_fails=True,
            factory=_exists_factory,
        ),
        _element_rule(
            "select_by_text",
            "Select the dropdown option with the given visible text.",
            "Failed to select option by text in {field}",
            _select_by_text,
            parameters=[ActionParameter(name="text", annotation="str")],
            failure=f"{ELEMENT_ABSENT}, or selection rejected",
        ),
        _element_rule(
            "select_by_value",
            "Select the dropdown option with the given value.",
            "Failed to select option by value in {field}",
            _select_by_value,
            parameters=[ActionParameter(name="value", annotation="str")],
            failure=f"{ELEMENT_ABSENT}, or selection rejected",
        ),
        _element_rule(
            "select_by_index",
            "Select the dropdown option at the given index.",
            "Failed to select option by index in {field}",
            _select_by_index,
            parameters=[ActionParameter(name="index", annotation="int")],
            failure=f"{ELEMENT_ABSENT}, or selection rejected",
        ),
        ActionRule(
            name="wait_for",
            method_template="wait_for_{field}",
            summary="Wait until the web element is visible and return it.",
            parameters=[_TIMEOUT_PARAMETER],
            returns="ElementHandle",
            failure="timeout elapses before the element becomes visible",
            factory=_wait_factory("wait_for", require_enabled=False),
        ),
        ActionRule(
            name="wait_until_clickable",
            method_template="wait_until_clickable_{field}",
            summary="Wait until the web element is visible and enabled and return it.",
            parameters=[_TIMEOUT_PARAMETER],
            returns="ElementHandle",
            failure="timeout elapses, or element found but disabled",
            factory=_wait_factory("wait_until_clickable", require_enabled=True),
        ),
        _element_rule(
            "take_screenshot",
            "Capture a screenshot of the web element.",
            "Failed to take screenshot of {field}",
            _take_screenshot,
            returns="bytes",
            failure=f"{ELEMENT_ABSENT}, or capture rejected",
        ),
        _element_rule(
            "hover",
            "Move the pointer over the web element.",
            "Failed to hover over {field}",
            _hover,
            failure=f"{ELEMENT_ABSENT}, or gesture rejected",
        ),
        _element_rule(
            "double_click",
            "Double-click on the web element.",
            "Failed to double-click {field}",
            _double_click,
            failure=f"{ELEMENT_ABSENT}, or gesture rejected",
        ),
        _element_rule(
            "right_click",
            "Right-click on the web element.",
            "Failed to right-click {field}",
            _right_click,
            failure=f"{ELEMENT_ABSENT}, or gesture rejected",
        ),
        _element_rule(
            "drag_to",
            "Drag the web element onto a target element.",
            "Failed to drag {field}",
            _drag_to,
            parameters=[ActionParameter(name="target", annotation="ElementHandle")],
            failure=f"{ELEMENT_ABSENT}, or gesture rejected",
        ),
        _element_rule(
            "submit",
            "Submit the form containing the web element.",
            "Failed to submit {field}",
            _submit,
        ),
        _element_rule(
            "check",
            "Check the checkbox or radio button.",
            "Failed to check {field}",
            _check,
        ),
        _element_rule(
            "uncheck",
            "Uncheck the checkbox.",
            "Failed to uncheck {field}",
            _uncheck,
        ),
        _element_rule(
            "get_value",
            "Get the current value of the input element.",
            "Failed to get value of {field}",
            _get_value,
            returns="str",
            failure=f"{ELEMENT_ABSENT}, or value read rejected",
        ),
        _element_rule(
            "scroll_into_view",
            "Scroll the web element into view.",
            "Failed to scroll {field} into view",
            _scroll_into_view,
        ),
    ]
