"""Render generated method sets as stub source.

The stub is a reviewable, diffable artifact of what the generator attached
to a class. Rendering is a pure function of the method set, so equal inputs
render byte-identical text.
"""

from typing import List

from ..models.generation_models import (
    ActionParameter,
    GeneratedMethod,
    GeneratedMethodSet,
    ParameterKind,
)

_HEADER = [
    "from typing import Optional",
    "",
    "from pom_actions.runtime import AutomationSession, ElementHandle",
]

_INDENT = "    "


def render_parameters(parameters: List[ActionParameter]) -> str:
    """Render the parameter list of a generated method, including self and session."""
    rendered = ["self", "session: AutomationSession"]
    keyword_only_started = False
    for parameter in parameters:
        if parameter.kind == ParameterKind.KEYWORD_ONLY and not keyword_only_started:
            rendered.append("*")
            keyword_only_started = True
        text = f"{parameter.name}: {parameter.annotation}"
        if parameter.has_default:
            text += f" = {parameter.default!r}"
        rendered.append(text)
    return ", ".join(rendered)


def render_method(method: GeneratedMethod) -> List[str]:
    lines = [
        f"{_INDENT}async def {method.name}({render_parameters(method.parameters)})"
        f" -> {method.returns}:"
    ]
    doc_lines = method.doc.splitlines() or [""]
    if len(doc_lines) == 1:
        lines.append(f'{_INDENT * 2}"""{doc_lines[0]}"""')
    else:
        lines.append(f'{_INDENT * 2}"""{doc_lines[0]}')
        for line in doc_lines[1:]:
            lines.append(f"{_INDENT * 2}{line}" if line else "")
        lines.append(f'{_INDENT * 2}"""')
    lines.append(f"{_INDENT * 2}...")
    return lines


def render_stub(method_set: GeneratedMethodSet) -> str:
    """
    Render a method set as a .pyi-style class stub.

    Args:
        method_set: Generated method set

    Returns:
        Stub source text ending with a newline
    """
    lines = [f"# Generated page object methods for {method_set.type_name}", *_HEADER, "", ""]
    lines.append(f"class {method_set.type_name}:")

    if not method_set.methods:
        lines.append(f"{_INDENT}...")

    for index, method in enumerate(method_set.methods):
        if index:
            lines.append("")
        lines.extend(render_method(method))

    return "\n".join(lines) + "\n"
