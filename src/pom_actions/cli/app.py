"""Command line interface for inspecting generated page object methods."""

import importlib
import logging
import sys
from typing import Any

import click
from rich.console import Console
from rich.table import Table

from ..config.generator_config import GeneratorConfig
from ..errors import GenerationError
from ..generation.actions import locate_rule
from ..generation.catalog import default_catalog
from ..generation.decorator import generated_methods
from ..generation.renderer import render_parameters, render_stub
from ..generation.synthesizer import generate_methods

logger = logging.getLogger(__name__)


def load_target(target: str) -> Any:
    """
    Import the object named by ``module:attribute``.

    Args:
        target: Import path such as ``tests.pages:LoginPage``

    Returns:
        The imported object

    Raises:
        click.BadParameter: If the path is malformed or cannot be imported
    """
    module_name, sep, attribute = target.partition(":")
    if not sep or not module_name or not attribute:
        raise click.BadParameter(
            f"expected 'module:Class', got {target!r}", param_hint="TARGET"
        )

    try:
        obj = importlib.import_module(module_name)
    except ImportError as e:
        raise click.BadParameter(f"cannot import {module_name}: {e}", param_hint="TARGET")

    for part in attribute.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError:
            raise click.BadParameter(
                f"{module_name} has no attribute {attribute}", param_hint="TARGET"
            )
    return obj


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """pom-actions - inspect page object method generation."""
    log_level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


@main.command("catalog")
def catalog_cmd() -> None:
    """List the supported actions."""
    console = Console()
    config = GeneratorConfig()

    table = Table(title="Page Object Actions", show_header=True)
    table.add_column("Action", style="cyan")
    table.add_column("Method")
    table.add_column("Parameters")
    table.add_column("Returns")
    table.add_column("Fails When", style="dim")

    for rule in [locate_rule(config.locate_prefix), *default_catalog().list_rules()]:
        table.add_row(
            rule.name,
            rule.method_template,
            render_parameters(rule.parameters),
            rule.returns,
            rule.failure,
        )

    console.print(table)


@main.command("describe")
@click.argument("target")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["stub", "json", "table"]),
    default="stub",
    show_default=True,
    help="Output format",
)
@click.pass_context
def describe_cmd(ctx: click.Context, target: str, output_format: str) -> None:
    """Show the methods generated for TARGET (module:Class)."""
    cls = load_target(target)
    method_set = _generate_or_exit(ctx, cls)

    if output_format == "stub":
        click.echo(render_stub(method_set), nl=False)
    elif output_format == "json":
        click.echo(method_set.model_dump_json(indent=2))
    else:
        table = Table(title=f"{method_set.type_name} ({len(method_set)} methods)")
        table.add_column("Method", style="cyan")
        table.add_column("Field")
        table.add_column("Action")
        table.add_column("Returns")
        for method in method_set.methods:
            table.add_row(method.name, method.field_name, method.action, method.returns)
        Console().print(table)


@main.command("check")
@click.argument("target")
@click.pass_context
def check_cmd(ctx: click.Context, target: str) -> None:
    """Exit non-zero if methods cannot be generated for TARGET."""
    cls = load_target(target)
    method_set = _generate_or_exit(ctx, cls)
    click.echo(f"OK: {method_set.type_name} generates {len(method_set)} methods")


def _generate_or_exit(ctx: click.Context, cls: Any):
    attached = generated_methods(cls)
    if attached is not None:
        return attached
    try:
        return generate_methods(cls)
    except GenerationError as e:
        if ctx.obj and ctx.obj.get("verbose"):
            logger.exception("Generation failed")
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
