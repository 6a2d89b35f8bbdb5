"""CLI commands for Frida script templates."""

import json
from pathlib import Path

import typer
from rich.markup import escape
from rich.table import Table

from ore.core.frida import (
    build_custom_script,
    get_frida_script,
    get_frida_scripts,
)
from ore.exceptions import OreError
from ore.utils.output import console

app = typer.Typer(no_args_is_help=True)


def _emit_script(script: str, output: Path | None) -> None:
    if output is None:
        console.print_code(script)
        return

    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(script, encoding="utf-8")
    except OSError as e:
        console.print_error(f"Failed to write {output}: {e}")
        raise typer.Exit(1) from None

    console.print_success(f"Script written to {escape(str(output))}")
    console.print_info(f"Run with: frida <ProcessName> -l {escape(str(output))}")


@app.command("list")
def list_scripts(
    json_output: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Output as JSON.",
    ),
) -> None:
    """List the built-in Frida script templates."""
    console.set_json_mode(json_output)
    scripts = get_frida_scripts()

    if json_output:
        output = [s.model_dump(mode="json") for s in scripts]
        typer.echo(json.dumps(output, indent=2))
        return

    table = Table(title="Frida Script Templates")
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    for script in scripts:
        table.add_row(script.name, script.description)

    console.print(table)
    console.print_info("Show one with: ore frida show '<name>'")


@app.command("show")
def show_script(
    name: str = typer.Argument(..., help="Template name, e.g. 'Memory Dump'."),
    output: Path = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the script to this file instead of printing it.",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Output as JSON.",
    ),
) -> None:
    """Print or save one built-in script template."""
    console.set_json_mode(json_output)

    try:
        script = get_frida_script(name)
    except OreError as e:
        console.print_error(str(e))
        raise typer.Exit(1) from None

    if json_output:
        typer.echo(json.dumps(script.model_dump(mode="json"), indent=2))
        return

    if output is None:
        console.print(f"\n[bold]{escape(script.name)}[/bold]")
        console.print(escape(script.description))
    _emit_script(script.script, output)


@app.command("generate")
def generate_script(
    target: str = typer.Argument(
        ...,
        help="Global function to hook. Non-identifier characters are stripped.",
    ),
    output: Path = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the script to this file instead of printing it.",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Output as JSON.",
    ),
) -> None:
    """Generate a Frida script that hooks a global function by name.

    The generated hook logs every call's arguments and return value.
    """
    console.set_json_mode(json_output)
    try:
        custom = build_custom_script(target)
    except OreError as e:
        console.print_error(str(e))
        raise typer.Exit(1) from None

    if json_output:
        typer.echo(json.dumps(custom.model_dump(mode="json"), indent=2))
        return

    _emit_script(custom.script, output)
