"""Root CLI application for ore."""

import typer

from ore import __version__
from ore.cli import analyze, frida
from ore.utils.output import setup_logging

app = typer.Typer(
    name="ore",
    help="Inspect Electron application assets and generate Frida scripts.",
    no_args_is_help=True,
)

# Register subcommands
app.add_typer(analyze.app, name="analyze", help="Static asset analysis utilities")
app.add_typer(frida.app, name="frida", help="Frida script templates and generation")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"ore {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log skipped entries and other diagnostics to stderr.",
    ),
) -> None:
    """ore - Electron asset reverse engineering helper."""
    setup_logging(verbose)


if __name__ == "__main__":
    app()
