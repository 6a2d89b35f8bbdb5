"""CLI commands for static asset analysis."""

import json
from pathlib import Path

import typer
from rich.markup import escape
from rich.table import Table

from ore.core.analyzer import analyze_directory, read_file_content
from ore.core.classifier import extension_of
from ore.core.extractor import (
    SCRIPT_EXTENSIONS,
    extract_functions_from_file,
    is_script_asset,
)
from ore.exceptions import OreError
from ore.utils.config import get_max_file_size
from ore.utils.output import console, format_size

app = typer.Typer(no_args_is_help=True)

DEFAULT_PREVIEW_CHARS = 5000


@app.command("directory")
def analyze_assets(
    path: str = typer.Argument(
        ...,
        help="Application directory to inventory (e.g. resources/app).",
    ),
    file_type: str = typer.Option(
        None,
        "--type",
        "-t",
        help="Only list assets with this type label (e.g. 'JavaScript').",
    ),
    limit: int = typer.Option(
        None,
        "--limit",
        "-n",
        min=0,
        help="Maximum number of assets to list.",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Output as JSON.",
    ),
) -> None:
    """Inventory every file below a directory, following symbolic links.

    Unreadable entries and broken links are skipped silently
    (use --verbose to see them).
    """
    console.set_json_mode(json_output)

    try:
        result = analyze_directory(path)
    except OreError as e:
        console.print_error(str(e))
        raise typer.Exit(1) from None

    if json_output:
        typer.echo(json.dumps(result.model_dump(mode="json"), indent=2))
        return

    console.print("\n[bold]Analysis Summary[/bold]")
    console.print(f"  Directory:    {escape(result.directory)}")
    console.print(f"  Total files:  {result.total_files}")
    console.print(f"  Total size:   {format_size(result.total_size)}")
    scripts = sum(1 for asset in result.assets if is_script_asset(asset))
    console.print(f"  Script files: {scripts}")

    if not result.assets:
        console.print_warning("No files found.")
        return

    summary = Table(title="File Types")
    summary.add_column("Type", style="cyan")
    summary.add_column("Files", justify="right")
    summary.add_column("Size", justify="right")
    for label, (count, size) in result.type_summary.items():
        summary.add_row(label, str(count), format_size(size))
    console.print(summary)

    assets = result.filter_by_type(file_type) if file_type else result.assets
    if limit is not None:
        assets = assets[:limit]

    table = Table(title=f"Files ({len(assets)})")
    table.add_column("Name", style="cyan")
    table.add_column("Type", style="green")
    table.add_column("Size", justify="right")
    table.add_column("Path")
    for asset in assets:
        table.add_row(
            escape(asset.file_name),
            asset.file_type,
            format_size(asset.size),
            escape(asset.path),
        )
    console.print(table)


@app.command("read")
def read_file(
    path: str = typer.Argument(..., help="File to read."),
    max_size: int = typer.Option(
        None,
        "--max-size",
        "-m",
        min=0,
        help="Refuse files larger than this many bytes (default: 1 MiB or config).",
    ),
    preview: int = typer.Option(
        DEFAULT_PREVIEW_CHARS,
        "--preview",
        "-p",
        min=0,
        help="Characters of content to show (0 shows everything).",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Output as JSON.",
    ),
) -> None:
    """Print the text content of a single file."""
    console.set_json_mode(json_output)
    limit = max_size if max_size is not None else get_max_file_size()

    try:
        content = read_file_content(path, limit)
    except OreError as e:
        console.print_error(str(e))
        raise typer.Exit(1) from None

    if json_output:
        typer.echo(json.dumps({"path": path, "content": content}, indent=2))
        return

    if preview and len(content) > preview:
        console.print_code(content[:preview])
        console.print_info(
            f"Content truncated (showing first {preview} of {len(content)} characters)"
        )
    else:
        console.print_code(content)


@app.command("functions")
def list_functions(
    path: str = typer.Argument(..., help="JavaScript/TypeScript file to scan."),
    max_size: int = typer.Option(
        None,
        "--max-size",
        "-m",
        min=0,
        help="Refuse files larger than this many bytes (default: 1 MiB or config).",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Output as JSON.",
    ),
) -> None:
    """List probable function and method names found in a source file.

    Names come from pattern matching, not parsing; expect some noise.
    """
    console.set_json_mode(json_output)
    limit = max_size if max_size is not None else get_max_file_size()

    if extension_of(Path(path).name) not in SCRIPT_EXTENSIONS:
        console.print_warning("Not a JavaScript/TypeScript file; results may be noise.")

    try:
        functions = extract_functions_from_file(path, limit)
    except OreError as e:
        console.print_error(str(e))
        raise typer.Exit(1) from None

    if json_output:
        typer.echo(json.dumps(functions, indent=2))
        return

    if not functions:
        console.print_warning("No functions detected.")
        return

    console.print(f"\n[bold]Detected Functions ({len(functions)}):[/bold]")
    for name in functions:
        console.print(f"  {escape(name)}")
