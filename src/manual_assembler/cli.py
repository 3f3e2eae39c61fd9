"""
CLI for the manual assembler.

Usage:
    manual-assembler build
    manual-assembler build -f html -o site
    manual-assembler tree --manual-dir docs/manual
    manual-assembler decode Sselect_tool 1_getting_started
"""

import json
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from manual_assembler import __version__
from manual_assembler.builder import ManualBuilder
from manual_assembler.config import KNOWN_FORMATS, ManualConfig
from manual_assembler.errors import ManualError
from manual_assembler.logging import configure_logging
from manual_assembler.naming import (
    ItemNameStyle,
    decode_stem,
    item_display_name,
    section_display_name,
)

console = Console()
err_console = Console(stderr=True)

ITEM_NAME_CHOICES = [style.value for style in ItemNameStyle]


def _load_config(config_path: str | None, **overrides) -> ManualConfig:
    config = ManualConfig.from_yaml(Path(config_path)) if config_path else ManualConfig()
    return config.merge(**overrides)


def _fail(error: ManualError) -> None:
    err_console.print(f"[bold red]❌ {escape(error.message)}[/bold red]")
    if error.cause is not None:
        err_console.print(f"   [red]{escape(str(error.cause))}[/red]")
    sys.exit(1)


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    help="Log level for diagnostics (written to stderr).",
)
@click.option("--json-logs", is_flag=True, help="Emit logs as JSON.")
def cli(log_level: str, json_logs: bool):
    """Assemble a manual from its section/item directory tree."""
    configure_logging(level=log_level, json_format=json_logs or None)


@cli.command()
@click.option(
    "--config", "-c", "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML configuration file.",
)
@click.option(
    "--manual-dir", "-m",
    type=click.Path(),
    help="Manual source directory (default: docs/manual).",
)
@click.option(
    "--output-dir", "-o",
    type=click.Path(),
    help="Directory to write output to (default: docs).",
)
@click.option(
    "--format", "-f", "formats",
    type=click.Choice(KNOWN_FORMATS),
    multiple=True,
    help="Formats to build. Builds every configured format if not specified.",
)
@click.option("--title", "-t", help="Manual title.")
@click.option(
    "--item-names",
    type=click.Choice(ITEM_NAME_CHOICES),
    help="raw: item names as written; decoded: underscores to spaces, capitalised.",
)
def build(config_path, manual_dir, output_dir, formats, title, item_names):
    """Build the manual in one or more formats.

    Examples:
        manual-assembler build
        manual-assembler build -f markdown -f html -o site
        manual-assembler build -c manual.yaml
    """
    try:
        config = _load_config(
            config_path,
            manual_dir=manual_dir,
            output_dir=output_dir,
            formats=list(formats) or None,
            title=title,
            item_names=item_names,
        )
        builder = ManualBuilder(config)
        results = builder.build_all()
    except ManualError as e:
        _fail(e)
        return

    table = Table(title="Manual Build")
    table.add_column("Format", style="cyan")
    table.add_column("File")
    table.add_column("Size", justify="right")

    for fmt, size in results.items():
        table.add_row(fmt, str(builder.output_path(fmt)), f"{size:,} bytes")

    console.print(table)


@cli.command()
@click.option(
    "--manual-dir", "-m",
    type=click.Path(),
    default="docs/manual",
    show_default=True,
    help="Manual source directory.",
)
@click.option(
    "--item-names",
    type=click.Choice(ITEM_NAME_CHOICES),
    default=ItemNameStyle.RAW.value,
    show_default=True,
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
def tree(manual_dir: str, item_names: str, as_json: bool):
    """Show the sections and items in processing order."""
    try:
        config = ManualConfig(manual_dir=Path(manual_dir), item_names=item_names)
        manual_tree = ManualBuilder(config).scan()
    except ManualError as e:
        _fail(e)
        return

    if as_json:
        data = [
            {
                "name": section.name,
                "kind": section.kind.value,
                "path": str(section.path),
                "items": [
                    {"name": item.name, "kind": item.kind.value, "path": str(item.path)}
                    for item in section.items
                ],
            }
            for section in manual_tree.sections
        ]
        click.echo(json.dumps(data, indent=2))
        return

    table = Table(title=f"Manual: {manual_tree.root}")
    table.add_column("Section", style="cyan")
    table.add_column("Item")
    table.add_column("Kind", justify="center")
    table.add_column("Path", style="dim")

    for section in manual_tree.sections:
        table.add_row(escape(section.name), "", section.kind.value, section.path.name)
        for item in section.items:
            table.add_row("", escape(item.name), item.kind.value, item.path.name)

    console.print(table)
    console.print(
        f"[bold]{len(manual_tree.sections)}[/bold] sections, "
        f"[bold]{manual_tree.item_count}[/bold] items"
    )


@cli.command()
@click.argument("names", nargs=-1, required=True)
def decode(names: tuple[str, ...]):
    """Show how entry names are classified and displayed."""
    table = Table()
    table.add_column("Stem", style="cyan")
    table.add_column("Kind", justify="center")
    table.add_column("Section name")
    table.add_column("Item name")

    failed = False
    for name in names:
        stem = Path(name).stem
        try:
            kind, remainder = decode_stem(stem)
        except ManualError as e:
            table.add_row(escape(stem), "[red]invalid[/red]", escape(e.message), "")
            failed = True
            continue
        table.add_row(
            escape(stem),
            kind.value,
            escape(section_display_name(remainder)),
            escape(item_display_name(remainder)),
        )

    console.print(table)
    if failed:
        sys.exit(1)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
