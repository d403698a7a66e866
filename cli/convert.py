"""
CLI Entry Point for sqlstruct

Usage:
    sqlstruct generate <file_path> [<table_name>] [mode=sql/json/sb/sql+sb/...]
    sqlstruct analyze --source <path> [--table <name>] [--format table|json|yaml]
    sqlstruct config show
    sqlstruct config validate
"""

import json
import logging
from pathlib import Path
from typing import List, Optional, Tuple

import click
import yaml
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from sqlstruct import __version__
from sqlstruct.config_loader import ConfigLoader, GeneratorConfig
from sqlstruct.errors import SQLStructError
from sqlstruct.parser import parse_sql
from sqlstruct.rendering.struct_renderer import MODE_PREFIX, parse_modes
from sqlstruct.settings import get_settings

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def get_config_path(ctx) -> Path:
    """Get config path from context or default."""
    return ctx.obj.get("config_path") if ctx.obj else Path(__file__).parent.parent / "config"


def load_config(ctx) -> GeneratorConfig:
    """Load configuration, falling back to defaults when no file is present.

    A missing file is only an error when the directory was chosen explicitly.
    """
    loader = ConfigLoader(get_config_path(ctx))
    try:
        return loader.load_config()
    except FileNotFoundError:
        if ctx.obj.get("config_explicit"):
            raise click.ClickException(f"Configuration file not found: {loader.config_path}")
        logger.debug(f"No configuration at {loader.config_path}, using defaults")
        return GeneratorConfig()
    except (yaml.YAMLError, ValueError) as e:
        raise click.ClickException(f"Invalid configuration {loader.config_path}: {e}")


@click.group()
@click.option(
    "--config-dir", "-c",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="Path to configuration directory"
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx, config_dir: Optional[str], verbose: bool):
    """sqlstruct.

    Generate Go struct declarations from MySQL CREATE TABLE statements.

    Use --config-dir (or SQLSTRUCT_CONFIG_DIR) to specify custom configuration.
    """
    ctx.ensure_object(dict)
    settings = get_settings()

    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level_value,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if config_dir:
        ctx.obj["config_path"] = Path(config_dir)
        ctx.obj["config_explicit"] = True
    elif settings.config_dir:
        ctx.obj["config_path"] = settings.config_dir
        ctx.obj["config_explicit"] = True
    else:
        ctx.obj["config_path"] = Path(__file__).parent.parent / "config"
        ctx.obj["config_explicit"] = False


# =============================================================================
# GENERATION
# =============================================================================

def split_positional_args(args: Tuple[str, ...]) -> Tuple[Optional[str], Optional[str]]:
    """Split `[<table_name>] [mode=...]` into (table_name, mode).

    An argument containing '=' is the mode and must come last.
    """
    if len(args) > 2:
        raise click.UsageError("Too many arguments: expected [<table_name>] [mode=...]")
    if not args:
        return None, None

    first = args[0]
    if "=" in first:
        if len(args) > 1:
            raise click.UsageError("The mode argument must come after the table name")
        return None, first

    mode = args[1] if len(args) > 1 else None
    return first, mode


@cli.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
@click.argument("args", nargs=-1)
@click.option("--mode", "-m", "mode_option", default=None, help="Output flavors, e.g. sql+json or sb")
@click.option("--output", "-o", type=click.Path(dir_okay=False), default=None, help="Write to file instead of stdout")
@click.pass_context
def generate(ctx, source: str, args: Tuple[str, ...], mode_option: Optional[str], output: Optional[str]):
    """Generate Go structs from a SQL file.

    \b
    ARGS: [<table_name>] [mode=sql/json/sb/sql+sb/...]
    """
    table_name, mode = split_positional_args(args)
    if mode_option:
        if mode:
            raise click.UsageError("Pass the mode either as mode=... or with --mode, not both")
        mode = mode_option if mode_option.startswith(MODE_PREFIX) else MODE_PREFIX + mode_option

    config = load_config(ctx)
    output_types = parse_modes(mode, default=config.default_modes)

    content = Path(source).read_bytes()
    try:
        tables = parse_sql(content, table_name, normalizer=config.build_normalizer())
    except SQLStructError as e:
        err_console.print(f"[red]✗[/red] {escape(str(e))}")
        raise click.Abort()

    renderer = config.build_renderer()
    rendered = renderer.render_all(tables, output_types)

    if output:
        Path(output).write_text("".join(block + "\n" for block in rendered))
        err_console.print(f"[green]✓[/green] Wrote {len(tables)} tables to {escape(output)}")
    else:
        for block in rendered:
            click.echo(block)


# =============================================================================
# ANALYSIS
# =============================================================================

@cli.command()
@click.option(
    "--source", "-s",
    type=click.Path(exists=True, dir_okay=False),
    required=True,
    help="Path to SQL file"
)
@click.option("--table", "-t", "table_name", default=None, help="Only analyze this table")
@click.option(
    "--format", "-f",
    type=click.Choice(["json", "yaml", "table"]),
    default="table",
    help="Output format"
)
@click.pass_context
def analyze(ctx, source: str, table_name: Optional[str], format: str):
    """Show the parsed schema without generating code."""
    config = load_config(ctx)
    source_path = Path(source)

    try:
        tables = parse_sql(source_path.read_bytes(), table_name, normalizer=config.build_normalizer())
    except SQLStructError as e:
        err_console.print(f"[red]✗[/red] {escape(str(e))}")
        raise click.Abort()

    summary = [t.to_dict() for t in tables]

    if format == "json":
        console.print(Syntax(json.dumps(summary, indent=2), "json"))
    elif format == "yaml":
        console.print(Syntax(yaml.dump(summary, default_flow_style=False, sort_keys=False), "yaml"))
    else:
        _display_tables(source_path, tables)


def _display_tables(source_path: Path, tables: List) -> None:
    """Display parsed tables in rich table format."""
    console.print(f"\n[bold blue]Analyzing SQL:[/bold blue] {escape(source_path.name)}\n")

    if not tables:
        console.print("[yellow]No CREATE TABLE IF NOT EXISTS blocks found[/yellow]")
        return

    for table in tables:
        col_table = Table(title=f"{table.name} ({table.raw_name})")
        col_table.add_column("Column", style="cyan")
        col_table.add_column("Field", style="green")
        col_table.add_column("SQL Type", style="yellow")
        col_table.add_column("Go Type", style="green")
        col_table.add_column("Unsigned", justify="center")

        for column in table.columns:
            col_table.add_row(
                escape(column.raw_name),
                escape(column.name),
                escape(column.raw_type),
                escape(column.type) if column.type else "[red]?[/red]",
                "✓" if column.unsigned else "",
            )

        console.print(col_table)
        console.print()


# =============================================================================
# CONFIGURATION COMMANDS
# =============================================================================

@cli.group()
def config():
    """Manage generator configuration."""
    pass


@config.command("show")
@click.pass_context
def config_show(ctx):
    """Display current configuration settings."""
    config = load_config(ctx)

    console.print(Panel(
        f"[bold]{escape(config.config_name)}[/bold] v{escape(config.version)}",
        title="Configuration"
    ))

    table = Table(title="Generator Settings")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Config Path", escape(str(get_config_path(ctx))))
    table.add_row("Default Modes", "+".join(m.value for m in config.default_modes))
    table.add_row("Align Fields", "Enabled" if config.align_fields else "Disabled")
    table.add_row("Strict Types", "Enabled" if config.strict_types else "Disabled")
    table.add_row("Naming Overrides", str(len(config.naming_overrides)))

    console.print(table)

    for word, spelling in sorted(config.naming_overrides.items()):
        console.print(f"  - {escape(word)} → {escape(spelling)}")


@config.command("validate")
@click.pass_context
def config_validate(ctx):
    """Validate configuration file."""
    loader = ConfigLoader(get_config_path(ctx))

    try:
        config = loader.load_config()
    except (FileNotFoundError, yaml.YAMLError, ValueError) as e:
        console.print(f"[red]✗[/red] Configuration error: {escape(str(e))}")
        raise click.Abort()

    console.print("[green]✓[/green] Configuration is valid")
    console.print(f"  - default modes: {'+'.join(m.value for m in config.default_modes)}")
    console.print(f"  - {len(config.naming_overrides)} naming overrides defined")


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
