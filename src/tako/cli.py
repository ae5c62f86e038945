"""Command-line interface for tako."""

from pathlib import Path
from typing import Optional

import click

from . import __version__
from .config import Settings, load_settings, resolve_terminal_width
from .errors import ConfigError, TakoError
from .logger import logger, setup_logging
from .parser import Symbol, load_document, render_tree
from .walker import discover_source_files


def _load_settings() -> Settings:
    try:
        return load_settings()
    except ConfigError as e:
        raise click.ClickException(str(e)) from e


def _echo_symbols(path: Path, symbols: list[Symbol]) -> None:
    click.echo(f"{path}:")
    for symbol in symbols:
        click.echo(f"{symbol}\n")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, prog_name="tako")
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Enable debug logging on stderr.",
)
def cli(debug: bool) -> None:
    """Summarize source code declarations and syntax trees."""
    setup_logging(debug)


@cli.command()
@click.argument("path", type=click.Path(exists=True, path_type=Path))
def symbols(path: Path) -> None:
    """Print the declarations of every source file under PATH."""
    settings = _load_settings()
    failed = 0

    for file_path in discover_source_files(path, max_size=settings.max_file_size):
        try:
            doc = load_document(file_path)
            found = doc.query_symbols()
        except (TakoError, OSError) as e:
            logger.error("file_failed", file=str(file_path), error=str(e))
            click.echo(f"{file_path}: {e}", err=True)
            failed += 1
            continue
        _echo_symbols(file_path, found)

    if failed:
        raise SystemExit(1)


@cli.command()
@click.argument(
    "file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.argument("pattern")
def symbol(file: Path, pattern: str) -> None:
    """Print the full source of declarations in FILE whose name matches PATTERN."""
    try:
        doc = load_document(file)
        found = doc.find_symbols_matching(pattern)
    except (TakoError, OSError) as e:
        raise click.ClickException(str(e)) from e
    _echo_symbols(file, found)


@cli.command()
@click.argument(
    "file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-d",
    "--depth",
    type=click.IntRange(min=0),
    default=None,
    help="Number of tree levels to print (default: TAKO_TREE_DEPTH or 4).",
)
def tree(file: Path, depth: Optional[int]) -> None:
    """Print the syntax tree of FILE."""
    settings = _load_settings()
    if depth is None:
        depth = settings.tree_depth
    width = resolve_terminal_width(settings)

    try:
        doc = load_document(file)
    except (TakoError, OSError) as e:
        raise click.ClickException(str(e)) from e

    for line in render_tree(doc, depth, width):
        click.echo(line)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
