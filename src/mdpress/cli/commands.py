"""CLI command implementations"""

import json
import logging
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdpress.config import Settings, load_config
from mdpress.core.parse import discover_files, parse_file
from mdpress.core.pipeline import convert_document, run_convert


LOGGER_NAME = "mdpress"


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def setup_logging(level: str) -> None:
    """Point the package logger at the current stderr with a single handler."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(handler)


def main_callback(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug output")] = False,
    quiet: Annotated[bool, typer.Option("--quiet", "-q", help="Only show errors")] = False,
    ):
    """Markdown with front matter -> HTML post content + metadata."""
    if quiet:
        level = "ERROR"
    elif verbose:
        level = "DEBUG"
    else:
        level = _settings().log_level
    setup_logging(level)


def convert_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to convert")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    status: Annotated[Optional[str], typer.Option("--status", help="Default post status: draft, publish or private")] = None,
    no_hashtag: Annotated[bool, typer.Option("--no-hashtag", help="Do not prepend the hashtag paragraph")] = False,
    ):
    """Convert Markdown files to <slug>.html + <slug>.json."""
    settings = _settings(overrides={
        "output_dir": out, "default_status": status,
        "prepend_hashtag": False if no_hashtag else None,
    })
    if not discover_files(Path(path)):
        typer.echo(f"No Markdown files found at {path}.")
        raise typer.Exit(1)

    output_dir = Path(settings.output_dir)
    try:
        results = run_convert(path, output_dir, settings)
    except RuntimeError as e:
        _fail(str(e))
    for src, html_path in results:
        typer.echo(f"  {src} -> {html_path}")
    typer.echo(f"Converted {len(results)} document(s) to {output_dir}/")


def preview_cmd(
    path: Annotated[Path, typer.Argument(exists=True, dir_okay=False, readable=True, help="Markdown file")],
    metadata: Annotated[bool, typer.Option("--metadata", help="Print the parsed front matter as JSON instead")] = False,
    ):
    """Print the converted HTML of one file to stdout."""
    try:
        raw = parse_file(path).raw_markdown
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"Cannot read {path}", e)
    result = convert_document(raw)
    if metadata:
        typer.echo(json.dumps(result.metadata, indent=2, ensure_ascii=False))
    else:
        typer.echo(result.html)
