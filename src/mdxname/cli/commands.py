"""CLI command implementations"""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError

from mdxname.config import Settings, load_config
from mdxname.core.analyze import analyze_content
from mdxname.core.export import describe_status, export_document
from mdxname.core.models import DEFAULT_FILENAME, Outcome, ParsingResult
from mdxname.core.sample import SAMPLE_DOCUMENT
from mdxname.errors import MdxnameError
from mdxname.logging import get_logger


STATUS_COLORS = {"error": typer.colors.YELLOW, "success": typer.colors.GREEN, "info": None}


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
    except (MdxnameError, ValidationError) as e:
        _fail("Invalid configuration", e)


def _read(path: str) -> str:
    """Read document content from path, or from stdin when path is '-'."""
    if path == "-":
        return typer.get_text_stream("stdin").read()
    try:
        return Path(path).read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"Cannot read {path}", e)


def _analyze(content: str) -> ParsingResult:
    """Analyze content; blank input gets the neutral default result."""
    if not content.strip():
        return ParsingResult(outcome=Outcome.empty)
    return analyze_content(content)


def _echo_status(result: ParsingResult) -> None:
    level, message = describe_status(result)
    typer.secho(f"[{level}] {message}", fg=STATUS_COLORS[level])
    typer.echo(f"filename: {result.filename}")


def analyze_cmd(
    path: Annotated[str, typer.Argument(help="MDX file to analyze ('-' for stdin)")],
    as_json: Annotated[bool, typer.Option("--json", help="Print the result as JSON")] = False,
    verbose: Annotated[Optional[bool], typer.Option("--verbose", "-v", help="Enable debug logging")] = None,
    ):
    """Derive the output filename from a document's frontmatter."""
    settings = _settings(overrides={"verbose": verbose})
    get_logger("mdxname", settings.verbose)
    result = _analyze(_read(path))
    if as_json:
        typer.echo(json.dumps(result.to_display(), indent=2))
    else:
        _echo_status(result)
    if not result.is_valid:
        raise typer.Exit(1)


def export_cmd(
    path: Annotated[str, typer.Argument(help="MDX file to export ('-' for stdin)")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    filename: Annotated[Optional[str], typer.Option("--filename", help="Override the derived filename")] = None,
    overwrite: Annotated[Optional[bool], typer.Option("--overwrite", help="Replace an existing file")] = None,
    allow_untitled: Annotated[bool, typer.Option("--allow-untitled", help=f"Export even when the name falls back to {DEFAULT_FILENAME}")] = False,
    verbose: Annotated[Optional[bool], typer.Option("--verbose", "-v", help="Enable debug logging")] = None,
    ):
    """Write the document to the output directory under its derived filename."""
    settings = _settings(overrides={"output_dir": out, "overwrite": overwrite, "verbose": verbose})
    get_logger("mdxname", settings.verbose)
    content = _read(path)
    if not content:
        _fail("Nothing to export: document is empty")

    result = _analyze(content)
    _echo_status(result)
    name = filename or result.filename
    if name == DEFAULT_FILENAME and not allow_untitled:
        _fail(f"No filename derived; pass --filename or --allow-untitled to export as {DEFAULT_FILENAME}")

    try:
        dest = export_document(content, name, Path(settings.output_dir), settings.overwrite)
    except (MdxnameError, OSError) as e:
        _fail("Export failed", e)
    typer.echo(f"  {path} -> {dest}")


def sample_cmd():
    """Print a sample MDX document with a canonical URL."""
    typer.echo(SAMPLE_DOCUMENT, nl=False)
