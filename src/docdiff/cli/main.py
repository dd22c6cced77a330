"""
DocDiff CLI - Command line interface for comparing JSON and XML documents.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click

from .. import __version__
from ..canonical import canonicalize, validate as validate_document
from ..core.config import get_config
from ..core.errors import DocumentParseError
from ..core.models import DiffResult, LineKind
from ..diff.comparator import DocumentDiffEngine

EXIT_EQUAL = 0
EXIT_DIFFERENT = 1
EXIT_ERROR = 2

_PREFIXES = {
    LineKind.SAME: "  ",
    LineKind.ADDED: "+ ",
    LineKind.REMOVED: "- ",
    LineKind.CHANGED: "~ ",
}

format_option = click.option(
    "--format",
    "-f",
    "fmt",
    type=click.Choice(["json", "xml"]),
    default=None,
    help="Document format (inferred from the file suffix when omitted)",
)


def _infer_format(path: str, fmt: Optional[str]) -> str:
    """Pick the document format from the option or the file suffix."""
    if fmt:
        return fmt
    return "xml" if Path(path).suffix.lower() == ".xml" else "json"


def _read(path: str) -> str:
    """Read a document as UTF-8, exiting with an error if it is not."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError:
        click.echo(f"Error: {path} is not valid UTF-8", err=True)
        sys.exit(EXIT_ERROR)


@click.group()
@click.version_option(version=__version__, prog_name="docdiff")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose):
    """
    DocDiff - Structural diff for JSON and XML documents

    Compares documents after canonicalization, so formatting and key order
    never show up as differences.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command()
@click.argument("left", type=click.Path(exists=True, dir_okay=False))
@click.argument("right", type=click.Path(exists=True, dir_okay=False))
@format_option
@click.option("--output", "-o", type=click.Choice(["text", "json"]), default="text")
@click.option("--out", type=click.Path(dir_okay=False), help="Output file path")
@click.option("--max-bytes", type=int, help="Reject inputs larger than this many bytes (0 = no limit)")
@click.option("--max-lines", type=int, help="Reject canonical forms longer than this many lines (0 = no limit)")
def compare(left, right, fmt, output, out, max_bytes, max_lines):
    """
    Compare two documents and show differences.

    LEFT is the baseline document.
    RIGHT is the comparison document.

    Exits 0 when equivalent, 1 when different, 2 on error.
    """
    config = get_config().with_overrides(max_input_bytes=max_bytes, max_input_lines=max_lines)
    engine = DocumentDiffEngine(config)
    result = engine.diff(_read(left), _read(right), _infer_format(left, fmt))

    if output == "json":
        rendered = json.dumps(result.to_dict(), indent=2, ensure_ascii=False)
    else:
        rendered = _render_text(result)

    if out:
        Path(out).write_text(rendered + "\n", encoding="utf-8")
        click.echo(f"Output written to: {out}")
    else:
        click.echo(rendered)

    if result.error:
        sys.exit(EXIT_ERROR)
    sys.exit(EXIT_EQUAL if result.equal else EXIT_DIFFERENT)


def _render_text(result: DiffResult) -> str:
    """Render a result as a summary followed by prefixed rows."""
    if result.error:
        position = ""
        if result.error_line is not None:
            position = f" (line {result.error_line}"
            if result.error_column is not None:
                position += f", column {result.error_column}"
            position += ")"
        return f"Error: {result.error}{position}"

    rows = [result.summary(), "-" * 40]
    for line in result.lines:
        if line.kind == LineKind.CHANGED:
            rows.append(f"{_PREFIXES[line.kind]}{line.left}  ->  {line.right}")
        elif line.kind == LineKind.ADDED:
            rows.append(f"{_PREFIXES[line.kind]}{line.right}")
        else:
            rows.append(f"{_PREFIXES[line.kind]}{line.left}")
    return "\n".join(rows)


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@format_option
def normalize(path, fmt):
    """Print the canonical form of a document."""
    try:
        click.echo(canonicalize(_read(path), _infer_format(path, fmt)))
    except DocumentParseError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(EXIT_ERROR)


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@format_option
def validate(path, fmt):
    """Check that a document parses."""
    text = _read(path)
    if not text.strip():
        click.echo("Error: document is empty", err=True)
        sys.exit(EXIT_ERROR)

    error = validate_document(text, _infer_format(path, fmt))
    if error is None:
        click.echo("valid")
        return

    location = ""
    if error.line is not None:
        location = f" at line {error.line}"
        if error.column is not None:
            location += f", column {error.column}"
    click.echo(f"invalid{location}: {error.message}", err=True)
    sys.exit(EXIT_ERROR)


@cli.command()
@click.option("--host", "-h", default="127.0.0.1", help="Host to bind to")
@click.option("--port", "-p", default=8000, help="Port to bind to")
def serve(host, port):
    """Start the DocDiff web server."""
    try:
        import uvicorn
        from ..api.server import create_app
    except ImportError:
        click.echo("Error: uvicorn and fastapi are required for the web server.")
        click.echo("Install with: pip install 'docdiff[server]'")
        sys.exit(EXIT_ERROR)

    app = create_app()
    click.echo(f"Starting DocDiff server at http://{host}:{port}")
    uvicorn.run(app, host=host, port=port)


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
