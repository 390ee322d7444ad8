"""CLI command implementations"""

import logging
from typing import Annotated, Optional

import typer

from leypub.config import Settings, load_config
from leypub.core.errors import LeyError
from leypub.core.pipeline import check_path, run_build


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling and configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    return settings


def build_cmd(
    path: Annotated[str, typer.Argument(help="Ley file or directory to publish")],
    dest: Annotated[Optional[str], typer.Argument(help="Output file or directory")] = None,
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory when DEST is omitted")] = None,
    style: Annotated[Optional[str], typer.Option("--style", help="Stylesheet for documents that set none")] = None,
    index: Annotated[Optional[bool], typer.Option("--index/--no-index", help="Write an index page for directories")] = None,
    keep_going: Annotated[Optional[bool], typer.Option("--keep-going/--fail-fast", help="Skip documents that fail to parse")] = None,
    template: Annotated[Optional[str], typer.Option("--template", help="Alternative page template file")] = None,
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="Logging level")] = None,
    ):
    """Render Ley documents to HTML."""
    settings = _settings(overrides={
        "output_dir": out, "style": style, "index": index,
        "keep_going": keep_going, "template": template, "log_level": log_level,
    })
    try:
        results = run_build(path, settings, dest)
    except LeyError as e:
        _fail("Build failed", e)
    except ValueError as e:
        _fail(str(e))
    for src, out_file in results:
        typer.echo(f"  {src} -> {out_file}")
    typer.echo(f"Rendered {len(results)} file(s)")


def check_cmd(
    path: Annotated[str, typer.Argument(help="Ley file or directory to check")],
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="Logging level")] = None,
    ):
    """Parse documents without writing output and report errors."""
    settings = _settings(overrides={"log_level": log_level})
    try:
        results = check_path(path, settings.source_suffix)
    except LeyError as e:
        _fail(str(e))
    failed = 0
    for src, error in results:
        if error is None:
            typer.echo(f"  ok: {src}")
        else:
            failed += 1
            typer.echo(f"  failed: {src}: {error}")
    typer.echo(f"Checked {len(results)} document(s), {failed} failed")
    if failed:
        raise typer.Exit(1)
