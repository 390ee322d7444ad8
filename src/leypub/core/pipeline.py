"""Pipeline step functions: discover, build single files and directories, write the index"""

import logging
from pathlib import Path
from typing import Optional

from leypub.config import Settings, read_template
from leypub.core.errors import BuildError, LeyError
from leypub.core.models import Document, Page
from leypub.core.parser import parse_text
from leypub.core.registry import build_index
from leypub.core.render import DEFAULT_TITLE, render


logger = logging.getLogger(__name__)

HTML_SUFFIX = ".html"


def discover_files(path: Path, suffix: str = ".ley") -> list[Path]:
    """Return [path] for a matching file, else the sorted matching files directly under path."""
    if path.is_file():
        return [path] if path.suffix == suffix else []
    return sorted(p for p in path.iterdir() if p.is_file() and p.suffix == suffix)


def parse_file(path: Path, style: Optional[str] = None) -> Document:
    """Read and parse one source file."""
    try:
        source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise BuildError(f"Unable to read {path}: {e}") from e
    return parse_text(source, style=style)


def write_page(document: Document, dest: Path, template: Optional[str] = None) -> Page:
    """Render document to dest and return its page descriptor."""
    try:
        dest.write_text(render(document, template), encoding="utf-8")
    except OSError as e:
        raise BuildError(f"Unable to write {dest}: {e}") from e
    logger.info("Wrote %s", dest)
    title = document.title if document.title is not None else DEFAULT_TITLE
    return Page(path=dest.name, title=title)


def build_file(
    source: Path,
    destination: Path,
    style: Optional[str] = None,
    template: Optional[str] = None,
    ) -> tuple[Path, Page]:
    """Build one source file. A directory destination receives <stem>.html.

    Returns (output_path, page).
    """
    dest = destination / f"{source.stem}{HTML_SUFFIX}" if destination.is_dir() else destination
    try:
        document = parse_file(source, style)
    except LeyError as e:
        raise BuildError(f"Failed to parse {source}: {e}") from e
    return dest, write_page(document, dest, template)


def write_index(
    pages: list[Page],
    output_dir: Path,
    name: str = "index",
    style: Optional[str] = None,
    template: Optional[str] = None,
    ) -> Path:
    """Render the index of pages into output_dir/<name>.html."""
    dest = output_dir / f"{name}{HTML_SUFFIX}"
    write_page(build_index(pages, style), dest, template)
    return dest


def build_dir(
    source_dir: Path,
    output_dir: Path,
    settings: Settings,
    ) -> tuple[list[tuple[Path, Path]], list[Page]]:
    """Build every source document in source_dir into output_dir.

    Returns ((source, output) pairs, pages). A failing document aborts the
    build unless settings.keep_going is set, in which case it is logged and
    skipped.
    """
    if output_dir.exists() and not output_dir.is_dir():
        raise BuildError(f"The destination {output_dir} must be a directory when the source is a directory")
    sources = discover_files(source_dir, settings.source_suffix)
    if settings.index and any(src.stem == settings.index_name for src in sources):
        raise BuildError(
            f"Source {settings.index_name}{settings.source_suffix} would be overwritten by the index page; "
            "rename it or set a different index_name"
        )
    output_dir.mkdir(parents=True, exist_ok=True)
    template = read_template(settings)

    results: list[tuple[Path, Path]] = []
    pages: list[Page] = []
    for src in sources:
        try:
            out_file, page = build_file(src, output_dir, settings.style, template)
        except BuildError as e:
            if not settings.keep_going:
                raise
            logger.error("Skipping %s: %s", src, e)
            continue
        results.append((src, out_file))
        pages.append(page)

    if settings.index:
        index_file = write_index(pages, output_dir, settings.index_name, settings.style, template)
        results.append((source_dir, index_file))
    return results, pages


def run_build(
    path: str,
    settings: Settings,
    destination: Optional[str] = None,
    ) -> list[tuple[Path, Path]]:
    """Build a file or a directory. Returns (source, output) pairs."""
    source = Path(path)
    if source.is_dir():
        output_dir = Path(destination or settings.output_dir)
        results, _ = build_dir(source, output_dir, settings)
        return results
    if source.is_file():
        dest = Path(destination or settings.output_dir)
        out_file, _ = build_file(source, dest, settings.style, read_template(settings))
        return [(source, out_file)]
    raise BuildError(f"The source path {source} is invalid")


def check_path(path: str, suffix: str = ".ley") -> list[tuple[Path, Optional[LeyError]]]:
    """Parse every document under path without writing. Returns (source, error or None) pairs."""
    source = Path(path)
    if not source.exists():
        raise BuildError(f"The source path {source} is invalid")
    results = []
    for src in discover_files(source, suffix):
        try:
            parse_file(src)
        except LeyError as e:
            results.append((src, e))
        else:
            results.append((src, None))
    return results
