"""HTML rendering: depth-aware walk over a Document tree"""

from typing import Optional

from leypub.core.models import Comment, DocNode, Document, SectionKind, Text


PAGE_TEMPLATE = (
    '<html><head><title>{title}</title><meta charset="utf-8">'
    '<link rel="stylesheet" href="{style}"></head>'
    "<body><h1>{title}</h1><div>{author}, {date}</div>{content}</body></html>"
)
TEMPLATE_FIELDS = ("title", "author", "date", "style", "content")

DEFAULT_TITLE = "Untitled Page"
DEFAULT_AUTHOR = "No Author"
DEFAULT_DATE = "Unknown Date"
DEFAULT_STYLE = "main.css"


def _markup(node: DocNode, depth: int) -> tuple[str, Optional[str], int]:
    """Return (opening markup, closing markup or None for leaves, depth for children).

    Content is emitted verbatim (no escaping).
    """
    if isinstance(node, Text):
        return f"{node.content} ", None, depth
    if isinstance(node, Comment):
        return "", None, depth

    name, kind = node.name, node.kind
    if kind is SectionKind.section and name is not None:
        return (
            f'<h{depth} id="{name}">{name}</h{depth}><div class="depth_{depth}">',
            "</div>",
            depth + 1,
        )
    if kind in (SectionKind.section, SectionKind.paragraph):
        return "<p>", "</p>", depth
    if kind is SectionKind.link:
        href = f' href="{name}"' if name is not None else ""
        return f"<a{href}>", "</a>", depth
    if kind is SectionKind.code:
        return "<code>", "</code>", depth
    if kind is SectionKind.image and name is not None:
        return f'<img src="{name}">', None, depth
    # nested metadata, nameless images
    return "", None, depth


def render_nodes(nodes: list[DocNode], depth: int = 1) -> str:
    """Render a node sequence; only named sections push the heading depth.

    Walks with an explicit stack so nesting depth is not bounded by the
    interpreter's recursion limit.
    """
    parts: list[str] = []
    stack = [(iter(nodes), depth, "")]
    while stack:
        children, level, closing = stack[-1]
        node = next(children, None)
        if node is None:
            stack.pop()
            parts.append(closing)
            continue
        opening, node_closing, child_level = _markup(node, level)
        parts.append(opening)
        if node_closing is not None:
            stack.append((iter(node.children), child_level, node_closing))
    return "".join(parts)


def _or_default(value: Optional[str], default: str) -> str:
    return value if value is not None else default


def render(document: Document, template: Optional[str] = None) -> str:
    """Render a full HTML page, falling back to defaults for absent metadata."""
    return (template or PAGE_TEMPLATE).format(
        title=_or_default(document.title, DEFAULT_TITLE),
        author=_or_default(document.author, DEFAULT_AUTHOR),
        date=_or_default(document.date, DEFAULT_DATE),
        style=_or_default(document.style, DEFAULT_STYLE),
        content=render_nodes(document.children, 1),
    )


def check_template(template: str) -> None:
    """Raise ValueError if template cannot be filled with the page fields."""
    try:
        template.format(**{name: "" for name in TEMPLATE_FIELDS})
    except (KeyError, IndexError, ValueError) as e:
        raise ValueError(f"Invalid template: unknown or malformed field {e}") from e
