"""Index page construction from rendered page descriptors"""

from typing import Iterable, Optional

from leypub.core.models import Document, Page, Phrase, Section, SectionKind, Text


INDEX_TITLE = "Index"


def page_entry(page: Page) -> Section:
    """One paragraph holding a link to the page, labelled with its title."""
    link = Section(
        name=Phrase((page.path,)),
        kind=SectionKind.link,
        children=[Text(Phrase.from_text(page.title))],
    )
    return Section(name=None, kind=SectionKind.paragraph, children=[link])


def build_index(pages: Iterable[Page], style: Optional[str] = None) -> Document:
    """Build an index Document linking every page, in the given order."""
    body = Section(
        name=None,
        kind=SectionKind.section,
        children=[page_entry(p) for p in pages],
    )
    return Document(children=[body], title=INDEX_TITLE, style=style)
