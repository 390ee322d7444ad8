"""Document tree types: phrases, nodes, parsed documents and page descriptors"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel

from leypub.core.errors import ExpectedString, UnknownSection


@dataclass(frozen=True, eq=False)
class Phrase:
    """Ordered, non-empty run of words used as one string value.

    Comparing against a plain ``str`` only looks at the first word, which is
    how metadata keys are dispatched.
    """
    words: tuple[str, ...]

    def __post_init__(self):
        if not self.words:
            raise ValueError("Phrase requires at least one word")

    @classmethod
    def from_text(cls, text: str) -> "Phrase":
        """Split text on whitespace; an all-blank string becomes a single empty word."""
        return cls(tuple(text.split()) or (text,))

    @property
    def first(self) -> str:
        return self.words[0]

    def __str__(self) -> str:
        return " ".join(self.words)

    def __eq__(self, other) -> bool:
        if isinstance(other, Phrase):
            return self.words == other.words
        if isinstance(other, str):
            return self.first == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.words)


class SectionKind(str, Enum):
    """Selects how a section renders; all kinds parse the same way"""
    section = "section"
    paragraph = "paragraph"
    metadata = "metadata"
    link = "link"
    image = "image"
    code = "code"

    @classmethod
    def from_keyword(cls, keyword: str) -> "SectionKind":
        try:
            return SECTION_KEYWORDS[keyword]
        except KeyError:
            raise UnknownSection(keyword) from None


SECTION_KEYWORDS: dict[str, SectionKind] = {
    "section":   SectionKind.section,
    "paragraph": SectionKind.paragraph,
    "para":      SectionKind.paragraph,
    "p":         SectionKind.paragraph,
    "meta":      SectionKind.metadata,
    "metadata":  SectionKind.metadata,
    "link":      SectionKind.link,
    "image":     SectionKind.image,
    "img":       SectionKind.image,
    "code":      SectionKind.code,
    "lang":      SectionKind.code,
}


@dataclass
class Text:
    content: Phrase


@dataclass
class Comment:
    """Parsed-and-discarded section; carries nothing."""


@dataclass
class Section:
    name: Optional[Phrase]
    kind: SectionKind
    children: list["DocNode"] = field(default_factory=list)


DocNode = Union[Section, Text, Comment]


def single_text(children: list[DocNode]) -> str:
    """Return the text of a body made of exactly one Text node, else raise ExpectedString."""
    if len(children) == 1 and isinstance(children[0], Text):
        return str(children[0].content)
    raise ExpectedString()


@dataclass
class Document:
    """A parsed Ley document: the content tree plus absorbed metadata."""
    children: list[DocNode] = field(default_factory=list)
    title:  Optional[str] = None
    author: Optional[str] = None
    date:   Optional[str] = None
    style:  Optional[str] = None


class Page(BaseModel):
    """Descriptor of one rendered document, used to build the index page."""
    path: str       # output file name relative to the output directory
    title: str
