"""Ley parser: token sequence to Document tree"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from leypub.core.errors import (
    EndOfFile,
    ExpectedColon,
    ExpectedOpenBrace,
    UnclosedSection,
    UnexpectedCloseBracket,
)
from leypub.core.lexer import Token, TokenKind, tokenize
from leypub.core.models import (
    Comment,
    DocNode,
    Document,
    Phrase,
    Section,
    SectionKind,
    Text,
    single_text,
)


logger = logging.getLogger(__name__)

METADATA_FIELDS = ("title", "author", "date", "style")


class ParserState:
    """Cursor over the token sequence of one document."""

    def __init__(self, tokens: Sequence[Token], truncated: bool = False):
        self.tokens = tokens
        self.pos = 0
        self.truncated = truncated

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def peek(self) -> Optional[Token]:
        return None if self.at_end() else self.tokens[self.pos]

    def next(self) -> Token:
        """Consume and return the next token; EndOfFile if there is none."""
        if self.at_end():
            raise EndOfFile()
        token = self.tokens[self.pos]
        self.pos += 1
        return token


def parse_phrase(state: ParserState) -> Optional[Phrase]:
    """Consume a maximal run of word tokens. None if there are none."""
    words = []
    while (token := state.peek()) is not None and token.is_word:
        words.append(token.text)
        state.pos += 1
    return Phrase(tuple(words)) if words else None


@dataclass
class _OpenSection:
    """A section whose header is parsed and whose `}` is still pending."""
    name: Optional[Phrase]
    kind: SectionKind
    comment: bool
    children: list[DocNode] = field(default_factory=list)

    def close(self) -> DocNode:
        if self.comment:
            return Comment()
        return Section(name=self.name, kind=self.kind, children=self.children)


def _parse_header(state: ParserState) -> _OpenSection:
    """Parse a section header after its `!`, up to and including the `{`."""
    name = parse_phrase(state)

    delimiter = state.next()
    if delimiter.kind is TokenKind.colon:
        comment = False
    elif delimiter.kind is TokenKind.semicolon:
        comment = True
    else:
        raise ExpectedColon()

    token = state.next()
    if token.is_word:
        if state.next().kind is not TokenKind.open_brace:
            raise ExpectedOpenBrace()
        # A comment still needs a keyword to parse, but it has no effect.
        kind = SectionKind.section if comment else SectionKind.from_keyword(token.text)
    elif token.kind is TokenKind.open_brace:
        kind = SectionKind.paragraph if name is None else SectionKind.section
    else:
        raise ExpectedOpenBrace()
    return _OpenSection(name=name, kind=kind, comment=comment)


def _parse_text(first: Token, state: ParserState) -> Text:
    rest = parse_phrase(state)
    return Text(Phrase((first.text,) + (rest.words if rest else ())))


def _unexpected(token: Token) -> UnexpectedCloseBracket:
    return UnexpectedCloseBracket(f"Unexpected `{token.kind.value}`")


def parse_node(state: ParserState) -> DocNode:
    """Parse one node (section, comment or text run) at the cursor.

    Open sections are kept on an explicit stack, so nesting depth is not
    bounded by the interpreter's recursion limit. Comments are dropped from
    their parent's children.
    """
    token = state.next()
    if token.is_word:
        return _parse_text(token, state)
    if token.kind is not TokenKind.bang:
        raise _unexpected(token)

    stack = [_parse_header(state)]
    while True:
        if state.at_end():
            raise EndOfFile() if state.truncated else UnclosedSection()
        token = state.next()
        if token.kind is TokenKind.close_brace:
            node = stack.pop().close()
            if not stack:
                return node
            if not isinstance(node, Comment):
                stack[-1].children.append(node)
        elif token.kind is TokenKind.bang:
            stack.append(_parse_header(state))
        elif token.is_word:
            stack[-1].children.append(_parse_text(token, state))
        else:
            raise _unexpected(token)



def _is_metadata_shorthand(node: Section) -> bool:
    """`!title:{Hello}`: a plain section named by one metadata key holding one text run."""
    return (
        node.kind is SectionKind.section
        and node.name is not None
        and len(node.name.words) == 1
        and node.name.first in METADATA_FIELDS
        and len(node.children) == 1
        and isinstance(node.children[0], Text)
    )


def _absorb_metadata(document: Document, node: Section) -> None:
    """Copy a top-level metadata section into the document's fields."""
    if node.name is None:
        logger.warning("Metadata section without a name dropped")
        return
    key = node.name.first
    if key not in METADATA_FIELDS:
        logger.warning("Unknown metadata %r dropped", key)
        return
    setattr(document, key, single_text(node.children))


def parse(tokens: Sequence[Token], style: Optional[str] = None) -> Document:
    """Build a Document from a token sequence.

    Top-level metadata sections are absorbed into title/author/date/style
    (last one wins); ``style`` is only used when the document sets none.
    Raises a ParseError subclass on malformed input.
    """
    state = ParserState(tokens, truncated=getattr(tokens, "truncated", False))
    document = Document()

    while not state.at_end():
        node = parse_node(state)
        if isinstance(node, Comment):
            continue
        if isinstance(node, Section) and (
            node.kind is SectionKind.metadata or _is_metadata_shorthand(node)
        ):
            _absorb_metadata(document, node)
        else:
            document.children.append(node)

    if state.truncated:
        raise EndOfFile()
    if document.style is None:
        document.style = style
    return document


def parse_text(source: str, style: Optional[str] = None) -> Document:
    """Tokenize and parse a complete source text."""
    return parse(tokenize(source), style=style)
