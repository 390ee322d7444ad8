"""Ley tokenizer: raw source text to a flat token sequence"""

from dataclasses import dataclass
from enum import Enum


class TokenKind(str, Enum):
    word = "word"
    open_brace = "{"
    close_brace = "}"
    bang = "!"
    colon = ":"
    semicolon = ";"
    # Reserved for inline markup; never produced by the lexer.
    star = "*"
    double_star = "**"
    backtick = "`"
    underscore = "_"
    tilde = "~"


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    text: str | None = None     # set for word tokens only

    @classmethod
    def word(cls, text: str) -> "Token":
        return cls(TokenKind.word, text)

    @property
    def is_word(self) -> bool:
        return self.kind is TokenKind.word


PUNCTUATION: dict[str, TokenKind] = {
    "{": TokenKind.open_brace,
    "}": TokenKind.close_brace,
    "!": TokenKind.bang,
    ":": TokenKind.colon,
    ";": TokenKind.semicolon,
}
WHITESPACE = frozenset(" \t\r\n")
QUOTE = '"'
TRIPLE_QUOTE = '"""'
WORD_BREAKS = WHITESPACE | frozenset(PUNCTUATION) | {QUOTE}


class TokenList(list):
    """Token sequence that remembers whether the lexer stopped early."""

    def __init__(self, tokens=(), truncated: bool = False):
        super().__init__(tokens)
        self.truncated = truncated


class Lexer:
    """Iterator over the tokens of one source text.

    An unterminated quoted word ends the stream and sets ``truncated``; the
    lexer itself never raises.
    """

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.truncated = False

    def __iter__(self):
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    def next_token(self) -> Token | None:
        """Return the next token, or None at the end of the stream."""
        src, n = self.source, len(self.source)
        while self.pos < n and src[self.pos] in WHITESPACE:
            self.pos += 1
        if self.pos >= n:
            return None

        c = src[self.pos]
        if c in PUNCTUATION:
            self.pos += 1
            return Token(PUNCTUATION[c])
        if c == QUOTE:
            return self._quoted()

        start = self.pos
        while self.pos < n and src[self.pos] not in WORD_BREAKS:
            self.pos += 1
        return Token.word(src[start:self.pos])

    def _quoted(self) -> Token | None:
        """Scan a "..." or triple-quoted word starting at the current quote."""
        delim = TRIPLE_QUOTE if self.source.startswith(TRIPLE_QUOTE, self.pos) else QUOTE
        start = self.pos + len(delim)
        end = self.source.find(delim, start)
        if end == -1:
            self.truncated = True
            self.pos = len(self.source)
            return None
        self.pos = end + len(delim)
        return Token.word(self.source[start:end])


def tokenize(source: str) -> TokenList:
    """Tokenize a whole document. Total: malformed input just ends the stream."""
    lexer = Lexer(source)
    tokens = list(lexer)
    return TokenList(tokens, truncated=lexer.truncated)
