"""Exception hierarchy for Ley parsing and publishing"""


class LeyError(Exception):
    """Base exception for all leypub errors."""


class ParseError(LeyError):
    """A document could not be parsed; no partial tree is produced."""

    message = "Parse error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class EndOfFile(ParseError):
    message = "Unexpected end of file"


class UnclosedSection(ParseError):
    message = "Unclosed Section, Expected `}`"


class UnexpectedCloseBracket(ParseError):
    message = "Unexpected `}`"


class UnknownSection(ParseError):
    """Section kind keyword that matches no SectionKind."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown Section Kind `{name}`")


class ExpectedColon(ParseError):
    message = "Expected `:`"


class ExpectedOpenBrace(ParseError):
    message = "Expected `{`"


class ExpectedString(ParseError):
    message = "Expected a string"


class BuildError(LeyError):
    """Raised when a source file or directory cannot be published."""
