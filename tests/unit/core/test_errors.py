"""Unit tests for core/errors.py"""

import pytest

from leypub.core.errors import (
    EndOfFile,
    ExpectedColon,
    ExpectedOpenBrace,
    ExpectedString,
    LeyError,
    ParseError,
    UnclosedSection,
    UnexpectedCloseBracket,
    UnknownSection,
)


@pytest.mark.parametrize("error, message", [
    (EndOfFile(), "Unexpected end of file"),
    (UnclosedSection(), "Unclosed Section, Expected `}`"),
    (UnexpectedCloseBracket(), "Unexpected `}`"),
    (UnknownSection("tbl"), "Unknown Section Kind `tbl`"),
    (ExpectedColon(), "Expected `:`"),
    (ExpectedOpenBrace(), "Expected `{`"),
    (ExpectedString(), "Expected a string"),
])
def test_error_messages(error, message):
    assert str(error) == message
    assert isinstance(error, ParseError)
    assert isinstance(error, LeyError)
