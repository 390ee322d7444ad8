"""Shared fixtures for core unit tests"""

import pytest

from leypub.core.parser import parse_text


SAMPLE_LEY = """\
!title:meta{A Sample Page}
!author:meta{Jo Writer}
!date:meta{2021-03-04}

!Introduction:{
    Some opening words.
    !:{A paragraph with !example.com:link{a link} inside.}
    !Details:{
        !; {a comment, never rendered}
        !:code{x = 1}
        !diagram.png:img{}
    }
}
"""


@pytest.fixture(name="sample_source")
def sample_source_fixture():
    return SAMPLE_LEY


@pytest.fixture(name="sample_doc")
def sample_doc_fixture():
    return parse_text(SAMPLE_LEY)
