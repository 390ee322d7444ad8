"""Integration tests for the build and check commands"""

from typer.testing import CliRunner

from leypub.cli.cli import app


runner = CliRunner()


def test_build_single_file(tmp_path):
    """build renders one file next to the working directory by default."""
    (tmp_path / "hello.ley").write_text("!title:{Hello} !:{World}")
    result = runner.invoke(app, ["build", "hello.ley"])
    assert result.exit_code == 0, result.output
    html = (tmp_path / "hello.html").read_text()
    assert "<title>Hello</title>" in html
    assert "<p>World </p>" in html


def test_build_single_file_explicit_dest(tmp_path):
    (tmp_path / "hello.ley").write_text("text")
    result = runner.invoke(app, ["build", "hello.ley", "out.html", "--style", "dark.css"])
    assert result.exit_code == 0, result.output
    assert 'href="dark.css"' in (tmp_path / "out.html").read_text()


def test_build_directory_with_index(tmp_path):
    src = tmp_path / "pages"
    src.mkdir()
    (src / "one.ley").write_text("!title:{One} a")
    (src / "two.ley").write_text("!title:{Two} b")
    result = runner.invoke(app, ["build", str(src), str(tmp_path / "site"), "--index"])
    assert result.exit_code == 0, result.output
    assert "Rendered 3 file(s)" in result.output
    index = (tmp_path / "site" / "index.html").read_text()
    assert '<a href="one.html">One </a>' in index
    assert '<a href="two.html">Two </a>' in index


def test_build_reports_parse_error(tmp_path):
    (tmp_path / "bad.ley").write_text("!:{hello")
    result = runner.invoke(app, ["build", "bad.ley"])
    assert result.exit_code == 1
    assert "Error: Build failed" in result.output
    assert "Unclosed Section" in result.output


def test_build_invalid_source(tmp_path):
    result = runner.invoke(app, ["build", "missing.ley"])
    assert result.exit_code == 1
    assert "invalid" in result.output


def test_build_invalid_config(tmp_path):
    (tmp_path / "config.yaml").write_text("key: [unclosed\n")
    (tmp_path / "a.ley").write_text("a")
    result = runner.invoke(app, ["build", "a.ley"])
    assert result.exit_code == 1
    assert "Invalid config.yaml" in result.output


def test_check_ok_and_failed(tmp_path):
    (tmp_path / "good.ley").write_text("!:{fine}")
    (tmp_path / "bad.ley").write_text("!:nope{x}")
    result = runner.invoke(app, ["check", str(tmp_path)])
    assert result.exit_code == 1
    assert "ok:" in result.output
    assert "Unknown Section Kind `nope`" in result.output
    assert "1 failed" in result.output


def test_check_all_ok(tmp_path):
    (tmp_path / "good.ley").write_text("!:{fine}")
    result = runner.invoke(app, ["check", "good.ley"])
    assert result.exit_code == 0, result.output
    assert "0 failed" in result.output


def test_build_template_with_literal_braces(tmp_path):
    """A template with an unescaped CSS block fails with an error line, not a traceback."""
    (tmp_path / "a.ley").write_text("text")
    (tmp_path / "t.html").write_text("<style>body { color: red }</style>{content}")
    result = runner.invoke(app, ["build", "a.ley", "--template", "t.html"])
    assert result.exit_code == 1
    assert "Error: Invalid template" in result.output
    assert not (tmp_path / "a.html").exists()


def test_build_template_with_doubled_braces(tmp_path):
    (tmp_path / "a.ley").write_text("text")
    (tmp_path / "t.html").write_text("<style>body {{ color: red }}</style>{content}")
    result = runner.invoke(app, ["build", "a.ley", "--template", "t.html"])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "a.html").read_text() == "<style>body { color: red }</style>text "
