"""
Tests for the docdiff CLI.
"""

import json

import pytest
from click.testing import CliRunner

from docdiff.cli.main import cli


@pytest.fixture
def runner():
    """Create a CLI runner."""
    return CliRunner()


@pytest.fixture
def write(tmp_path):
    """Write a document to a temporary file and return its path."""
    def _write(name, content):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)
    return _write


class TestCompareCommand:
    """Tests for `docdiff compare`."""

    def test_equal_documents(self, runner, write):
        """Test that equivalent documents exit with 0."""
        left = write("a.json", '{"b": 1, "a": 2}')
        right = write("b.json", '{"a": 2, "b": 1}')

        result = runner.invoke(cli, ["compare", left, right])

        assert result.exit_code == 0
        assert "Documents are equivalent" in result.output

    def test_different_documents(self, runner, write):
        """Test text output for differing documents."""
        left = write("a.json", '{"a": 1}')
        right = write("b.json", '{"a": 2}')

        result = runner.invoke(cli, ["compare", left, right])

        assert result.exit_code == 1
        assert "0 added, 0 removed, 1 changed" in result.output
        assert '~   "a": 1  ->    "a": 2' in result.output

    def test_json_output(self, runner, write):
        """Test machine-readable output."""
        left = write("a.xml", "<r><a>1</a></r>")
        right = write("b.xml", "<r><a>1</a><b/></r>")

        result = runner.invoke(cli, ["compare", left, right, "--output", "json"])

        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["stats"] == {"added": 1, "removed": 0, "changed": 0}
        assert data["lines"][3]["kind"] == "added"

    def test_parse_error(self, runner, write):
        """Test that malformed input exits with 2."""
        left = write("a.json", "{bad")
        right = write("b.json", "{}")

        result = runner.invoke(cli, ["compare", left, right])

        assert result.exit_code == 2
        assert "Error:" in result.output
        assert "(line 1, column 2)" in result.output

    def test_format_override(self, runner, write):
        """Test forcing the format regardless of suffix."""
        left = write("a.txt", "<r/>")
        right = write("b.txt", "<r></r>")

        result = runner.invoke(cli, ["compare", left, right, "--format", "xml"])

        assert result.exit_code == 0

    def test_size_limit_option(self, runner, write):
        """Test the --max-bytes option."""
        left = write("a.json", '{"a": "0123456789"}')
        right = write("b.json", '{"a": 1}')

        result = runner.invoke(cli, ["compare", left, right, "--max-bytes", "5"])

        assert result.exit_code == 2
        assert "byte" in result.output

    def test_output_file(self, runner, write, tmp_path):
        """Test writing the report to a file."""
        left = write("a.json", "[1]")
        right = write("b.json", "[1]")
        out = tmp_path / "report.json"

        result = runner.invoke(cli, ["compare", left, right, "-o", "json", "--out", str(out)])

        assert result.exit_code == 0
        assert json.loads(out.read_text())["equal"] is True

    def test_non_utf8_file(self, runner, write, tmp_path):
        """Test that an undecodable file is an error, not a traceback."""
        left = write("a.json", '{"a": 1}')
        right = tmp_path / "b.json"
        right.write_bytes(b'\xff\xfe{"a": 1}')

        result = runner.invoke(cli, ["compare", left, str(right)])

        assert result.exit_code == 2
        assert "is not valid UTF-8" in result.output
        assert not isinstance(result.exception, UnicodeDecodeError)


class TestOtherCommands:
    """Tests for normalize and validate."""

    def test_normalize(self, runner, write):
        """Test printing the canonical form."""
        path = write("doc.json", '{"b":1,"a":2}')

        result = runner.invoke(cli, ["normalize", path])

        assert result.exit_code == 0
        assert result.output == '{\n  "a": 2,\n  "b": 1\n}\n'

    def test_normalize_error(self, runner, write):
        """Test normalize on malformed XML."""
        path = write("doc.xml", "<a><b></a>")

        result = runner.invoke(cli, ["normalize", path])

        assert result.exit_code == 2

    def test_validate(self, runner, write):
        """Test validation of a good and a bad document."""
        good = write("good.xml", "<a/>")
        bad = write("bad.json", '{"a": }')

        assert runner.invoke(cli, ["validate", good]).output.strip() == "valid"

        result = runner.invoke(cli, ["validate", bad])
        assert result.exit_code == 2
        assert "invalid at line 1" in result.output

    def test_validate_empty(self, runner, write):
        """Test validation of an empty file."""
        path = write("empty.json", "  ")

        result = runner.invoke(cli, ["validate", path])

        assert result.exit_code == 2

    def test_version(self, runner):
        """Test the version option."""
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert "docdiff" in result.output

    def test_normalize_non_utf8_file(self, runner, tmp_path):
        """Test normalize on a file that is not UTF-8."""
        path = tmp_path / "doc.xml"
        path.write_bytes(b"<a>\xe9</a>")

        result = runner.invoke(cli, ["normalize", str(path)])

        assert result.exit_code == 2
        assert "is not valid UTF-8" in result.output
