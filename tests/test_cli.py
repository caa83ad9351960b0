"""Tests for the repobrowse CLI."""

import json

import pytest
from click.testing import CliRunner
from unittest.mock import MagicMock, patch

from repobrowse.cli import cli
from repofs import DirectoryEntry, FileEntry, UnableToReadFile


@pytest.fixture
def fs():
    return MagicMock(name="fs")


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def invoke(runner, fs):
    def _invoke(*args):
        with patch("repobrowse.cli.create_adapter", return_value=fs) as factory:
            result = runner.invoke(cli, list(args))
        result.factory = factory
        return result

    return _invoke


class TestGroupOptions:
    def test_builds_adapter_from_repository_argument(self, invoke, fs):
        fs.list_contents.return_value = iter([])

        result = invoke("--token", "abc", "-r", "5", "acme/widget-api@v2", "ls")

        assert result.exit_code == 0, result.output
        result.factory.assert_called_once_with(
            "acme", "widget-api", "v2", token="abc", use_gh_cli=False, max_retries=5
        )

    def test_rejects_malformed_repository(self, invoke):
        result = invoke("not-a-repo", "ls")

        assert result.exit_code == 2
        assert "Invalid repository reference" in result.output


class TestLs:
    def test_lists_entries(self, invoke, fs):
        fs.list_contents.return_value = iter(
            [FileEntry(path="docs/guide.txt"), DirectoryEntry(path="docs/api")]
        )

        result = invoke("acme/widget-api", "ls", "docs")

        assert result.exit_code == 0
        assert result.output.splitlines() == ["docs/guide.txt", "docs/api/"]
        fs.list_contents.assert_called_once_with("docs", deep=False)

    def test_recursive_flag(self, invoke, fs):
        fs.list_contents.return_value = iter([])

        result = invoke("acme/widget-api", "ls", "-R")

        assert result.exit_code == 0
        fs.list_contents.assert_called_once_with("", deep=True)


class TestCat:
    def test_writes_raw_bytes(self, invoke, fs):
        fs.read.return_value = b"\x00binary\xff"

        result = invoke("acme/widget-api", "cat", "data.bin")

        assert result.exit_code == 0
        assert result.stdout_bytes == b"\x00binary\xff"

    def test_read_error_exits_nonzero(self, invoke, fs):
        fs.read.side_effect = UnableToReadFile("data.bin", "invalid base64 content")

        result = invoke("acme/widget-api", "cat", "data.bin")

        assert result.exit_code == 1
        assert "Error: Unable to read file 'data.bin'" in result.output


class TestStat:
    def test_prints_entry_as_json(self, invoke, fs):
        fs.file_size.return_value = FileEntry(
            path="docs/guide.txt", size=11, last_modified=1704164645, mime_type="text/plain"
        )

        result = invoke("acme/widget-api", "stat", "docs/guide.txt")

        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "path": "docs/guide.txt",
            "size": 11,
            "last_modified": 1704164645,
            "mime_type": "text/plain",
        }


class TestExists:
    def test_file(self, invoke, fs):
        fs.file_exists.return_value = True

        result = invoke("acme/widget-api", "exists", "setup.py")

        assert result.exit_code == 0
        assert result.output.strip() == "file"
        fs.directory_exists.assert_not_called()

    def test_directory(self, invoke, fs):
        fs.file_exists.return_value = False
        fs.directory_exists.return_value = True

        result = invoke("acme/widget-api", "exists", "docs")

        assert result.exit_code == 0
        assert result.output.strip() == "directory"

    def test_missing(self, invoke, fs):
        fs.file_exists.return_value = False
        fs.directory_exists.return_value = False

        result = invoke("acme/widget-api", "exists", "nope")

        assert result.exit_code == 1
        assert result.output.strip() == "missing"
