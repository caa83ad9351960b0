"""Tests for repository references, entries and errors."""

import pytest
from pydantic import ValidationError

from repofs import (
    DirectoryEntry,
    FileEntry,
    RepositoryReference,
    UnableToReadFile,
    UnsupportedOperation,
)


class TestRepositoryReference:
    def test_parse_without_reference(self):
        ref = RepositoryReference.parse("acme/widget-api")
        assert ref == RepositoryReference(owner="acme", repository="widget-api")
        assert ref.reference is None

    def test_parse_with_reference(self):
        ref = RepositoryReference.parse("acme/widget-api@release/1.2")
        assert ref.owner == "acme"
        assert ref.repository == "widget-api"
        assert ref.reference == "release/1.2"

    def test_parse_strips_whitespace(self):
        assert RepositoryReference.parse("  acme/widget-api  ").repository == "widget-api"

    @pytest.mark.parametrize(
        "value", ["", "acme", "acme/", "/widget-api", "acme/widget-api/extra", "acme/widget-api@", "a b/c"]
    )
    def test_parse_rejects_malformed(self, value):
        with pytest.raises(ValueError, match="Invalid repository reference"):
            RepositoryReference.parse(value)

    def test_str_matches_parse_format(self):
        assert str(RepositoryReference(owner="acme", repository="widget-api")) == "acme/widget-api"
        assert str(RepositoryReference.parse("acme/widget-api@v2")) == "acme/widget-api@v2"

    def test_is_immutable(self):
        ref = RepositoryReference(owner="acme", repository="widget-api")
        with pytest.raises(ValidationError):
            ref.reference = "main"


class TestEntries:
    def test_file_entry_defaults(self):
        entry = FileEntry(path="a.txt")
        assert entry.size is None
        assert entry.last_modified is None
        assert entry.mime_type == ""
        assert entry.is_file and not entry.is_dir

    def test_directory_entry(self):
        entry = DirectoryEntry(path="docs")
        assert entry.is_dir and not entry.is_file


class TestErrors:
    def test_message_includes_path_and_reason(self):
        error = UnableToReadFile("docs/a.txt", "invalid base64 content")
        assert str(error) == "Unable to read file 'docs/a.txt': invalid base64 content"
        assert error.path == "docs/a.txt"
        assert error.reason == "invalid base64 content"

    def test_unsupported_operation_message(self):
        error = UnsupportedOperation("delete", "docs")
        assert str(error) == "Unable to delete 'docs': filesystem is read-only"
