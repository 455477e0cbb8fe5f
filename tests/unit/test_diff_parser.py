"""Tests for unified diff parsing."""

from commitcast.extraction import added_lines, parse_patch
from commitcast.extraction.classifiers import classify_change


def test_empty_patch():
    """Missing patches parse to nothing."""
    assert parse_patch(None) == []
    assert parse_patch("") == []


def test_parse_keeps_only_changed_lines():
    """Context lines and hunk headers are dropped."""
    patch = "@@ -1,3 +1,3 @@\n unchanged\n-old line\n+  new line  \n trailing"

    lines = parse_patch(patch)

    assert [(line.kind, line.text) for line in lines] == [
        ("deletion", "old line"),
        ("addition", "new line"),
    ]


def test_file_headers_are_skipped():
    """``+++``/``---`` headers are not content."""
    patch = "--- a/src/fetch(data).js\n+++ b/src/fetch(data).js\n@@ -1 +1 @@\n+const x = 1"

    lines = parse_patch(patch)

    assert [line.text for line in lines] == ["const x = 1"]
    # The header would otherwise look like a network call
    assert classify_change(lines) == []


def test_added_lines():
    """Only additions are returned."""
    patch = "-removed\n+added one\n+added two"

    assert added_lines(patch) == ["added one", "added two"]
