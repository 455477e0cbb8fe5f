"""Tests for code and documentation change classifiers."""

import pytest

from commitcast.extraction import (
    classifier_for,
    classify_change,
    classify_doc_change,
    file_extension,
    parse_patch,
)
from commitcast.models import DiffLine, SignalTag


def _lines(*texts):
    return [DiffLine(kind="addition", text=t) for t in texts]


def test_login_patch_signals(login_file):
    """One file can carry several tags, each once."""
    signals = classify_change(parse_patch(login_file.patch))

    assert set(signals) == {
        SignalTag.ASYNC,
        SignalTag.ERROR_HANDLING,
        SignalTag.NETWORKING,
        SignalTag.FUNCTION,
    }
    assert len(signals) == len(set(signals))


def test_classification_is_idempotent(login_file):
    """Same diff, same tags."""
    lines = parse_patch(login_file.patch)

    assert classify_change(lines) == classify_change(lines)


def test_tags_in_first_seen_order():
    """Tags are reported in the order lines first produced them."""
    lines = _lines("console.log('x')", "const y = process.env.API_URL")

    assert classify_change(lines) == [SignalTag.LOGGING, SignalTag.ENV_VARIABLE]


@pytest.mark.parametrize(
    "text,tag",
    [
        ("await save()", SignalTag.ASYNC),
        ("} finally {", SignalTag.ERROR_HANDLING),
        ("axios.get(url)", SignalTag.NETWORKING),
        ("process.env.SECRET", SignalTag.ENV_VARIABLE),
        ("describe('login', () => {", SignalTag.TEST),
        ("const handler = (req) => {", SignalTag.FUNCTION),
        ("class Session {", SignalTag.CLASS),
        ("import React from 'react'", SignalTag.IMPORT),
        ("const fs = require('fs')", SignalTag.IMPORT),
        ("console.warn('slow')", SignalTag.LOGGING),
        ("// TODO handle refresh", SignalTag.TODO_FIXME),
        ("return new Promise(resolve)", SignalTag.PROMISE),
        ("load().then(render)", SignalTag.PROMISE),
    ],
)
def test_code_rules(text, tag):
    """Each rule recognises its construct."""
    assert tag in classify_change(_lines(text))


def test_plain_code_has_no_signals():
    """Lines matching no rule give no tags."""
    assert classify_change(_lines("const total = a + b;", "return total;")) == []


def test_readme_screenshot(readme_file):
    """An added image reference is a doc image change."""
    assert classify_doc_change(parse_patch(readme_file.patch)) == [SignalTag.DOC_IMAGE]


@pytest.mark.parametrize(
    "text,tag",
    [
        ("## Installation", SignalTag.DOC_HEADING),
        ("https://example.com/docs", SignalTag.DOC_LINK),
        ("Built with FastAPI and React", SignalTag.DOC_TECH_STACK),
        ("https://github.com/user-attachments/assets/123", SignalTag.DOC_IMAGE),
        ("", SignalTag.DOC_FORMATTING),
    ],
)
def test_doc_rules(text, tag):
    """Doc rules are case-insensitive."""
    assert tag in classify_doc_change(_lines(text))


def test_file_extension():
    """Extension is lower-cased and ignores directory dots."""
    assert file_extension("src/App.TSX") == "tsx"
    assert file_extension("docs.d/README") == ""
    assert file_extension("Makefile") == ""


def test_classifier_for():
    """Classifier is picked by extension."""
    assert classifier_for("src/index.ts") is classify_change
    assert classifier_for("README.MD") is classify_doc_change
    assert classifier_for("main.py") is None
    assert classifier_for("logo.png") is None
