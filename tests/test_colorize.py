"""Tests for colorized terminal output."""

import io

from qmeta import _colorize


def test_apply_ansi():
    assert _colorize.apply_ansi("\\-r-red") == "\033[31mred\033[0m"
    assert _colorize.apply_ansi("\\-cs-x\\-n-") == "\033[36m\033[1mx\033[0m\033[0m"


def test_apply_ansi_plain_text():
    assert _colorize.apply_ansi("plain") == "plain"


def test_highlight_doc():
    marked = _colorize.highlight_doc("int\nName\tstr")
    assert marked == "\\-s-int\\-n-\n\\-c-Name\\-n-\t\\-d-str\\-n-"


def test_highlight_doc_unnamed_module():
    """An empty header line stays empty."""
    marked = _colorize.highlight_doc("\nx\t1")
    assert marked == "\n\\-c-x\\-n-\t\\-d-1\\-n-"


def test_should_use_color_no_color(monkeypatch):
    class FakeTTY(io.StringIO):
        def isatty(self):
            return True

    monkeypatch.delenv("NO_COLOR", raising=False)
    assert _colorize.should_use_color(FakeTTY())

    monkeypatch.setenv("NO_COLOR", "1")
    assert not _colorize.should_use_color(FakeTTY())


def test_should_use_color_not_tty(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    assert not _colorize.should_use_color(io.StringIO())
    assert not _colorize.should_use_color(object())
