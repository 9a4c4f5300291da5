# =============================================================================
# test_source.py - Character Source Unit Tests
# =============================================================================
# Tests for CharSource: position tracking, non-consuming lookahead and the
# single-slot pushback contract.
# =============================================================================

import io

import pytest

from cscan.errors import PushbackError, SourceLocation
from cscan.source import CharSource


# =============================================================================
# Position Tracking Tests
# =============================================================================

class TestPositionTracking:
    """Line/column bookkeeping on read()."""

    def test_initial_position(self):
        """Nothing consumed yet: line 1, column 0."""
        src = CharSource.from_string("abc")
        assert (src.line, src.column) == (1, 0)

    def test_read_advances_column(self):
        src = CharSource.from_string("abc")
        assert src.read() == "a"
        assert src.read() == "b"
        assert (src.line, src.column) == (1, 2)

    def test_newline_resets_column(self):
        """Reading a newline moves to the next line, column 0."""
        src = CharSource.from_string("a\nb")
        src.read()
        assert src.read() == "\n"
        assert (src.line, src.column) == (2, 0)
        assert src.read() == "b"
        assert (src.line, src.column) == (2, 1)

    def test_end_of_input_leaves_position(self):
        """Reading past the end returns "" and keeps the position."""
        src = CharSource.from_string("x")
        src.read()
        assert src.read() == ""
        assert src.read() == ""
        assert (src.line, src.column) == (1, 1)

    def test_empty_source(self):
        src = CharSource.from_string("")
        assert src.at_end()
        assert src.read() == ""
        assert (src.line, src.column) == (1, 0)

    def test_wraps_text_stream(self):
        """Any text stream with read(1) works."""
        src = CharSource(io.StringIO("hi"), "stream.c")
        assert src.read() + src.read() == "hi"
        assert src.at_end()

    def test_location(self):
        src = CharSource.from_string("ab", "main.c")
        src.read()
        assert src.location == SourceLocation("main.c", 1, 1)
        assert src.next_location == SourceLocation("main.c", 1, 2)

    def test_sources_are_independent(self):
        """Each source owns its own position state."""
        first = CharSource.from_string("a\nb")
        second = CharSource.from_string("xyz")
        first.read()
        first.read()
        second.read()
        assert (first.line, first.column) == (2, 0)
        assert (second.line, second.column) == (1, 1)


# =============================================================================
# Lookahead Tests
# =============================================================================

class TestPeek:
    """Non-consuming lookahead."""

    def test_peek_does_not_consume(self):
        src = CharSource.from_string("ab")
        assert src.peek() == "a"
        assert src.peek() == "a"
        assert src.read() == "a"

    def test_peek_does_not_move_position(self):
        src = CharSource.from_string("a\n")
        src.read()
        assert src.peek() == "\n"
        assert (src.line, src.column) == (1, 1)

    def test_peek_at_end(self):
        src = CharSource.from_string("")
        assert src.peek() == ""


# =============================================================================
# Pushback Tests
# =============================================================================

class TestPushback:
    """Single-slot pushback contract."""

    def test_unread_returns_character(self):
        src = CharSource.from_string("ab")
        char = src.read()
        src.unread(char)
        assert src.read() == "a"
        assert src.read() == "b"

    def test_unread_rolls_back_column(self):
        src = CharSource.from_string("ab")
        src.read()
        src.read()
        src.unread("b")
        assert (src.line, src.column) == (1, 1)

    def test_peek_sees_pushed_back_character(self):
        src = CharSource.from_string("ab")
        src.read()
        src.unread("a")
        assert src.peek() == "a"

    def test_pushback_precedes_lookahead(self):
        """A character peeked after a read stays behind the pushed-back one."""
        src = CharSource.from_string("/x")
        slash = src.read()
        assert src.peek() == "x"
        src.unread(slash)
        assert src.read() == "/"
        assert src.read() == "x"
        assert (src.line, src.column) == (1, 2)

    def test_double_unread_raises(self):
        """A second pushback before a read violates the contract."""
        src = CharSource.from_string("ab")
        a = src.read()
        b = src.read()
        src.unread(b)
        with pytest.raises(PushbackError, match="pushback slot already holds"):
            src.unread(a)

    def test_unread_after_reread_is_allowed(self):
        src = CharSource.from_string("ab")
        src.unread(src.read())
        src.unread(src.read())
        assert src.read() == "a"

    def test_unread_newline_raises(self):
        """The previous line's width is unknown, so newlines cannot be unread."""
        src = CharSource.from_string("\nx")
        src.read()
        with pytest.raises(PushbackError, match="newline"):
            src.unread("\n")

    def test_unread_end_of_input_is_noop(self):
        src = CharSource.from_string("a")
        src.read()
        src.unread("")
        src.unread("")
        assert src.read() == ""
        assert (src.line, src.column) == (1, 1)
