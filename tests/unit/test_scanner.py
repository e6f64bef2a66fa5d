"""
Tests for the tokenizer and line scanner.
"""

import re

import pytest

from selectspell.core.scanner import LineScanner
from selectspell.core.tokenizer import tokenize

# =============================================================================
# Tokenizer Tests
# =============================================================================


class TestTokenize:
    """Tests for tokenize()."""

    def test_offsets(self):
        """Tokens carry half-open column ranges."""
        tokens = list(tokenize("Helo wrold"))

        assert [(t.text, t.start, t.end) for t in tokens] == [
            ("Helo", 0, 4),
            ("wrold", 5, 10),
        ]

    def test_short_words_dropped(self):
        """Single-letter candidates are discarded."""
        assert [t.text for t in tokenize("I don't kno, a b cd")] == ["don't", "kno", "cd"]

    def test_min_length_configurable(self):
        assert [t.text for t in tokenize("a bb ccc", min_length=3)] == ["ccc"]

    def test_outer_apostrophes_not_included(self):
        """Word boundaries exclude quote-like apostrophes around a word."""
        tokens = list(tokenize("'tis' done"))

        assert [(t.text, t.start) for t in tokens] == [("tis", 1), ("done", 6)]

    def test_letters_glued_to_digits_skipped(self):
        """Letters followed by digits or underscores never match."""
        assert list(tokenize("abc1 x_y 2nd")) == []

    def test_ascii_boundaries(self):
        """Non-ASCII letters act as boundaries."""
        assert [t.text for t in tokenize("café")] == ["caf"]

    def test_empty_line(self):
        assert list(tokenize("")) == []

    @pytest.mark.parametrize(
        "line",
        [
            "The quick brown fox -- jumped!",
            "it's a 'quoted' word, isn't it?",
            "x y zz ... ab12 cd",
            "   leading and trailing   ",
        ],
    )
    def test_covers_every_run(self, line):
        """Tokens are exactly the bounded letter/apostrophe runs of length >= 2."""
        expected = [
            (m.group(0), m.start())
            for m in re.finditer(r"\b[a-zA-Z']+\b", line, re.ASCII)
            if len(m.group(0)) >= 2
        ]
        tokens = list(tokenize(line))

        assert [(t.text, t.start) for t in tokens] == expected
        for token in tokens:
            assert line[token.start : token.end] == token.text


# =============================================================================
# LineScanner Tests
# =============================================================================


class TestLineScanner:
    """Tests for LineScanner."""

    def test_finds_misspelled_words(self, oracle):
        scanner = LineScanner(oracle)

        spans = scanner.scan_line("Helo wrold", 4)

        assert [s.word for s in spans] == ["Helo", "wrold"]
        assert [(s.start.column, s.end.column) for s in spans] == [(0, 4), (5, 10)]
        assert all(s.line == 4 for s in spans)

    def test_correct_words_skipped(self, oracle):
        scanner = LineScanner(oracle)

        assert scanner.scan_line("the cat sat on the mat", 0) == []

    def test_sorted_by_column(self, oracle):
        scanner = LineScanner(oracle)

        spans = scanner.scan_line("teh cat caat don't wrold", 0)

        columns = [s.start.column for s in spans]
        assert columns == sorted(columns)
        assert [s.word for s in spans] == ["teh", "caat", "wrold"]

    def test_not_ready_without_oracle(self):
        """Without a dictionary the scan is empty rather than an error."""
        scanner = LineScanner()

        assert scanner.ready is False
        assert scanner.scan_line("Helo wrold", 0) == []

    def test_oracle_can_be_swapped(self, oracle, make_oracle):
        scanner = LineScanner(oracle)
        assert len(scanner.scan_line("Helo wrold", 0)) == 2

        scanner.oracle = make_oracle(words=["helo", "wrold"])

        assert scanner.scan_line("Helo wrold", 0) == []

    def test_replaced_word_not_reported_again(self, oracle):
        """A line fixed with a correct suggestion rescans clean at that span."""
        scanner = LineScanner(oracle)
        before = scanner.scan_line("Helo wrold", 0)
        fixed = "Hello" + "Helo wrold"[before[0].end.column :]

        after = scanner.scan_line(fixed, 0)

        assert [s.word for s in after] == ["wrold"]
        assert after[0].start.column == 6
