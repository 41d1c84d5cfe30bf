"""Tests for word list loading and lookup."""

import pytest
from pydantic import ValidationError

from wordgrid.puzzle import Dictionary, parse_word_list


class TestParsing:
    """Test cases for one-word-per-line parsing."""

    def test_trims_and_uppercases(self):
        """Whitespace is stripped and words are uppercased."""
        assert parse_word_list(" cat \nDog\r\n") == ["CAT", "DOG"]

    def test_drops_blank_lines(self):
        """Blank and whitespace-only lines are skipped."""
        assert parse_word_list("\n\n  \nowl\n") == ["OWL"]


class TestDictionary:
    """Test cases for the Dictionary model."""

    def test_valid_word(self):
        """Known words are accepted."""
        d = Dictionary(valid_words=["TEST", "WORD", "HELLO"], hidden_words=["SECRET", "HIDDEN"])
        assert d.is_valid_word("TEST") is True

    def test_invalid_word(self):
        """Unknown words are rejected."""
        d = Dictionary(valid_words=["TEST"])
        assert d.is_valid_word("INVALID") is False

    def test_lookup_is_case_sensitive(self):
        """Lookups expect uppercase input."""
        d = Dictionary(valid_words=["test"])
        assert d.is_valid_word("TEST") is True
        assert d.is_valid_word("test") is False

    def test_hidden_words_keep_order(self):
        """Hidden words are normalised but keep their order."""
        d = Dictionary(valid_words=[], hidden_words=["secret", "hidden"])
        assert d.hidden_words == ("SECRET", "HIDDEN")

    def test_hidden_words_deduplicated(self):
        """Repeats and case variants of a hidden word collapse to one entry."""
        d = Dictionary(valid_words=[], hidden_words=["cat", "DOG", "Cat", "CAT"])
        assert d.hidden_words == ("CAT", "DOG")

    def test_from_text(self):
        """Build from raw texts."""
        d = Dictionary.from_text("cat\ndog\n", "cat\n")
        assert d.valid_words == frozenset({"CAT", "DOG"})
        assert d.hidden_words == ("CAT",)
        assert len(d) == 2

    def test_is_immutable(self):
        """Word lists cannot be reassigned."""
        d = Dictionary(valid_words=["CAT"])
        with pytest.raises(ValidationError):
            d.valid_words = frozenset({"DOG"})

    def test_from_files(self, tmp_path):
        """Load word lists from disk."""
        words = tmp_path / "words.txt"
        hidden = tmp_path / "hidden.txt"
        words.write_text("cat\nowl\n")
        hidden.write_text("owl\n")

        d = Dictionary.from_files(words, hidden)
        assert d.is_valid_word("OWL")
        assert d.hidden_words == ("OWL",)

    def test_from_files_missing(self, tmp_path):
        """A missing file is an error."""
        with pytest.raises(FileNotFoundError):
            Dictionary.from_files(tmp_path / "nope.txt")

    def test_packaged_defaults(self):
        """The packaged lists load and every hidden word is a valid word."""
        d = Dictionary.from_files()
        assert len(d) > 100
        assert d.hidden_words
        for word in d.hidden_words:
            assert d.is_valid_word(word)
