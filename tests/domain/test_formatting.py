"""Tests for domain/formatting.py — pure Python, no Discord dependency."""

import pytest

from cmdbot.domain.formatting import (
    CUSTOM_EMOJI_RE,
    normalize_reaction,
    sanitise_mentions,
    split_message,
)
from cmdbot.domain.models import OutboundChunk


def _texts(chunks):
    return [c.text for c in chunks]


class TestSanitiseMentions:
    def test_everyone(self):
        assert sanitise_mentions("@everyone look") == "@\u0435veryone look"

    def test_here(self):
        assert sanitise_mentions("hi @here") == "hi @h\u0435re"

    def test_trims(self):
        assert sanitise_mentions("  hello \n") == "hello"

    def test_user_mentions_untouched(self):
        assert sanitise_mentions("<@1234> @someone") == "<@1234> @someone"

    def test_idempotent(self):
        text = "  @everyone and @here, again @everyone  "
        once = sanitise_mentions(text)
        assert sanitise_mentions(once) == once
        assert "@everyone" not in once
        assert "@here" not in once


class TestSplitMessage:
    def test_short_text_single_chunk(self):
        chunks = split_message("  hello @everyone  ", limit=2000)
        assert chunks == [OutboundChunk(index=0, total=1, text="hello @\u0435veryone")]

    def test_exactly_limit(self):
        chunks = split_message("x" * 2000, limit=2000)
        assert _texts(chunks) == ["x" * 2000]

    def test_empty(self):
        assert split_message("", limit=2000) == []

    def test_whitespace_only(self):
        assert split_message(" \n\t ", limit=2000) == []

    def test_none(self):
        assert split_message(None) == []

    def test_breaks_on_newline(self):
        text = "a" * 1900 + "\n" + "b" * 2599
        assert len(text) == 4500
        chunks = split_message(text, limit=2000)
        assert _texts(chunks) == ["a" * 1900, "b" * 2000, "b" * 599]

    def test_hard_cut_without_whitespace(self):
        chunks = split_message("x" * 4500, limit=2000)
        assert [len(t) for t in _texts(chunks)] == [2000, 2000, 500]

    def test_newline_too_early_falls_back_to_space(self):
        # length 15, limit 10 -> leeway 5; newline at 1, space at 8
        chunks = split_message("a\nbcdefg hijklm", limit=10)
        assert _texts(chunks) == ["a\nbcdefg", "hijklm"]

    def test_space_too_early_forces_hard_cut(self):
        chunks = split_message("a bcdefghijklmn", limit=10)
        assert _texts(chunks) == ["a bcdefghi", "jklmn"]

    def test_never_splits_words(self):
        text = " ".join(["word"] * 1000)
        chunks = split_message(text, limit=2000)
        assert len(chunks) == 3
        for chunk in chunks:
            assert len(chunk.text) <= 2000
            assert set(chunk.text.split(" ")) == {"word"}
        assert " ".join(_texts(chunks)) == text

    def test_chunk_indices(self):
        chunks = split_message("x" * 25, limit=10)
        assert [(c.index, c.total) for c in chunks] == [(0, 3), (1, 3), (2, 3)]
        assert [c.is_last for c in chunks] == [False, False, True]

    def test_sanitised_before_splitting(self):
        text = "@everyone " * 300
        chunks = split_message(text, limit=2000)
        assert all("@everyone" not in c.text for c in chunks)
        assert " ".join(_texts(chunks)).split() == ["@\u0435veryone"] * 300

    def test_invalid_limit(self):
        with pytest.raises(ValueError):
            split_message("text", limit=0)


class TestNormalizeReaction:
    def test_static_custom(self):
        assert normalize_reaction("<:name:123>") == "name:123"

    def test_animated_custom(self):
        assert normalize_reaction("<a:name:123>") == "name:123"

    def test_already_normalized(self):
        assert normalize_reaction("name:123") == "name:123"

    def test_unicode_untouched(self):
        assert normalize_reaction("\U0001F44D") == "\U0001F44D"

    def test_regex_groups(self):
        m = CUSTOM_EMOJI_RE.match("<a:party_parrot:987654321>")
        assert m.groups() == ("party_parrot", "987654321")
