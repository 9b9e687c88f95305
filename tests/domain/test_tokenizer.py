"""Tests for domain/tokenizer.py — slug, arguments and raw tail."""

import pytest

from cmdbot.domain.tokenizer import tokenize


class TestTokenize:
    def test_spacing_preserved_in_tail(self):
        parsed = tokenize("!test  hello   world")
        assert parsed.command == "!test"
        assert parsed.arguments == ("hello", "world")
        assert parsed.argument_tail == "hello   world"

    def test_command_only(self):
        parsed = tokenize("!ping")
        assert parsed.command == "!ping"
        assert parsed.arguments == ()
        assert parsed.argument_tail == ""

    def test_command_with_trailing_space(self):
        parsed = tokenize("!ping ")
        assert parsed.arguments == ()
        assert parsed.argument_tail == ""

    def test_newlines_kept_in_tail(self):
        parsed = tokenize("!say line one\n\nline two")
        assert parsed.arguments == ("line", "one", "line", "two")
        assert parsed.argument_tail == "line one\n\nline two"

    def test_newline_after_slug(self):
        parsed = tokenize("!code\nprint(1)")
        assert parsed.command == "!code"
        assert parsed.argument_tail == "print(1)"

    def test_slug_case_kept(self):
        assert tokenize("!TestCommand a").command == "!TestCommand"

    def test_slug_and_tail_rebuild_text(self):
        text = "!echo  some\tmixed   spacing"
        parsed = tokenize(text)
        assert text.startswith(parsed.command)
        assert text.endswith(parsed.argument_tail)
        assert parsed.command + " " + parsed.argument_tail != text  # spacing kept, not normalized

    def test_empty_text_raises(self):
        with pytest.raises(ValueError):
            tokenize("")

    def test_whitespace_only_raises(self):
        with pytest.raises(ValueError):
            tokenize("   \n ")
