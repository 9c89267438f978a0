"""Tests for the input line tokenizer and the option classifier."""

import pytest

from termcomplete.interface.parser import (
    escape_token,
    has_trailing_whitespace,
    is_option,
    token_start,
    tokenize,
)


class TestTokenize:
    """Shell-like splitting of the raw line."""

    def test_splits_on_whitespace(self) -> None:
        assert tokenize("anchor idl  init") == ["anchor", "idl", "init"]

    def test_empty_line(self) -> None:
        assert tokenize("") == []
        assert tokenize("   ") == []

    def test_quotes_group_words(self) -> None:
        assert tokenize('cat "my file.txt"') == ["cat", "my file.txt"]

    def test_unterminated_quote_falls_back_to_whitespace(self) -> None:
        """A quote still being typed must not break completion."""
        assert tokenize('cat "my fi') == ["cat", '"my', "fi"]


class TestTrailingWhitespace:
    """Detection of a fresh, empty token at the end of the line."""

    @pytest.mark.parametrize("line", ["anchor ", "anchor idl\t", " "])
    def test_trailing_whitespace(self, line: str) -> None:
        assert has_trailing_whitespace(line)

    @pytest.mark.parametrize("line", ["", "anchor", " anchor"])
    def test_no_trailing_whitespace(self, line: str) -> None:
        assert not has_trailing_whitespace(line)

    def test_escaped_space_is_part_of_the_token(self) -> None:
        assert not has_trailing_whitespace("cat my\\ ")
        assert has_trailing_whitespace("cat my\\\\ ")


class TestTokenStart:
    """Raw position of the token being typed."""

    def test_plain_token(self) -> None:
        assert token_start("anchor id") == 7

    def test_after_trailing_whitespace(self) -> None:
        assert token_start("anchor ") == 7

    def test_blank_line(self) -> None:
        assert token_start("") == 0
        assert token_start("   ") == 3

    def test_escaped_space_stays_in_token(self) -> None:
        assert token_start("cat my\\ f") == 4

    def test_quoted_token_starts_at_quote(self) -> None:
        assert token_start('cat "my fi') == 4
        assert token_start("cat 'a b' x") == 10


class TestEscapeToken:
    """Candidates are rendered back into shell syntax."""

    def test_plain_word_unchanged(self) -> None:
        assert escape_token("--cluster") == "--cluster"

    def test_backslash_escapes(self) -> None:
        assert escape_token("my file.txt") == "my\\ file.txt"
        assert escape_token("it's") == "it\\'s"

    def test_keeps_the_opening_quote(self) -> None:
        assert escape_token("abc", '"') == '"abc"'
        assert escape_token('say "hi"', '"') == '"say \\"hi\\""'
        assert escape_token("a b", "'") == "'a b'"

    @pytest.mark.parametrize("word", ["my file.txt", "it's", 'q"uote', "back\\slash"])
    @pytest.mark.parametrize("quote", ["", '"', "'"])
    def test_tokenizes_back_to_the_word(self, word: str, quote: str) -> None:
        assert tokenize("cat " + escape_token(word, quote)) == ["cat", word]


class TestIsOption:
    """Leading dash marks an option-like token."""

    @pytest.mark.parametrize("token", ["-v", "--verbose", "-", "--"])
    def test_option_like(self, token: str) -> None:
        assert is_option(token)

    @pytest.mark.parametrize("token", ["", "verbose", "a-b", None])
    def test_not_option_like(self, token) -> None:
        assert not is_option(token)
