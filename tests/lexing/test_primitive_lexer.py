"""
Unit tests for the default character-level lexer.
"""

import pytest

from query_tokens.lexing.primitive import primitive_tokens


class TestPrimitiveTokens:
    """Tests for primitive_tokens()."""
    
    def test_bare_operator_characters_are_split(self):
        """Each punctuation character is its own primitive."""
        assert list(primitive_tokens("a<=b")) == ["a", "<", "=", "b"]
    
    def test_whitespace_is_dropped(self):
        """Whitespace separates tokens and is not emitted."""
        assert list(primitive_tokens("  select\t*\nfrom  t ")) == ["select", "*", "from", "t"]
    
    def test_empty_text_yields_nothing(self):
        """Empty and blank input produce no tokens."""
        assert list(primitive_tokens("")) == []
        assert list(primitive_tokens("   ")) == []
    
    @pytest.mark.parametrize("text", ["12", "3.5", ".5", "1e10", "2.5E-3"])
    def test_numbers_are_single_tokens(self, text):
        """Numeric literals are not split at the decimal point or exponent."""
        assert list(primitive_tokens(text)) == [text]
    
    def test_dotted_identifier_is_one_word(self):
        """Qualified names stay together."""
        assert list(primitive_tokens("t.col=1")) == ["t.col", "=", "1"]
    
    def test_dotted_digits_are_one_word(self):
        """A number followed by another dot is treated as a dotted word."""
        assert list(primitive_tokens("1.2.3")) == ["1.2.3"]
    
    def test_identifier_with_leading_digits_is_one_word(self):
        """Digits followed by letters form a word, not a number."""
        assert list(primitive_tokens("12abc")) == ["12abc"]
    
    def test_quoted_string_keeps_quotes_and_spaces(self):
        """Quoted strings are one token, quotes included."""
        assert list(primitive_tokens("name = 'a b'")) == ["name", "=", "'a b'"]
    
    def test_doubled_quote_escape(self):
        """A doubled quote does not close the string."""
        assert list(primitive_tokens("'O''Brien'")) == ["'O''Brien'"]
    
    def test_backslash_escape(self):
        """A backslash-escaped quote does not close the string."""
        assert list(primitive_tokens(r'"say \"hi\"" x')) == [r'"say \"hi\""', "x"]
    
    def test_unterminated_string_runs_to_end(self):
        """An unterminated quote swallows the rest of the input."""
        assert list(primitive_tokens("a = 'oops b")) == ["a", "=", "'oops b"]
    
    def test_parentheses_and_commas(self):
        """Grouping punctuation is split out."""
        assert list(primitive_tokens("in (1,2)")) == ["in", "(", "1", ",", "2", ")"]
