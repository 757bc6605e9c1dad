# =============================================================================
# test_lexer.py - Lexer Unit Tests
# =============================================================================
# Tests for the BASIC lexer/tokenizer.
#
# Test coverage includes:
#   - Keywords, identifiers and case sensitivity
#   - Number formats: integers and decimals
#   - String literals and forbidden characters
#   - All operators, including two-character lookahead forms
#   - Comments, whitespace and newline handling
#   - End-of-input behavior and source positions
#   - Error conditions
# =============================================================================

import dataclasses

import pytest

from vtbasic.errors import VTBasicError
from vtbasic.translator.lexer import Lexer, EOF_CHAR
from vtbasic.translator.tokens import Token, TokenType, KEYWORDS
from vtbasic.translator.errors import (
    LexicalError,
    InvalidCharacterError,
    MalformedNumberError,
    IllegalStringCharacterError,
    UnterminatedStringError,
)


# =============================================================================
# Helper Functions
# =============================================================================

def tokenize(source: str) -> list[Token]:
    """Tokenize source, dropping the trailing NEWLINE and EOF tokens."""
    tokens = list(Lexer(source, "<test>").tokenize())
    assert tokens[-1].kind == TokenType.EOF
    assert tokens[-2].kind == TokenType.NEWLINE
    return tokens[:-2]


def kinds(source: str) -> list[TokenType]:
    return [t.kind for t in tokenize(source)]


# =============================================================================
# Basic Token Recognition Tests
# =============================================================================

class TestBasicTokens:
    """Test basic token recognition for simple inputs."""

    def test_empty_source(self):
        """Empty source yields the sentinel newline, then EOF."""
        tokens = list(Lexer("").tokenize())
        assert [t.kind for t in tokens] == [TokenType.NEWLINE, TokenType.EOF]

    def test_whitespace_only(self):
        """Spaces, tabs and carriage returns produce no tokens."""
        assert tokenize("  \t \r  ") == []

    def test_let_statement(self):
        """A full LET statement tokenizes in order."""
        assert kinds("LET a = 1.5") == [
            TokenType.LET,
            TokenType.IDENTIFIER,
            TokenType.EQ,
            TokenType.NUMBER,
        ]

    def test_lexeme_text_preserved(self):
        """Each token carries its exact source text."""
        texts = [t.text for t in tokenize("LET total = 10.25")]
        assert texts == ["LET", "total", "=", "10.25"]

    def test_newlines_are_tokens(self):
        """Newlines terminate statements and are not skipped."""
        assert kinds("PRINT 1\n\nPRINT 2") == [
            TokenType.PRINT,
            TokenType.NUMBER,
            TokenType.NEWLINE,
            TokenType.NEWLINE,
            TokenType.PRINT,
            TokenType.NUMBER,
        ]

    def test_carriage_return_skipped(self):
        """CRLF line endings produce a single NEWLINE per line."""
        assert kinds("PRINT 1\r\nPRINT 2") == [
            TokenType.PRINT,
            TokenType.NUMBER,
            TokenType.NEWLINE,
            TokenType.PRINT,
            TokenType.NUMBER,
        ]

    def test_source_without_trailing_newline(self):
        """The sentinel newline terminates the last statement."""
        tokens = list(Lexer("PRINT 1").tokenize())
        assert tokens[-2].kind == TokenType.NEWLINE
        assert tokens[-1].kind == TokenType.EOF


# =============================================================================
# Keyword and Identifier Tests
# =============================================================================

class TestKeywords:
    """Test keyword classification."""

    @pytest.mark.parametrize("word", [
        "LABEL", "GOTO", "PRINT", "INPUT", "LET", "IF",
        "THEN", "ENDIF", "WHILE", "REPEAT", "ENDWHILE",
    ])
    def test_all_keywords(self, word):
        """Every keyword maps to its own token type."""
        tokens = tokenize(word)
        assert len(tokens) == 1
        assert tokens[0].kind == TokenType[word]
        assert tokens[0].kind.is_keyword

    def test_keyword_table_size(self):
        """There are exactly eleven keywords."""
        assert len(KEYWORDS) == 11

    def test_keywords_case_sensitive(self):
        """Lowercase keywords are ordinary identifiers."""
        assert kinds("print let If") == [TokenType.IDENTIFIER] * 3

    def test_keyword_prefix_is_identifier(self):
        """A keyword followed by more letters or digits is an identifier."""
        tokens = tokenize("PRINTER LET1")
        assert [t.kind for t in tokens] == [TokenType.IDENTIFIER, TokenType.IDENTIFIER]
        assert [t.text for t in tokens] == ["PRINTER", "LET1"]

    def test_identifier_with_digits(self):
        """Identifiers may contain digits after the first letter."""
        tokens = tokenize("x1y2")
        assert tokens[0].kind == TokenType.IDENTIFIER
        assert tokens[0].text == "x1y2"

    def test_identifiers_case_sensitive(self):
        """Identifiers keep their case."""
        assert [t.text for t in tokenize("abc ABC")] == ["abc", "ABC"]


# =============================================================================
# Number Format Tests
# =============================================================================

class TestNumbers:
    """Test number literal recognition."""

    def test_integer(self):
        tokens = tokenize("123")
        assert tokens[0].kind == TokenType.NUMBER
        assert tokens[0].text == "123"

    def test_decimal(self):
        """Decimal numbers keep their raw text."""
        tokens = tokenize("3.140")
        assert tokens[0].kind == TokenType.NUMBER
        assert tokens[0].text == "3.140"

    def test_number_followed_by_operator(self):
        assert kinds("2*3") == [TokenType.NUMBER, TokenType.ASTERISK, TokenType.NUMBER]

    def test_trailing_point_is_error(self):
        """A decimal point must be followed by a digit."""
        with pytest.raises(MalformedNumberError, match="malformed number '1.'"):
            tokenize("1.")

    def test_point_followed_by_letter_is_error(self):
        with pytest.raises(MalformedNumberError):
            tokenize("LET a = 5.x")

    def test_leading_point_is_error(self):
        """Numbers must start with a digit."""
        with pytest.raises(InvalidCharacterError):
            tokenize(".5")


# =============================================================================
# String Literal Tests
# =============================================================================

class TestStrings:
    """Test string literal recognition."""

    def test_simple_string(self):
        """String text excludes the quotes."""
        tokens = tokenize('"hello, world"')
        assert tokens[0].kind == TokenType.STRING
        assert tokens[0].text == "hello, world"

    def test_empty_string(self):
        tokens = tokenize('""')
        assert tokens[0].kind == TokenType.STRING
        assert tokens[0].text == ""

    def test_string_keeps_keywords_and_symbols(self):
        """Keywords, '#' and operators inside strings are literal text."""
        tokens = tokenize('PRINT "LET # x == y"')
        assert tokens[1].text == "LET # x == y"
        assert len(tokens) == 2

    @pytest.mark.parametrize("char", ["\t", "\r", "\\", "%"])
    def test_forbidden_characters(self, char):
        """Characters that would corrupt the printf format are rejected."""
        with pytest.raises(IllegalStringCharacterError) as exc_info:
            tokenize(f'"a{char}b"')
        assert exc_info.value.char == char

    def test_unterminated_string(self):
        """A string cannot run past the end of the line."""
        with pytest.raises(UnterminatedStringError, match="unterminated string literal"):
            tokenize('PRINT "oops\nPRINT 1')

    def test_unterminated_at_end_of_input(self):
        with pytest.raises(UnterminatedStringError):
            tokenize('"no end')


# =============================================================================
# Operator Tests
# =============================================================================

class TestOperators:
    """Test operator recognition, including two-character forms."""

    def test_all_operators(self):
        assert kinds("= + - * / == != < <= > >=") == [
            TokenType.EQ,
            TokenType.PLUS,
            TokenType.MINUS,
            TokenType.ASTERISK,
            TokenType.SLASH,
            TokenType.EQEQ,
            TokenType.NOTEQ,
            TokenType.LT,
            TokenType.LTEQ,
            TokenType.GT,
            TokenType.GTEQ,
        ]

    def test_operators_are_flagged(self):
        assert all(t.kind.is_operator for t in tokenize("= + - * / == != < <= > >="))

    def test_two_char_operator_text(self):
        texts = [t.text for t in tokenize("== != <= >=")]
        assert texts == ["==", "!=", "<=", ">="]

    def test_operators_without_spaces(self):
        """Lookahead splits adjacent operators correctly."""
        assert kinds("a<=b==c") == [
            TokenType.IDENTIFIER,
            TokenType.LTEQ,
            TokenType.IDENTIFIER,
            TokenType.EQEQ,
            TokenType.IDENTIFIER,
        ]

    def test_triple_equals(self):
        """'===' is '==' followed by '='."""
        assert kinds("===") == [TokenType.EQEQ, TokenType.EQ]

    def test_bare_bang_is_error(self):
        """'!' must be followed by '='."""
        with pytest.raises(InvalidCharacterError) as exc_info:
            tokenize("a ! b")
        assert exc_info.value.hint == "expected '!=', got '!'"


# =============================================================================
# Comment Tests
# =============================================================================

class TestComments:
    """Test '#' comment handling."""

    def test_full_line_comment(self):
        """A comment line still produces its newline."""
        assert kinds("# comment\nPRINT 1") == [
            TokenType.NEWLINE,
            TokenType.PRINT,
            TokenType.NUMBER,
        ]

    def test_trailing_comment(self):
        assert kinds("LET a = 1 # set a") == [
            TokenType.LET,
            TokenType.IDENTIFIER,
            TokenType.EQ,
            TokenType.NUMBER,
        ]

    def test_comment_with_special_characters(self):
        """Anything is allowed inside a comment."""
        assert kinds("PRINT 1 # $@! % \\ \"") == [TokenType.PRINT, TokenType.NUMBER]


# =============================================================================
# End of Input and Position Tests
# =============================================================================

class TestEndOfInput:
    """Test behavior at and past the end of input."""

    def test_eof_repeats(self):
        """next_token() keeps returning EOF once input is exhausted."""
        lexer = Lexer("")
        assert lexer.next_token().kind == TokenType.NEWLINE
        for _ in range(3):
            assert lexer.next_token().kind == TokenType.EOF

    def test_tokenize_yields_single_eof(self):
        tokens = list(Lexer("PRINT 1\n").tokenize())
        assert [t.kind for t in tokens].count(TokenType.EOF) == 1

    def test_advance_past_end(self):
        """advance() is safe to call repeatedly past the end."""
        lexer = Lexer("a")
        for _ in range(10):
            lexer.advance()
        assert lexer.current_char == EOF_CHAR
        assert lexer.peek() == EOF_CHAR

    def test_peek_does_not_consume(self):
        lexer = Lexer("ab")
        assert lexer.current_char == "a"
        assert lexer.peek() == "b"
        assert lexer.peek() == "b"
        assert lexer.current_char == "a"


class TestPositions:
    """Test line and column tracking."""

    def test_token_positions(self):
        tokens = tokenize("LET a = 1\nPRINT a")
        positions = [(t.text, t.line, t.column) for t in tokens]
        assert positions == [
            ("LET", 1, 1),
            ("a", 1, 5),
            ("=", 1, 7),
            ("1", 1, 9),
            ("\n", 1, 10),
            ("PRINT", 2, 1),
            ("a", 2, 7),
        ]

    def test_token_location(self):
        token = tokenize("  PRINT")[0]
        assert str(token.location) == "<test>:1:3"

    def test_token_is_immutable(self):
        token = tokenize("PRINT")[0]
        with pytest.raises(dataclasses.FrozenInstanceError):
            token.text = "LET"


# =============================================================================
# Error Reporting Tests
# =============================================================================

class TestErrors:
    """Test lexical error conditions and messages."""

    @pytest.mark.parametrize("char", ["$", "@", "(", ";", "_"])
    def test_invalid_characters(self, char):
        with pytest.raises(InvalidCharacterError):
            tokenize(f"LET a = {char}")

    def test_error_location_and_context(self):
        """Errors report file, line, column and the offending line."""
        with pytest.raises(InvalidCharacterError) as exc_info:
            tokenize("PRINT 1\nLET $")
        message = str(exc_info.value)
        assert message.startswith("<test>:2:5: error: invalid character '$'")
        assert "    LET $" in message
        assert message.splitlines()[2] == "        ^"

    def test_lexical_errors_share_base(self):
        """All lexical errors are LexicalError and VTBasicError."""
        for source in ["$", "1.", '"%"', '"x']:
            with pytest.raises(LexicalError):
                tokenize(source)
            with pytest.raises(VTBasicError):
                tokenize(source)
