"""
BASIC Lexer (Tokenizer)
=======================

This module converts BASIC source text into a stream of tokens. Tokens
are produced one at a time on demand, so the translator never needs the
whole token list in memory.

Token Categories
----------------
- Keywords: LABEL, GOTO, PRINT, INPUT, LET, IF, THEN, ENDIF, WHILE,
  REPEAT, ENDWHILE (exact, case-sensitive)
- Identifiers: a letter followed by letters and digits
- Numbers: 123, 3.14 (kept as raw text, never converted)
- Strings: "double quoted", single line, no escapes
- Operators: = + - * / == != < <= > >=
- NEWLINE terminates a statement; spaces, tabs and carriage returns
  are skipped

Comments
--------
A '#' starts a comment that runs to the end of the line. The newline
itself is still returned as a token.

Example Usage
-------------
>>> from vtbasic.translator.lexer import Lexer
>>> for token in Lexer('LET a = 1.5').tokenize():
...     print(token)
Token(LET, 'LET', 1:1)
Token(IDENTIFIER, 'a', 1:5)
Token(EQ, '=', 1:7)
Token(NUMBER, '1.5', 1:9)
Token(NEWLINE, '\\n', 1:12)
Token(EOF, '', 2:1)
"""

from typing import Iterator, Optional
import string

from vtbasic.errors import SourceLocation
from vtbasic.translator.tokens import Token, TokenType, KEYWORDS
from vtbasic.translator.errors import (
    InvalidCharacterError,
    MalformedNumberError,
    IllegalStringCharacterError,
    UnterminatedStringError,
)


# Returned by advance() and peek() once the input is exhausted
EOF_CHAR = "\0"


class Lexer:
    """
    Tokenizes BASIC source code.

    A sentinel newline is appended to the source so the last statement is
    always terminated. The lexer keeps the character under the read
    position in ``current_char``; ``next_token()`` classifies it, consumes
    the whole lexeme and returns the token.

    Usage:
        lexer = Lexer(source_text, filename)
        token = lexer.next_token()

    Attributes:
        source: The source being tokenized (with the sentinel newline)
        filename: Name of the source file (for error reporting)
        current_char: Character at the read position, or EOF_CHAR
    """

    IDENT_START = string.ascii_letters
    IDENT_CHARS = string.ascii_letters + string.digits

    # Whitespace that does not end a statement
    WHITESPACE = " \t\r"

    # Characters that would corrupt the emitted printf format
    STRING_FORBIDDEN = "\r\t\\%"

    SINGLE_CHAR_OPERATORS = {
        "+": TokenType.PLUS,
        "-": TokenType.MINUS,
        "*": TokenType.ASTERISK,
        "/": TokenType.SLASH,
    }

    def __init__(self, source: str, filename: str = "<input>"):
        """
        Initialize the lexer with source code.

        Args:
            source: The BASIC source code to tokenize
            filename: Name of the source file (for error messages)
        """
        self.source = source + "\n"
        self.filename = filename
        self.current_char = ""

        # Position tracking
        self._pos = -1
        self._line = 1
        self._column = 0
        self._line_start_pos = 0

        self.advance()

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        """Check if the read position has passed the end of source."""
        return self._pos >= len(self.source)

    def advance(self) -> str:
        """
        Move the read position forward by one character.

        Safe to call past the end of input: the position stops moving and
        ``current_char`` stays EOF_CHAR.
        """
        if self._at_end():
            return self.current_char

        if self.current_char == "\n":
            self._line += 1
            self._column = 0
            self._line_start_pos = self._pos + 1

        self._pos += 1
        self._column += 1

        if self._at_end():
            self.current_char = EOF_CHAR
        else:
            self.current_char = self.source[self._pos]
        return self.current_char

    def peek(self) -> str:
        """Return the character after the current one without consuming it."""
        if self._pos + 1 >= len(self.source):
            return EOF_CHAR
        return self.source[self._pos + 1]

    # =========================================================================
    # Whitespace and Comment Handling
    # =========================================================================

    def _skip_whitespace(self) -> None:
        """Skip spaces, tabs and carriage returns (not newlines)."""
        while not self._at_end() and self.current_char in self.WHITESPACE:
            self.advance()

    def _skip_comment(self) -> None:
        """Skip a '#' comment up to, but not including, the newline."""
        if self.current_char == "#":
            while not self._at_end() and self.current_char != "\n":
                self.advance()

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def next_token(self) -> Token:
        """
        Return the next token from the source.

        Once the input is exhausted every call returns an EOF token.

        Raises:
            LexicalError: If the input cannot be tokenized
        """
        self._skip_whitespace()
        self._skip_comment()

        line = self._line
        column = self._column
        char = self.current_char

        if self._at_end():
            return self._make_token("", TokenType.EOF, line, column)

        if char in self.SINGLE_CHAR_OPERATORS:
            token = self._make_token(char, self.SINGLE_CHAR_OPERATORS[char], line, column)
        elif char in "=<>!":
            token = self._scan_operator(line, column)
        elif char == '"':
            token = self._scan_string(line, column)
        elif char in string.digits:
            token = self._scan_number(line, column)
        elif char in self.IDENT_START:
            token = self._scan_identifier(line, column)
        elif char == "\n":
            token = self._make_token(char, TokenType.NEWLINE, line, column)
        else:
            raise InvalidCharacterError(
                char,
                SourceLocation(self.filename, line, column),
                self._current_line(),
            )

        # Every scanner leaves the read position on the lexeme's last character
        self.advance()
        return token

    def tokenize(self) -> Iterator[Token]:
        """
        Generate all remaining tokens, ending with a single EOF token.

        Raises:
            LexicalError: If the input cannot be tokenized
        """
        while True:
            token = self.next_token()
            yield token
            if token.kind == TokenType.EOF:
                return

    def _scan_operator(self, line: int, column: int) -> Token:
        """Scan '=', '==', '!=', '<', '<=', '>' or '>='."""
        char = self.current_char

        if self.peek() == "=":
            self.advance()
            kinds = {
                "=": TokenType.EQEQ,
                "!": TokenType.NOTEQ,
                "<": TokenType.LTEQ,
                ">": TokenType.GTEQ,
            }
            return self._make_token(char + "=", kinds[char], line, column)

        if char == "!":
            raise InvalidCharacterError(
                char,
                SourceLocation(self.filename, line, column),
                self._current_line(),
                hint="expected '!=', got '!'",
            )

        kinds = {
            "=": TokenType.EQ,
            "<": TokenType.LT,
            ">": TokenType.GT,
        }
        return self._make_token(char, kinds[char], line, column)

    def _scan_string(self, line: int, column: int) -> Token:
        """
        Scan a double-quoted string literal.

        The token text is the contents between the quotes, unmodified.
        """
        self.advance()  # consume opening "
        start = self._pos

        while self.current_char != '"':
            if self._at_end() or self.current_char == "\n":
                raise UnterminatedStringError(
                    SourceLocation(self.filename, line, column),
                    self._current_line(),
                )
            if self.current_char in self.STRING_FORBIDDEN:
                raise IllegalStringCharacterError(
                    self.current_char,
                    SourceLocation(self.filename, self._line, self._column),
                    self._current_line(),
                )
            self.advance()

        return self._make_token(self.source[start:self._pos], TokenType.STRING, line, column)

    def _scan_number(self, line: int, column: int) -> Token:
        """Scan digits with an optional fractional part."""
        start = self._pos

        while self.peek() in string.digits:
            self.advance()

        if self.peek() == ".":
            self.advance()
            if self.peek() not in string.digits:
                raise MalformedNumberError(
                    self.source[start:self._pos + 1],
                    SourceLocation(self.filename, line, column),
                    self._current_line(),
                )
            while self.peek() in string.digits:
                self.advance()

        return self._make_token(self.source[start:self._pos + 1], TokenType.NUMBER, line, column)

    def _scan_identifier(self, line: int, column: int) -> Token:
        """Scan an identifier, classifying it as a keyword if it is one."""
        start = self._pos

        while self.peek() in self.IDENT_CHARS:
            self.advance()

        text = self.source[start:self._pos + 1]
        kind = KEYWORDS.get(text, TokenType.IDENTIFIER)
        return self._make_token(text, kind, line, column)

    # =========================================================================
    # Utility Methods
    # =========================================================================

    def _make_token(
        self,
        text: str,
        kind: TokenType,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ) -> Token:
        return Token(
            text=text,
            kind=kind,
            line=line or self._line,
            column=column or self._column,
            filename=self.filename,
        )

    def _current_line(self) -> str:
        """Get the current line of source text for error reporting."""
        line_end = self.source.find("\n", self._line_start_pos)
        if line_end == -1:
            line_end = len(self.source)
        return self.source[self._line_start_pos:line_end]
