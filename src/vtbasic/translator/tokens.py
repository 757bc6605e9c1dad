"""
BASIC Token Definitions
=======================

Token kinds, the keyword table, and the immutable Token value produced
by the lexer.
"""

from dataclasses import dataclass
from enum import Enum

from vtbasic.errors import SourceLocation


class TokenType(Enum):
    """
    Token kinds for the BASIC dialect.

    Values are grouped by hundreds: structural/literal kinds below 100,
    keywords in the 100s and operators in the 200s.
    """

    # === Structural Tokens ===
    EOF = -1
    NEWLINE = 0

    # === Literals ===
    NUMBER = 1
    IDENTIFIER = 2
    STRING = 3

    # === Keywords ===
    LABEL = 101
    GOTO = 102
    PRINT = 103
    INPUT = 104
    LET = 105
    IF = 106
    THEN = 107
    ENDIF = 108
    WHILE = 109
    REPEAT = 110
    ENDWHILE = 111

    # === Operators ===
    EQ = 201        # =
    PLUS = 202      # +
    MINUS = 203     # -
    ASTERISK = 204  # *
    SLASH = 205     # /
    EQEQ = 206      # ==
    NOTEQ = 207     # !=
    LT = 208        # <
    LTEQ = 209      # <=
    GT = 210        # >
    GTEQ = 211      # >=

    @property
    def is_keyword(self) -> bool:
        return 100 <= self.value < 200

    @property
    def is_operator(self) -> bool:
        return 200 <= self.value < 300


# Exact, case-sensitive keyword lookup
KEYWORDS: dict[str, TokenType] = {
    kind.name: kind for kind in TokenType if kind.is_keyword
}

# Plain '=' counts as a comparison operator too
COMPARISON_OPERATORS = frozenset({
    TokenType.EQ,
    TokenType.EQEQ,
    TokenType.NOTEQ,
    TokenType.LT,
    TokenType.LTEQ,
    TokenType.GT,
    TokenType.GTEQ,
})


@dataclass(frozen=True)
class Token:
    """
    A classified lexeme.

    Attributes:
        text: The exact source text matched (string contents without quotes)
        kind: The TokenType classification
        line: Line number in source (1-indexed)
        column: Column number in source (1-indexed)
        filename: Name of the source file
    """
    text: str
    kind: TokenType
    line: int = 1
    column: int = 1
    filename: str = "<input>"

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.text!r}, {self.line}:{self.column})"

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(self.filename, self.line, self.column)
